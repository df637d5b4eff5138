# kanatype/reading.py
"""表示用の文字列 (漢字まじり) から、タイピング用のひらがなの読みを作る"""
import logging
import re

from pykakasi import Kakasi

from kanatype.kana import kata_to_hira

# 日本語判定パターン
JAPANESE_PATTERN = re.compile(r'[ぁ-んァ-ヶ一-龯]')

_kks = None


def _kakasi():
    global _kks
    if _kks is None:
        _kks = Kakasi()
    return _kks


def to_hiragana(text):
    """漢字・カタカナを含む文字列をひらがなにする。

    日本語を含まない部分は kata_to_hira (NFKC) だけをかけてそのまま返す。
    """
    if not JAPANESE_PATTERN.search(text):
        return kata_to_hira(text)

    result_list = _kakasi().convert(text)
    reading = "".join([item['hira'] for item in result_list])
    logging.debug(f"reading for {text!r}: {reading!r}")
    return kata_to_hira(reading)
