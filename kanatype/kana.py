# kanatype/kana.py
import unicodedata

from kanatype.romaji_table import DIGRAPHS, GEMINATE, is_known


def kata_to_hira(s):
    """カタカナをひらがなに変換する (NFKC正規化を含む)"""
    s = unicodedata.normalize('NFKC', s)
    result = []
    for ch in s:
        code = ord(ch)
        if 0x30A1 <= code <= 0x30F6:
            result.append(chr(code - 0x60))
        else:
            result.append(ch)
    return "".join(result)


def split_units(s: str) -> list[str]:
    """ひらがな文字列を表に基づいて分割する (拗音などを考慮)

    表にない文字もそのまま1文字の単位として返すので、
    判定は find_unknown_unit で行う。
    """
    i = 0
    result = []
    while i < len(s):
        # 2文字がテーブルにあるか (例: "きゃ")
        if i + 1 < len(s) and s[i:i + 2] in DIGRAPHS:
            result.append(s[i:i + 2])
            i += 2
        else:
            result.append(s[i])
            i += 1
    return result


def find_unknown_unit(s: str):
    """打てない単位を探す。

    Returns:
        (int, str) | None: 最初に見つかった (先頭からの位置, 文字)。
        全部打てるなら None。
    """
    pos = 0
    for unit in split_units(s):
        if not (is_known(unit) or unit == GEMINATE):
            return pos, unit
        pos += len(unit)
    return None
