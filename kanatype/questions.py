# kanatype/questions.py
"""
問題データの読み込みと出題順の管理。

問題ファイルの書式 (UTF-8):
    txt1                 ← レベルの区切り (以降の問題はレベル1)
    寿司,すし            ← 表示,かな
    東京                 ← 表示だけの場合は読みを自動で付ける
    # コメント
"""
import logging
import random
import re
import threading
from dataclasses import dataclass
from pathlib import Path

import requests

from kanatype.errors import KanaTypeError, QuestionFormatError, UnknownKanaError
from kanatype.kana import find_unknown_unit, kata_to_hira
from kanatype.reading import to_hiragana

LEVEL_PATTERN = re.compile(r"txt(\d+)")


@dataclass(frozen=True)
class Question:
    display: str
    kana: str
    level: int = 0


DEFAULT_QUESTIONS = (
    Question("寿司", "すし"),
    Question("鮪", "まぐろ"),
    Question("河童巻き", "かっぱまき"),
    Question("茶碗蒸し", "ちゃわんむし"),
    Question("お茶", "おちゃ"),
    Question("軍艦巻き", "ぐんかんまき"),
    Question("回転寿司", "かいてんずし"),
    Question("醤油", "しょうゆ"),
    Question("切符", "きっぷ"),
    Question("新幹線", "しんかんせん"),
    Question("雑誌", "ざっし"),
    Question("学校", "がっこう"),
    Question("東京", "とうきょう"),
    Question("こんにちは", "こんにちは"),
    Question("原因", "げんいん"),
    Question("ファイル", "ふぁいる"),
    Question("パーティー", "ぱーてぃー"),
    Question("ちょっと待って", "ちょっとまって"),
)


def parse_question_line(line, level=0, path="<string>", line_no=0):
    parts = [p.strip() for p in line.split(",")]
    if len(parts) > 2 or not parts[0]:
        raise QuestionFormatError(path, line_no, line)

    display = parts[0]
    if len(parts) == 2:
        if not parts[1]:
            raise QuestionFormatError(path, line_no, line)
        kana = kata_to_hira(parts[1])
    else:
        kana = to_hiragana(display)
    return Question(display, kana, level)


def parse_questions(lines, path="<string>"):
    """行のリストから Question を読み出す (かなの検査はしない)"""
    questions = []
    now_level = 0
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = LEVEL_PATTERN.fullmatch(line)
        if m:
            now_level = int(m.group(1))
            continue
        questions.append(parse_question_line(line, now_level, path, line_no))
    return questions


def validate_question(question):
    if not question.kana:
        raise KanaTypeError(f"empty kana for {question.display!r}")
    unknown = find_unknown_unit(question.kana)
    if unknown is not None:
        index, unit = unknown
        raise UnknownKanaError(question.kana, index, unit)


def validate_questions(questions):
    """打てない問題を (question, error) のリストで返す"""
    errors = []
    for q in questions:
        try:
            validate_question(q)
        except KanaTypeError as e:
            errors.append((q, e))
    return errors


def fetch_question_lines(url, timeout=10):
    """問題ファイルを URL から取ってくる"""
    headers = {"User-Agent": "kanatype (kana typing trainer)"}
    try:
        res = requests.get(url, headers=headers, timeout=timeout)
        res.raise_for_status()  # HTTPエラーチェック
    except requests.exceptions.RequestException as e:
        logging.error(f"Failed to fetch questions from {url}: {e}")
        raise
    res.encoding = "utf-8"
    return res.text.splitlines()


def load_questions(path, level=None, strict=False):
    """問題ファイルを読み込む。

    path が http(s):// で始まるときはダウンロードする。
    strict=False のときは打てない問題をログに出して捨てる。
    strict=True なら最初のエラーをそのまま投げる。
    """
    if str(path).startswith(("http://", "https://")):
        questions = parse_questions(fetch_question_lines(str(path)), str(path))
    else:
        path = Path(path)
        with path.open("r", encoding="utf-8") as file:
            questions = parse_questions(file.read().splitlines(), str(path))

    if level is not None:
        questions = [q for q in questions if q.level == level]

    errors = validate_questions(questions)
    if errors and strict:
        raise errors[0][1]
    for q, e in errors:
        logging.error(f"Skipping question {q.display!r}: {e}")

    bad = {q for q, _ in errors}
    valid = [q for q in questions if q not in bad]
    logging.info(f"Loaded {len(valid)} questions from {path}")
    return valid


class QuestionSequencer:
    """シャッフルした問題を順番に出す。

    次の問題へ進むのは schedule_advance で予約し、
    start / cancel_pending を呼ぶと予約は無効になる (古い予約は発火しない)。
    """

    def __init__(self, questions, rng=None, timer_factory=threading.Timer, lock=None):
        self.questions = list(questions)
        self.index = 0
        self._order = []
        self._rng = rng or random.Random()
        self._timer_factory = timer_factory
        self._timer = None
        self._generation = 0
        self._lock = lock or threading.RLock()

    def start(self):
        """シャッフルしてセット"""
        with self._lock:
            self._cancel()
            self._order = self._rng.sample(self.questions, len(self.questions))
            self.index = 0

    @property
    def order(self):
        return list(self._order)

    @property
    def current(self):
        if self.index < len(self._order):
            return self._order[self.index]
        return None

    @property
    def finished(self):
        return self.index >= len(self._order)

    @property
    def pending(self):
        return self._timer is not None

    def advance(self):
        with self._lock:
            self._cancel()
            self.index += 1
            return self.current

    def schedule_advance(self, delay, callback):
        """delay 秒後に次の問題へ進め、callback(次の問題 or None) を呼ぶ"""
        with self._lock:
            self._cancel()
            generation = self._generation

            def fire():
                with self._lock:
                    # start/cancel された後の古い予約
                    if generation != self._generation:
                        return
                    timer = self._timer
                    self._generation += 1
                    self.index += 1
                    # callback が終わるまで pending のまま
                    try:
                        callback(self.current)
                    finally:
                        if self._timer is timer:
                            self._timer = None

            self._timer = self._timer_factory(delay, fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel_pending(self):
        with self._lock:
            self._cancel()

    def _cancel(self):
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
