# kanatype/engine.py
"""
ローマ字入力の判定エンジン。

問題のかなの先頭から「次に打てるローマ字の候補」を持っておき、
キーが押されるたびに候補を絞り込む。どれかの候補を打ち切ったら、
その候補が持つ消費文字数 (1 か 2) だけかなを進めて候補を作り直す。

候補の優先順位 (ヒント表示と同時完了時の採用順):
    1. 2文字結合 (しゃ → sha, sya, ...)
    2. 1文字 (し → shi, si, ...)
    3. 促音 (っ の次の子音を重ねる: かっぱ の p)
    4. 撥音 (ん の後ろが母音・や行・な行以外なら "n" 1回でもよい)
同じ段の中では表に書いた順。
ただし撥音の "n" を受け付けるときは ん の候補の先頭に置く (ヒントは "n")。
"""
from dataclasses import dataclass
from enum import Enum

from kanatype.errors import KanaTypeError, UnknownKanaError
from kanatype.kana import find_unknown_unit
from kanatype.romaji_table import DIGRAPHS, GEMINATE, MONOGRAPHS, NASAL, VOWELS


@dataclass(frozen=True)
class MatchCandidate:
    remaining: str  # まだ打っていない部分
    consume: int    # 打ち切ったときに消費するかなの文字数

    def __post_init__(self):
        if self.consume not in (1, 2):
            raise ValueError(f"consume must be 1 or 2, got {self.consume}")


@dataclass(frozen=True)
class EngineState:
    remaining_kana: str
    candidates: tuple
    typed_display: str


class Outcome(Enum):
    MISS = "miss"
    ACCEPTED = "accepted"              # 途中 (sh -> sha の s を打った段階など)
    UNIT_COMPLETED = "unit_completed"  # 1単位打ち切ったが、かなはまだ残っている
    COMPLETED = "completed"            # 問題のかなを全部打ち切った

    @property
    def accepted(self):
        return self is not Outcome.MISS

    @property
    def completed(self):
        return self is Outcome.COMPLETED


def _unit_romaji(kana):
    """kana の先頭単位の読み方を (結合文字 → 1文字) の順で返す"""
    romaji = []
    if len(kana) >= 2 and kana[:2] in DIGRAPHS:
        romaji.extend(DIGRAPHS[kana[:2]])
    romaji.extend(MONOGRAPHS.get(kana[:1], ()))
    return romaji


def _accepts_single_n(following):
    # かんい (kanni), こんや (konnya), そんな (sonna) は "nn" が必須
    romaji = _unit_romaji(following)
    if not romaji:
        return False
    return not any(r[0] in VOWELS or r[0] in "yn" for r in romaji)


def generate_candidates(kana: str) -> tuple:
    """残りのかなから、次に入力可能なローマ字候補を全部作る"""
    if not kana:
        return ()

    options = []

    # 1. 2文字結合 (しゃ)
    two = kana[:2]
    if len(two) == 2 and two in DIGRAPHS:
        options.extend(MatchCandidate(r, 2) for r in DIGRAPHS[two])

    # 2. 1文字 (あ、っ(xtu))
    one = kana[0]
    options.extend(MatchCandidate(r, 1) for r in MONOGRAPHS.get(one, ()))

    # 3. 促音 (っ + k -> k)
    # 例: 「かっぱ」の「っ」の時、次の「ぱ(pa)」の「p」を受け付ける
    if one == GEMINATE and len(kana) >= 2:
        consonants = []
        for r in _unit_romaji(kana[1:]):
            c = r[0]
            if c.isascii() and c.isalpha() and c not in VOWELS and c not in consonants:
                consonants.append(c)
        options.extend(MatchCandidate(c, 1) for c in consonants)

    # 4. 撥音 (かんと -> kanto)
    # "n" を打った時点で ん は打ち切りになる
    if one == NASAL and len(kana) >= 2 and _accepts_single_n(kana[1:]):
        options.insert(0, MatchCandidate("n", 1))

    return tuple(options)


class MatchingEngine:
    """
    ひらがな文字列に対するローマ字タイピング入力を判定するクラス。

    使用例:
    engine = MatchingEngine()
    engine.reset("きょうと")
    engine.submit_key("k")  # Outcome.ACCEPTED
    engine.submit_key("y")  # Outcome.ACCEPTED
    engine.submit_key("o")  # Outcome.UNIT_COMPLETED (きょ)
    engine.submit_key("a")  # Outcome.MISS
    engine.submit_key("u")  # Outcome.UNIT_COMPLETED (う)
    engine.submit_key("t")  # Outcome.ACCEPTED
    engine.submit_key("o")  # Outcome.COMPLETED
    """

    def __init__(self):
        self._target_kana = ""
        self._remaining_kana = ""
        self._typed_display = ""
        self._candidates = ()

    @property
    def target_kana(self):
        return self._target_kana

    @property
    def remaining_kana(self):
        return self._remaining_kana

    @property
    def typed_display(self):
        """画面表示用にユーザーが打ったローマ字"""
        return self._typed_display

    @property
    def candidates(self):
        return self._candidates

    @property
    def state(self):
        return EngineState(self._remaining_kana, self._candidates, self._typed_display)

    @property
    def typed_kana(self):
        # remaining_kana は減っていくので、全体長 - 残り長 = 入力済み長
        return self._target_kana[:len(self._target_kana) - len(self._remaining_kana)]

    @property
    def untyped_kana(self):
        return self._remaining_kana

    @property
    def is_complete(self):
        return bool(self._target_kana) and not self._remaining_kana

    def reset(self, target_kana: str):
        """新しい問題を設定する。空なら KanaTypeError、打てない文字があれば UnknownKanaError"""
        if not target_kana:
            raise KanaTypeError("target kana must not be empty")
        unknown = find_unknown_unit(target_kana)
        if unknown is not None:
            index, unit = unknown
            raise UnknownKanaError(target_kana, index, unit)

        self._target_kana = target_kana
        self._remaining_kana = target_kana
        self._typed_display = ""
        self._candidates = generate_candidates(target_kana)

    def submit_key(self, key: str) -> Outcome:
        """1キー分の入力を判定する。MISS のときは状態を一切変えない"""
        if len(key) != 1 or not any(c.remaining.startswith(key) for c in self._candidates):
            return Outcome.MISS

        self._typed_display += key

        # 今回打ったキーで始まるものだけ残し、そのキー文字を削る
        survivors = []
        completed = None
        for c in self._candidates:
            if not c.remaining.startswith(key):
                continue
            rest = MatchCandidate(c.remaining[1:], c.consume)
            if rest.remaining:
                survivors.append(rest)
            elif completed is None:
                completed = rest

        if completed is None:
            self._candidates = tuple(survivors)
            return Outcome.ACCEPTED

        # 文字消化 (ひらがなを進める)
        self._remaining_kana = self._remaining_kana[completed.consume:]
        self._candidates = generate_candidates(self._remaining_kana)
        if not self._remaining_kana:
            return Outcome.COMPLETED
        return Outcome.UNIT_COMPLETED

    def current_hint(self) -> str:
        """次に打つべきローマ字のヒント (判定には使わない)"""
        if self._candidates:
            return self._candidates[0].remaining
        return ""


def _replay(kana, keys):
    engine = MatchingEngine()
    engine.reset(kana)
    for key in keys:
        if engine.submit_key(key) is Outcome.MISS:
            return False
    return engine.is_complete


def _walk(kana):
    if not kana:
        yield ""
        return
    for c in generate_candidates(kana):
        for rest in _walk(kana[c.consume:]):
            yield c.remaining + rest


def spellings(kana: str, limit=None):
    """kana を打ち切れるキー列を優先順に列挙する。

    候補の組み合わせを全部作ってからエンジンに通し直し、
    実際に受け付けられるものだけを返す (同時完了の採用順があるため、
    組み合わせとしては作れても打てない綴りがある)。
    """
    if not kana:
        raise KanaTypeError("kana must not be empty")
    unknown = find_unknown_unit(kana)
    if unknown is not None:
        index, unit = unknown
        raise UnknownKanaError(kana, index, unit)

    seen = set()
    found = 0
    for keys in _walk(kana):
        if limit is not None and found >= limit:
            return
        if keys in seen:
            continue
        seen.add(keys)
        if _replay(kana, keys):
            found += 1
            yield keys
