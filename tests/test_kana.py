"""Tests for kana helpers (kana.py)."""

from kanatype.kana import find_unknown_unit, kata_to_hira, split_units


# ── kata_to_hira ──────────────────────────────────────────────────────────────

def test_kata_to_hira_full_width():
    assert kata_to_hira("カタカナ") == "かたかな"


def test_kata_to_hira_half_width():
    assert kata_to_hira("ｶﾀｶﾅ") == "かたかな"


def test_kata_to_hira_keeps_hiragana_and_long_mark():
    assert kata_to_hira("ぱーてぃー") == "ぱーてぃー"
    assert kata_to_hira("パーティー") == "ぱーてぃー"


def test_kata_to_hira_normalizes_full_width_symbols():
    assert kata_to_hira("なに？") == "なに?"


# ── split_units ───────────────────────────────────────────────────────────────

def test_split_units_digraphs():
    assert split_units("しゃしん") == ["しゃ", "し", "ん"]


def test_split_units_geminate():
    assert split_units("きっぷ") == ["き", "っ", "ぷ"]


def test_split_units_unknown_chars_are_kept():
    assert split_units("すし漢") == ["す", "し", "漢"]


# ── find_unknown_unit ─────────────────────────────────────────────────────────

def test_find_unknown_unit_none():
    assert find_unknown_unit("かっぱ") is None
    assert find_unknown_unit("ちょっとまって") is None


def test_find_unknown_unit_position():
    assert find_unknown_unit("すし漢") == (2, "漢")
    assert find_unknown_unit("きゃX") == (2, "X")


def test_find_unknown_unit_uses_table_and_geminate():
    # 表の1文字・2文字と、表にない っ も打てる単位
    assert find_unknown_unit("きゃっ") is None
    assert find_unknown_unit("ー") is None
    assert find_unknown_unit("ゃ漢") == (1, "漢")
