"""Tests for keystroke normalization (keys.py)."""

from kanatype.keys import iter_line_keys, normalize_key


def test_normalize_lowercases():
    assert normalize_key("A") == "a"
    assert normalize_key("k") == "k"
    assert normalize_key(" ") == " "


def test_normalize_drops_named_keys():
    assert normalize_key("Shift") is None
    assert normalize_key("Enter") is None
    assert normalize_key("") is None
    assert normalize_key(None) is None


def test_iter_line_keys_splits_characters():
    assert list(iter_line_keys("KaP")) == ["k", "a", "p"]


def test_iter_line_keys_empty_line_is_start_key():
    assert list(iter_line_keys("")) == [" "]
    assert list(iter_line_keys("", start_key="s")) == ["s"]
