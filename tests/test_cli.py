"""Tests for the command line interface (cli.py)."""

import builtins

import pytest

from kanatype.cli import main


def run(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


def test_spell(capsys):
    assert run(["spell", "し"]) == 0
    assert capsys.readouterr().out.split() == ["shi", "si", "ci"]


def test_spell_limit_and_katakana(capsys):
    assert run(["spell", "シャ", "--limit", "2"]) == 0
    assert capsys.readouterr().out.split() == ["sha", "sya"]


def test_spell_unknown(capsys):
    assert run(["spell", "漢字"]) == 1
    assert "漢" in capsys.readouterr().err


def test_check_ok(tmp_path, capsys):
    p = tmp_path / "word.txt"
    p.write_text("寿司,すし\n河童,かっぱ\n", encoding="utf-8")
    assert run(["check", str(p)]) == 0
    assert "2 questions" in capsys.readouterr().out


def test_check_ng(tmp_path, capsys):
    p = tmp_path / "word.txt"
    p.write_text("寿司,すし\n漢字,漢字\n", encoding="utf-8")
    assert run(["check", str(p)]) == 1
    assert "NG" in capsys.readouterr().out


def test_check_missing_file(tmp_path):
    assert run(["check", str(tmp_path / "nope.txt")]) == 1


def test_play_one_question(tmp_path, monkeypatch, capsys):
    p = tmp_path / "word.txt"
    p.write_text("寿司,すし\n", encoding="utf-8")
    lines = iter(["", "sux", "shi"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    assert run(["play", "--questions", str(p), "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "寿司" in out
    assert "Miss!" in out
    assert "Game Clear!" in out


def test_play_options_without_subcommand(tmp_path, monkeypatch, capsys):
    p = tmp_path / "word.txt"
    p.write_text("寿司,すし\n", encoding="utf-8")
    lines = iter(["", "sushi"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    assert run(["--questions", str(p), "--seed", "3"]) == 0
    assert "Game Clear!" in capsys.readouterr().out


def test_no_arguments_means_play(monkeypatch, capsys):
    def fake_input(prompt=""):
        raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    assert run([]) == 0
    assert "Press Space to Start" in capsys.readouterr().out
