"""Tests for the judge HTTP API (api.py)."""

import importlib
import random

import pytest

from kanatype.api import create_app
from kanatype.questions import Question

QS = [Question("寿司", "すし"), Question("河童", "かっぱ")]


@pytest.fixture
def client():
    app = create_app(QS, rng=random.Random(0))
    app.config["TESTING"] = True
    return app.test_client()


def judge(client, **body):
    return client.post("/api/judge", json=body)


def test_questions_in_order(client):
    res = client.get("/api/questions?shuffle=0")
    assert res.status_code == 200
    assert res.get_json() == {"questions": [
        {"display": "寿司", "kana": "すし"},
        {"display": "河童", "kana": "かっぱ"},
    ]}


def test_questions_shuffled_contains_all(client):
    res = client.get("/api/questions")
    kana = sorted(q["kana"] for q in res.get_json()["questions"])
    assert kana == ["かっぱ", "すし"]


def test_judge_complete(client):
    data = judge(client, kana="かっぱ", keys="kappa").get_json()
    assert data["completed"] is True
    assert data["outcomes"] == ["accepted", "unit_completed", "unit_completed", "accepted", "completed"]
    assert data["remaining_kana"] == ""
    assert data["hint"] == ""


def test_judge_partial(client):
    data = judge(client, kana="かっぱ", keys="kap").get_json()
    assert data["completed"] is False
    assert data["typed"] == "kap"
    assert data["typed_kana"] == "かっ"
    assert data["remaining_kana"] == "ぱ"
    assert data["hint"] == "pa"


def test_judge_miss(client):
    data = judge(client, kana="すし", keys="sz").get_json()
    assert data["outcomes"] == ["accepted", "miss"]
    assert data["typed"] == "s"


def test_judge_uppercase_and_katakana(client):
    data = judge(client, kana="カッパ", keys="KAPPA").get_json()
    assert data["completed"] is True


def test_judge_ignores_keys_after_completion(client):
    data = judge(client, kana="すし", keys="sushixx").get_json()
    assert len(data["outcomes"]) == 5
    assert data["completed"] is True


def test_judge_unknown_kana(client):
    res = judge(client, kana="漢字", keys="kanji")
    assert res.status_code == 400
    assert "漢" in res.get_json()["error"]


@pytest.mark.parametrize("body", [{}, {"kana": 1}, {"kana": "すし", "keys": 3}, {"kana": ""}])
def test_judge_bad_request(client, body):
    res = client.post("/api/judge", json=body)
    assert res.status_code == 400


def test_judge_requires_json(client):
    res = client.post("/api/judge", data="kana", content_type="text/plain")
    assert res.status_code == 400


def test_deploy_entry_point(monkeypatch):
    monkeypatch.delenv("KANATYPE_QUESTIONS", raising=False)
    judge_module = importlib.import_module("api.judge")
    res = judge_module.app.test_client().get("/api/questions?shuffle=0")
    assert res.status_code == 200
    assert res.get_json()["questions"][0]["kana"] == "すし"
