# kanatype/api.py
"""
判定エンジンを HTTP で使うための Flask アプリ。

GET  /api/questions        問題一覧 (shuffle=0 でシャッフルしない)
POST /api/judge            {"kana": "かっぱ", "keys": "kappa"} を1キーずつ判定
"""
import logging
import random

from flask import Flask, jsonify, request

from kanatype.engine import MatchingEngine
from kanatype.kana import kata_to_hira
from kanatype.questions import DEFAULT_QUESTIONS


def create_app(questions=DEFAULT_QUESTIONS, rng=None):
    app = Flask(__name__)
    app.json.ensure_ascii = False
    questions = list(questions)
    rng = rng or random.Random()

    @app.route('/api/questions', methods=['GET'])
    def get_questions():
        items = list(questions)
        if request.args.get('shuffle', '1') != '0':
            items = rng.sample(items, len(items))
        return jsonify(questions=[{"display": q.display, "kana": q.kana} for q in items])

    @app.route('/api/judge', methods=['POST'])
    def judge():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify(error="JSON body required"), 400
        kana = data.get("kana")
        keys = data.get("keys", "")
        if not isinstance(kana, str) or not isinstance(keys, str):
            return jsonify(error="'kana' and 'keys' must be strings"), 400

        engine = MatchingEngine()
        try:
            engine.reset(kata_to_hira(kana))
        except ValueError as e:
            logging.warning(f"Rejected judge request: {e}")
            return jsonify(error=str(e)), 400

        outcomes = []
        for key in keys:
            # 打ち切った後の入力は判定しない
            if engine.is_complete:
                break
            outcomes.append(engine.submit_key(key.lower()).value)

        return jsonify(
            outcomes=outcomes,
            typed=engine.typed_display,
            typed_kana=engine.typed_kana,
            remaining_kana=engine.remaining_kana,
            hint=engine.current_hint(),
            completed=engine.is_complete,
        )

    return app
