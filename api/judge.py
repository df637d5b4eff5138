# api/judge.py
import logging
import os

from kanatype.api import create_app
from kanatype.questions import DEFAULT_QUESTIONS, load_questions

logging.basicConfig(level=logging.INFO)

questions_path = os.environ.get("KANATYPE_QUESTIONS")
if questions_path:
    app = create_app(load_questions(questions_path))
else:
    app = create_app(DEFAULT_QUESTIONS)


# --- Vercel用エントリーポイント ---
if __name__ == '__main__':
    app.run(port=int(os.environ.get("KANATYPE_PORT", "8080")))
