# kanatype/settings.py
import os

# 問題ファイル (未設定なら内蔵の問題を使う)
QUESTIONS_PATH = os.environ.get("KANATYPE_QUESTIONS")
LEVEL = os.environ.get("KANATYPE_LEVEL")
LEVEL = int(LEVEL) if LEVEL else None

# 1問打ち終わってから次の問題へ進むまでの待ち時間 (秒)
ADVANCE_DELAY = float(os.environ.get("KANATYPE_ADVANCE_DELAY", "0.1"))
# ミスしたときの赤表示を消すまでの時間 (秒)
MISS_FLASH = float(os.environ.get("KANATYPE_MISS_FLASH", "0.1"))

START_KEY = os.environ.get("KANATYPE_START_KEY", " ")

LOG_LEVEL = os.environ.get("KANATYPE_LOG_LEVEL", "INFO")
PORT = int(os.environ.get("KANATYPE_PORT", "8080"))
