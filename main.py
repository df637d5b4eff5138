# ターミナルでタイピング練習を始める
# (python -m kanatype / kanatype コマンドと同じ)
from kanatype.cli import main

if __name__ == "__main__":
    main()
