#!/usr/bin/env python3
"""
かなタイピング練習の CLI。

    python -m kanatype play                      # 内蔵の問題で遊ぶ (play は省略可)
    python -m kanatype play --questions word.txt --level 3
    python -m kanatype check word.txt            # 問題ファイルの検査
    python -m kanatype spell しゃしん            # 打ち方の一覧
    python -m kanatype serve --port 8080         # 判定 API を起動
"""

import argparse
import logging
import random
import sys
import time

from rich.console import Console

from kanatype import settings


def _load_bank(path, level):
    from kanatype.questions import DEFAULT_QUESTIONS, load_questions

    if path:
        return load_questions(path, level=level)
    if level is not None:
        return [q for q in DEFAULT_QUESTIONS if q.level == level]
    return list(DEFAULT_QUESTIONS)


def cmd_play(args):
    from kanatype.keys import iter_line_keys
    from kanatype.session import GameSession
    from kanatype.view import RichView

    questions = _load_bank(args.questions, args.level)
    if not questions:
        print("問題がありません。", file=sys.stderr)
        return 1

    view = RichView()
    rng = random.Random(args.seed) if args.seed is not None else None
    session = GameSession(questions, view=view, rng=rng)
    session.init()

    while True:
        try:
            line = input("入力してください: ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        for key in iter_line_keys(line, session.start_key):
            session.process_key(key)
        view.draw()
        # 次の問題へ進むのを待ってから表示し直す
        if session.sequencer.pending:
            while session.sequencer.pending:
                time.sleep(0.01)
            view.draw()


def cmd_check(args):
    from kanatype.errors import KanaTypeError
    from kanatype.questions import load_questions

    console = Console()
    try:
        questions = load_questions(args.path, strict=True)
    except KanaTypeError as e:
        console.print(f"[red]NG[/red] {e}", highlight=False)
        return 1
    except OSError as e:
        console.print(f"[red]ファイルを開けません[/red]: {e}", highlight=False)
        return 1
    console.print(f"[green]OK[/green] {len(questions)} questions", highlight=False)
    return 0


def cmd_spell(args):
    from kanatype.engine import spellings
    from kanatype.kana import kata_to_hira

    try:
        for keys in spellings(kata_to_hira(args.kana), limit=args.limit):
            print(keys)
    except ValueError as e:
        print(f"エラー: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_serve(args):
    from kanatype.api import create_app

    questions = _load_bank(args.questions, args.level)
    app = create_app(questions)
    app.run(host="0.0.0.0", port=args.port)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog="kanatype", description="Kana typing trainer")
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Play in the terminal (default)")
    play.add_argument("--questions", metavar="FILE", default=settings.QUESTIONS_PATH,
                      help="Question bank file (default: built-in questions)")
    play.add_argument("--level", type=int, default=settings.LEVEL,
                      help="Only use questions of this level (txtN marker)")
    play.add_argument("--seed", type=int, help="Shuffle seed")
    play.set_defaults(func=cmd_play)

    check = sub.add_parser("check", help="Validate a question bank file")
    check.add_argument("path")
    check.set_defaults(func=cmd_check)

    spell = sub.add_parser("spell", help="List keystroke spellings for kana")
    spell.add_argument("kana")
    spell.add_argument("--limit", type=int, default=20)
    spell.set_defaults(func=cmd_spell)

    serve = sub.add_parser("serve", help="Run the judge HTTP API")
    serve.add_argument("--port", type=int, default=settings.PORT)
    serve.add_argument("--questions", metavar="FILE", default=settings.QUESTIONS_PATH)
    serve.add_argument("--level", type=int, default=settings.LEVEL)
    serve.set_defaults(func=cmd_serve)

    return parser


COMMANDS = ("play", "check", "spell", "serve")


def main(argv=None):
    logging.basicConfig(level=settings.LOG_LEVEL)
    argv = sys.argv[1:] if argv is None else list(argv)
    # サブコマンドを省略したら play (kanatype --seed 3 なども play の引数)
    if not argv or (argv[0] not in COMMANDS and argv[0] not in ("-h", "--help")):
        argv = ["play"] + argv
    args = build_parser().parse_args(argv)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
