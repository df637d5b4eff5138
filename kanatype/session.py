# kanatype/session.py
import logging
import threading

from kanatype import settings
from kanatype.engine import MatchingEngine, Outcome
from kanatype.errors import KanaTypeError
from kanatype.questions import QuestionSequencer
from kanatype.view import View, project


class GameSession:
    """
    ゲーム全体の進行。キー入力を受け取り、エンジン・出題・画面をつなぐ。

    スタートキーでゲーム開始。1問打ち終わると advance_delay 秒後に次の問題へ。
    全問終わったら Game Clear で、もう一度スタートキーを押すとやり直し。
    """

    def __init__(self, questions, view=None, start_key=settings.START_KEY,
                 advance_delay=settings.ADVANCE_DELAY, rng=None,
                 timer_factory=threading.Timer):
        # キー入力とタイマーからの呼び出しを直列化する
        self._lock = threading.RLock()
        self.sequencer = QuestionSequencer(questions, rng=rng,
                                           timer_factory=timer_factory,
                                           lock=self._lock)
        self.engine = MatchingEngine()
        self.view = view or View()
        self.start_key = start_key
        self.advance_delay = advance_delay
        self.is_gaming = False
        self.current_question = None

    def init(self):
        self.is_gaming = False
        self.view.show_title(self.start_key)

    def start(self):
        with self._lock:
            self.is_gaming = True
            self.sequencer.start()
            self._load(self.sequencer.current)

    def restart(self):
        """待ち中の「次の問題へ」があっても取り消して最初から"""
        self.start()

    def _load(self, question):
        while question is not None:
            try:
                self.engine.reset(question.kana)
            except KanaTypeError as e:
                logging.error(f"Skipping question {question.display!r}: {e}")
                question = self.sequencer.advance()
                continue
            self.current_question = question
            self.view.render(project(self.engine, question))
            return
        self.finish_game()

    def process_key(self, key):
        """ユーザーの入力を処理する。ゲーム中でなければ None を返す"""
        with self._lock:
            if not self.is_gaming:
                if key == self.start_key:
                    self.start()
                return None

            # 打ち終わって次の問題を待っている間の入力は無視
            if self.sequencer.pending:
                return None

            outcome = self.engine.submit_key(key)
            if outcome is Outcome.MISS:
                self.view.miss()
            self.view.render(project(self.engine, self.current_question))

            if outcome.completed:
                # 問題終了。少し待って次へ
                self.sequencer.schedule_advance(self.advance_delay, self._load)
            return outcome

    def finish_game(self):
        with self._lock:
            self.is_gaming = False
            self.current_question = None
            self.view.show_clear(self.start_key)
