"""Shared test fixtures."""

import pytest

from kanatype.engine import MatchingEngine, Outcome


class FakeTimer:
    """threading.Timer の代わり。fire() を呼ぶまで発火しない"""

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function()


class FakeTimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, function):
        t = FakeTimer(interval, function)
        self.timers.append(t)
        return t

    @property
    def last(self):
        return self.timers[-1]


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def engine() -> MatchingEngine:
    return MatchingEngine()


@pytest.fixture
def timers() -> FakeTimerFactory:
    return FakeTimerFactory()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def type_keys(engine, keys):
    """keys を1文字ずつ打って Outcome のリストを返す"""
    return [engine.submit_key(k) for k in keys]


def types_to_completion(kana, keys):
    e = MatchingEngine()
    e.reset(kana)
    outcomes = type_keys(e, keys)
    return Outcome.MISS not in outcomes and outcomes[-1] is Outcome.COMPLETED and e.remaining_kana == ""
