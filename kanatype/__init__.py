"""kanatype: かなタイピング練習 (ローマ字入力の判定エンジン)"""

from kanatype.engine import MatchingEngine, MatchCandidate, EngineState, Outcome, generate_candidates, spellings
from kanatype.errors import KanaTypeError, UnknownKanaError, QuestionFormatError
from kanatype.questions import Question, QuestionSequencer, DEFAULT_QUESTIONS, load_questions, validate_questions

__all__ = [
    "MatchingEngine", "MatchCandidate", "EngineState", "Outcome",
    "generate_candidates", "spellings",
    "KanaTypeError", "UnknownKanaError", "QuestionFormatError",
    "Question", "QuestionSequencer", "DEFAULT_QUESTIONS",
    "load_questions", "validate_questions",
]
