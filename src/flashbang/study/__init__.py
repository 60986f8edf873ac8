"""
Module: study

Purpose:
    Study modes over the scheduler and the session builder. Progress is
    owned by the caller: every value here is immutable and every
    transition returns a new value.

Key Functions:
    - start_quiz(): Multiple-choice quiz over a built session
    - start_flashcards(): Flip-card review
    - summarize(): Dashboard counts

Key Classes:
    - QuizProgress, AnswerResult: Quiz state and per-answer outcome
    - FlashcardDeck: Flip-card position
    - DashboardSummary: Word counts
"""

from .flashcards import FlashcardDeck, start_flashcards
from .quiz import AnswerResult, QuizProgress, replace_word, start_quiz
from .stats import DashboardSummary, category_for, question_locale, summarize

__all__ = [
    "AnswerResult",
    "DashboardSummary",
    "FlashcardDeck",
    "QuizProgress",
    "category_for",
    "question_locale",
    "replace_word",
    "start_flashcards",
    "start_quiz",
    "summarize",
]
