"""
Module: session

Purpose:
    Quiz session builder. Selects, orders and turns words into
    single-choice questions with plausible distractors.

Key Functions:
    - build_session(): Main entry point
    - select_pool(): Choose and order session words
    - build_questions(): Generate questions for an ordered pool

Key Classes:
    - SessionConfig: Configuration for session building
    - SelectionMode: new / review / random
    - InsufficientWordsError: Fewer than 4 eligible words

Dependencies:
    - flashbang.scheduler: Review-mode due filtering

Used By:
    - flashbang.study.quiz: Quiz progress
"""

from .builder import SessionBuilder, build_session
from .config import SelectionMode, SessionConfig
from .questions import build_questions, draw_distractors, resolve_direction
from .selector import InsufficientWordsError, SessionError, select_pool

__all__ = [
    "InsufficientWordsError",
    "SelectionMode",
    "SessionBuilder",
    "SessionConfig",
    "SessionError",
    "build_questions",
    "build_session",
    "draw_distractors",
    "resolve_direction",
    "select_pool",
]
