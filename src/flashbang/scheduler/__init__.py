"""
Module: scheduler

Purpose:
    Spaced-repetition scheduler. Tracks and evolves each word's memory
    state with SM-2 and classifies words as due or not due. All functions
    are pure: they return new state and never touch storage.

Key Functions:
    - is_due(): Due check
    - record_answer(): Quiz answer -> updated MemoryState
    - review(): Graded 0-5 review
    - due_words(), sort_by_due(): Review queue helpers

Used By:
    - flashbang.session: Review-mode selection
    - flashbang.study: Quiz answer handling, dashboard counts
"""

from .sm2 import (
    apply_update,
    due_words,
    is_due,
    quality_for,
    record_answer,
    review,
    sort_by_due,
)

__all__ = [
    "apply_update",
    "due_words",
    "is_due",
    "quality_for",
    "record_answer",
    "review",
    "sort_by_due",
]
