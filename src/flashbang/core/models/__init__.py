"""
Core Models Package

Immutable data models shared by the scheduler, the session builder and the
study state. All models are frozen dataclasses: updates produce new
instances, which the caller persists.
"""

from .categories import Category
from .questions import Direction, Question
from .words import MemoryState, Word

__all__ = [
    "Category",
    "Direction",
    "MemoryState",
    "Question",
    "Word",
]
