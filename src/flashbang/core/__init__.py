"""
flashbang core package

Shared data models, store-record validation and serialization used by
every other flashbang subpackage.
"""

from .models import Category, Direction, MemoryState, Question, Word

__all__ = [
    "Category",
    "Direction",
    "MemoryState",
    "Question",
    "Word",
]
