"""
Module: study.stats

Purpose:
    Read-only summaries over word and category collections: dashboard
    counts, category lookup and speech locale selection.

Key Functions:
    - summarize(): Dashboard counts
    - category_for(): Category of a word
    - question_locale(): Language tag of a question's prompt or answer
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, Optional

from flashbang.common.thresholds import LOCALES
from flashbang.common.timestamps import as_utc, utcnow
from flashbang.core.models import Category, Direction, Question, Word
from flashbang.scheduler import is_due


@dataclass(frozen=True)
class DashboardSummary:
    """
    Word counts shown on the dashboard.

    Attributes:
        total_words: Number of words
        due_words: Words due for review
        new_words: Words never scheduled
        uncategorized_words: Words without a category
        words_per_category: Category id -> word count (every known category)
    """

    total_words: int
    due_words: int
    new_words: int
    uncategorized_words: int
    words_per_category: Dict[str, int] = field(default_factory=dict)


def summarize(
    words: Iterable[Word],
    categories: Iterable[Category] = (),
    as_of: Optional[datetime] = None,
) -> DashboardSummary:
    """
    Count words for the dashboard.

    Categories without words are listed with a count of 0.
    """
    as_of = utcnow() if as_of is None else as_utc(as_of)
    words = list(words)
    per_category = Counter(w.category_id for w in words if w.category_id is not None)
    counts = {c.id: per_category.get(c.id, 0) for c in categories}
    for category_id, count in per_category.items():
        counts.setdefault(category_id, count)

    return DashboardSummary(
        total_words=len(words),
        due_words=sum(1 for w in words if is_due(w, as_of)),
        new_words=sum(1 for w in words if w.next_review is None),
        uncategorized_words=sum(1 for w in words if w.is_uncategorized),
        words_per_category=counts,
    )


def category_for(word: Word, categories: Iterable[Category]) -> Optional[Category]:
    """Category owning ``word``, or None if uncategorized/unknown."""
    if word.category_id is None:
        return None
    return next((c for c in categories if c.id == word.category_id), None)


def source_locale(category: Optional[Category]) -> str:
    return category.source_language if category else LOCALES.source_language


def target_locale(category: Optional[Category]) -> str:
    return category.target_language if category else LOCALES.target_language


def question_locale(
    question: Question,
    categories: Iterable[Category],
    *,
    answer_side: bool = False,
) -> str:
    """
    Language tag for speaking a question's prompt (or its answer).

    Falls back to the default source/target tags when the word has no
    known category.
    """
    category = category_for(question.word, categories)
    shows_source = question.direction is Direction.SOURCE_TO_TARGET
    if answer_side:
        shows_source = not shows_source
    return source_locale(category) if shows_source else target_locale(category)
