"""
Module: scheduler.sm2

Purpose:
    SuperMemo-2 review scheduling. Classifies words as due or not due and
    computes the next memory state after each answer.

Key Functions:
    - is_due(): Whether a word needs review at a given time
    - review(): Graded (0-5) SM-2 transition on a MemoryState
    - record_answer(): Binary quiz answer -> new MemoryState
    - due_words(): Words needing attention
    - sort_by_due(): Most overdue first, never-studied words leading

Algorithm:
    quality >= 3 (recalled):
        interval = 1, then 6, then round(interval * ease_factor)
        consecutive_correct += 1
    quality < 3 (forgotten):
        consecutive_correct = 0, interval = 1
    always:
        ease_factor += 0.1 - (5 - q) * (0.08 + (5 - q) * 0.02), floor 1.3
    next_review = now + interval days

    Quiz answers only feed q=5 (correct, ease +0.1) or q=1 (wrong,
    ease -0.54). The ease factor has no upper bound.

Dependencies:
    - flashbang.core.models: Word, MemoryState
    - flashbang.common.thresholds: SCHEDULER constants

Used By:
    - flashbang.session.selector: Review-mode pool filtering
    - flashbang.study.quiz: Answer submission
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from flashbang.common.thresholds import SCHEDULER
from flashbang.common.timestamps import as_utc, utcnow
from flashbang.core.models import MemoryState, Word

logger = logging.getLogger(__name__)

FAR_FUTURE = datetime.max.replace(tzinfo=timezone.utc)


def _round_half_up(value: float) -> int:
    # round() would use banker's rounding: 40.5 -> 40
    return int(math.floor(value + 0.5))


def is_due(word: Word, as_of: Optional[datetime] = None) -> bool:
    """
    Check whether a word is due for review.

    Args:
        word: Word to check
        as_of: Reference time (defaults to now, UTC)

    Returns:
        True if the word was never scheduled or next_review <= as_of
    """
    if word.next_review is None:
        return True
    as_of = utcnow() if as_of is None else as_utc(as_of)
    return as_utc(word.next_review) <= as_of


def quality_for(was_correct: bool) -> int:
    """Map a binary quiz answer to an SM-2 quality grade."""
    return SCHEDULER.correct_quality if was_correct else SCHEDULER.incorrect_quality


def review(
    state: MemoryState,
    quality: int,
    now: Optional[datetime] = None,
) -> MemoryState:
    """
    Apply one graded SM-2 review.

    Args:
        state: Current memory state
        quality: Recall grade 0 (blackout) to 5 (perfect)
        now: Review time (defaults to now, UTC)

    Returns:
        New MemoryState; ``state`` is untouched

    Raises:
        ValueError: If quality is outside 0-5

    Invariants:
        - result.ease_factor >= 1.3
        - result.interval >= 1
    """
    if not 0 <= quality <= SCHEDULER.max_quality:
        raise ValueError(f"quality must be between 0 and {SCHEDULER.max_quality}: {quality}")

    now = utcnow() if now is None else as_utc(now)

    if quality >= SCHEDULER.passing_quality:
        if state.consecutive_correct == 0:
            interval = SCHEDULER.first_interval
        elif state.consecutive_correct == 1:
            interval = SCHEDULER.second_interval
        else:
            interval = max(
                _round_half_up(state.interval * state.ease_factor),
                SCHEDULER.first_interval,
            )
        consecutive_correct = state.consecutive_correct + 1
    else:
        consecutive_correct = 0
        interval = SCHEDULER.relapse_interval

    miss = SCHEDULER.max_quality - quality
    ease_factor = state.ease_factor + (0.1 - miss * (0.08 + miss * 0.02))
    ease_factor = max(ease_factor, SCHEDULER.min_ease_factor)

    try:
        next_review = now + timedelta(days=interval)
    except OverflowError:
        # Long streaks outgrow the calendar; park the word at the end of time
        next_review = FAR_FUTURE

    return replace(
        state,
        interval=interval,
        ease_factor=ease_factor,
        consecutive_correct=consecutive_correct,
        next_review=next_review,
    )


def record_answer(
    word: Word,
    was_correct: bool,
    now: Optional[datetime] = None,
) -> MemoryState:
    """
    Compute a word's memory state after a quiz answer.

    Missing memory fields on ``word`` are treated as never studied
    (interval 0, ease 2.5, streak 0). The caller persists the result
    (see ``MemoryState.to_record``) and refreshes its own copy
    (see ``Word.with_memory``).

    Args:
        word: Word that was answered
        was_correct: Whether the answer was right
        now: Answer time (defaults to now, UTC)

    Returns:
        Updated MemoryState

    Example:
        >>> state = record_answer(fresh_word, True)
        >>> (state.interval, state.consecutive_correct, state.ease_factor)
        (1, 1, 2.6)
    """
    state = review(word.memory, quality_for(was_correct), now)
    logger.debug(
        f"Word {word.id}: {'correct' if was_correct else 'incorrect'} -> "
        f"interval={state.interval}d ease={state.ease_factor:.2f} "
        f"streak={state.consecutive_correct}"
    )
    return state


def apply_update(word: Word, state: MemoryState) -> Word:
    """Return ``word`` with the memory fields of ``state``."""
    return word.with_memory(state)


def due_words(words: Iterable[Word], as_of: Optional[datetime] = None) -> List[Word]:
    """
    Words needing attention at ``as_of``, input order preserved.

    Args:
        words: Words to filter
        as_of: Reference time (defaults to now, UTC)

    Returns:
        List of due words
    """
    as_of = utcnow() if as_of is None else as_utc(as_of)
    return [w for w in words if is_due(w, as_of)]


def sort_by_due(words: Iterable[Word]) -> List[Word]:
    """
    Order words by next_review ascending.

    Never-scheduled words sort first (treated as the earliest possible
    time). The sort is stable, so ties keep input order.
    """
    def key(word: Word) -> tuple[int, float]:
        if word.next_review is None:
            return (0, 0.0)
        return (1, as_utc(word.next_review).timestamp())

    return sorted(words, key=key)
