"""
Module: session.selector

Purpose:
    Chooses and orders the words of a quiz session.

Key Functions:
    - select_pool(): Main entry point for pool selection

Key Classes:
    - SessionError: Base class for session building errors
    - InsufficientWordsError: Fewer than 4 distinct eligible words

Algorithm:
    1. Restrict to the category filter (exact id match), dropping
       duplicate records of the same word id
    2. Apply the selection mode (new / review / random)
    3. Truncate to config.count unless unlimited
    4. Fail if fewer than 4 distinct words remain

Dependencies:
    - flashbang.scheduler: Due filtering and ordering for review mode
    - session.config: SessionConfig
    - session.shuffle: Uniform shuffling

Used By:
    - session.builder: Session orchestration
"""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Iterable, List, Optional

from flashbang.common.thresholds import SESSION
from flashbang.common.timestamps import as_utc, utcnow
from flashbang.core.models import Word
from flashbang.scheduler import is_due, sort_by_due

from .config import SelectionMode, SessionConfig
from .shuffle import shuffled

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Error during session building."""
    pass


class InsufficientWordsError(SessionError):
    """
    Raised when too few distinct words are eligible for a session.

    Attributes:
        found: Number of distinct eligible words
        required: Minimum needed for a session
    """

    def __init__(self, found: int, required: int = SESSION.min_session_words):
        super().__init__(
            f"Not enough words to start a quiz (need at least {required}, found {found})"
        )
        self.found = found
        self.required = required


def _restrict(words: Iterable[Word], category_filter: Optional[str]) -> List[Word]:
    """Category filter plus id de-duplication, first occurrence wins."""
    seen = set()
    restricted = []
    for word in words:
        if category_filter is not None and word.category_id != category_filter:
            continue
        if word.id in seen:
            continue
        seen.add(word.id)
        restricted.append(word)
    return restricted


def select_pool(
    words: Iterable[Word],
    category_filter: Optional[str],
    config: SessionConfig,
    as_of: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> List[Word]:
    """
    Select and order the words of a session.

    Args:
        words: Full word pool, typically newest first
        category_filter: Category id to restrict to (None = all words)
        config: Session configuration
        as_of: Reference time for review mode (defaults to now, UTC)
        rng: Random source for random mode (defaults to Random(config.seed))

    Returns:
        Ordered list of distinct words

    Raises:
        InsufficientWordsError: If fewer than 4 distinct words remain

    Example:
        >>> pool = select_pool(words, None, SessionConfig(count=9999))
        >>> len(pool) == len(words)
        True
    """
    as_of = utcnow() if as_of is None else as_utc(as_of)
    if rng is None:
        rng = random.Random(config.seed)

    all_words = list(words)
    pool = _restrict(all_words, category_filter)
    logger.debug(
        f"Category filter {category_filter!r}: {len(pool)}/{len(all_words)} words"
    )

    mode = config.selection_mode
    if mode is SelectionMode.REVIEW:
        pool = sort_by_due(w for w in pool if is_due(w, as_of))
        logger.debug(f"Review mode: {len(pool)} words due as of {as_of.isoformat()}")
    elif mode is SelectionMode.RANDOM:
        pool = shuffled(pool, rng)

    limit = config.limit
    if limit is not None:
        pool = pool[:limit]

    if len(pool) < SESSION.min_session_words:
        raise InsufficientWordsError(found=len(pool))

    logger.debug(f"Selected {len(pool)} words ({mode} mode)")
    return pool
