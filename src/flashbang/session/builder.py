"""
Module: session.builder

Purpose:
    Orchestrate quiz session building.
    Filter → Select → Order → Build questions

Key Functions:
    - build_session(): Main entry point for building a session

Key Classes:
    - SessionBuilder: Holds the inputs and the random source of one build

Dependencies:
    - session.selector: Pool selection
    - session.questions: Question generation

Used By:
    - flashbang.study.quiz: Quiz start
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence

from flashbang.common.timestamps import as_utc, utcnow
from flashbang.core.models import Question, Word

from .config import SessionConfig
from .questions import build_questions
from .selector import select_pool

logger = logging.getLogger(__name__)


def build_session(
    words: Sequence[Word],
    category_filter: Optional[str],
    config: SessionConfig,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """
    Build a quiz session from the full word pool.

    Pipeline:
    1. Select the session pool (category, mode, count)
    2. Build one question per pool word, distractors drawn from ``words``

    Args:
        words: Full word pool, typically newest first
        category_filter: Category id to restrict to (None = all words)
        config: Session configuration
        now: Reference time for review mode (defaults to now, UTC)
        rng: Random source (defaults to Random(config.seed))

    Returns:
        Ordered list of questions

    Raises:
        InsufficientWordsError: If fewer than 4 distinct words are eligible

    Example:
        >>> questions = build_session(words, None, SessionConfig(count=9999, seed=7))
        >>> all(q.correct_option in q.options for q in questions)
        True
    """
    builder = SessionBuilder(
        words=words,
        config=config,
        category_filter=category_filter,
        now=now,
        rng=rng,
    )
    return builder.run()


@dataclass
class SessionBuilder:
    """
    Session building orchestrator.

    One ``random.Random`` drives every random choice of a build (pool
    shuffle, directions, distractors, option order), so a seeded config
    reproduces the same session.

    Attributes:
        words: Full word pool
        config: Session configuration
        category_filter: Category id to restrict to
        now: Reference time
        rng: Random source (defaults to Random(config.seed))
    """

    words: Sequence[Word]
    config: SessionConfig
    category_filter: Optional[str] = None
    now: Optional[datetime] = None
    rng: Optional[random.Random] = None

    # Internal state
    _rng: random.Random = field(init=False)
    _now: datetime = field(init=False)

    def __post_init__(self) -> None:
        """Initialize internal state."""
        self._rng = self.rng if self.rng is not None else random.Random(self.config.seed)
        self._now = utcnow() if self.now is None else as_utc(self.now)

    def run(self) -> List[Question]:
        """
        Execute the build.

        Returns:
            Ordered list of questions

        Raises:
            InsufficientWordsError: From pool selection
        """
        pool = select_pool(
            self.words,
            self.category_filter,
            self.config,
            as_of=self._now,
            rng=self._rng,
        )
        questions = build_questions(pool, self.words, self.config.direction, self._rng)

        if len(questions) < len(pool):
            logger.warning(
                f"Session has {len(questions)} questions for {len(pool)} selected words"
            )
        logger.info(
            f"Built session: {len(questions)} questions "
            f"(mode={self.config.selection_mode}, direction={self.config.direction})"
        )
        return questions
