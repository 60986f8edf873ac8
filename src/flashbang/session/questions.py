"""
Module: session.questions

Purpose:
    Turns an ordered word pool into single-choice questions: resolves each
    word's direction, samples distractors from the full pool and shuffles
    the options.

Key Functions:
    - build_questions(): Main entry point
    - resolve_direction(): MIXED -> fair coin per word
    - draw_distractors(): Distinct wrong answers for one word

Dependencies:
    - flashbang.core.models: Word, Question, Direction
    - session.shuffle: Uniform sampling

Used By:
    - session.builder: Session orchestration
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from flashbang.common.thresholds import SESSION
from flashbang.core.models import Direction, Question, Word

from .shuffle import draw_without_replacement, shuffled

logger = logging.getLogger(__name__)


def resolve_direction(direction: Direction, rng: random.Random) -> Direction:
    """
    Resolve the direction of one question.

    MIXED picks either direction with probability 0.5, independently for
    every call; any other direction is returned unchanged.
    """
    if direction is not Direction.MIXED:
        return direction
    if rng.random() < 0.5:
        return Direction.SOURCE_TO_TARGET
    return Direction.TARGET_TO_SOURCE


def draw_distractors(
    word: Word,
    full_pool: Sequence[Word],
    direction: Direction,
    rng: random.Random,
    limit: int = SESSION.distractors_per_question,
) -> List[str]:
    """
    Sample wrong answers for ``word``.

    Other words (by id) are drawn uniformly without replacement and mapped
    to the answer field for ``direction``. Values equal to the correct
    answer or to an earlier distractor are discarded, so the result holds
    distinct strings; it is shorter than ``limit`` only when the pool lacks
    enough distinct values.

    Args:
        word: Word being asked
        full_pool: Every available word, not just the session pool
        direction: Resolved direction
        rng: Random source
        limit: Maximum number of distractors

    Returns:
        Up to ``limit`` distractor strings in draw order
    """
    correct = word.answer_for(direction)
    others = [w for w in full_pool if w.id != word.id]

    distractors: List[str] = []
    seen = {correct}
    if limit <= 0:
        return distractors
    for other in draw_without_replacement(others, rng):
        value = other.answer_for(direction)
        if value in seen:
            continue
        seen.add(value)
        distractors.append(value)
        if len(distractors) >= limit:
            break
    return distractors


def build_questions(
    pool: Sequence[Word],
    full_pool: Sequence[Word],
    direction: Direction,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """
    Build one question per pool word, in pool order.

    Words for which no distractor exists are skipped rather than emitted as
    single-option questions. Never raises for scarce distractors.

    Args:
        pool: Ordered session words
        full_pool: Every available word (distractor source)
        direction: Configured direction (MIXED resolved per word)
        rng: Random source (defaults to an unseeded Random)

    Returns:
        List of questions, at most len(pool)

    Invariants:
        - every question's correct_option is in its options exactly once
        - no question has duplicate options
    """
    if rng is None:
        rng = random.Random()

    questions: List[Question] = []
    skipped: List[str] = []
    for word in pool:
        resolved = resolve_direction(direction, rng)
        distractors = draw_distractors(word, full_pool, resolved, rng)
        if len(distractors) < SESSION.min_distractors:
            skipped.append(word.id)
            continue
        correct = word.answer_for(resolved)
        options = shuffled([*distractors, correct], rng)
        questions.append(
            Question(
                word=word,
                options=tuple(options),
                correct_option=correct,
                direction=resolved,
            )
        )

    if skipped:
        logger.warning(
            f"Skipped {len(skipped)} word(s) with no usable distractors: {skipped}"
        )
    logger.debug(f"Built {len(questions)} questions from {len(pool)} words")
    return questions
