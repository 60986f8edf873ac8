"""
Module: questions

Purpose:
    Provides the Question dataclass - one single-choice quiz item - and the
    Direction enum saying which side of a word is asked.

Key Classes:
    - Direction: source-to-target, target-to-source, or mixed (config only)
    - Question: Word, candidate options, correct option, resolved direction

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .words.Word (TYPE_CHECKING only)

Used By:
    - flashbang.session.questions: Question generation
    - flashbang.study.quiz: Answer checking
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .words import Word


class Direction(str, Enum):
    """Which field of a word is the prompt and which is the answer."""
    SOURCE_TO_TARGET = "source_to_target"  # Show term, ask translation
    TARGET_TO_SOURCE = "target_to_source"  # Show translation, ask term
    MIXED = "mixed"                        # Resolved per question at build time

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> Optional[Direction]:
        # Legacy names still used by the store and UI
        aliases = {
            "german_to_translation": cls.SOURCE_TO_TARGET,
            "translation_to_german": cls.TARGET_TO_SOURCE,
        }
        if isinstance(value, str):
            return aliases.get(value.lower())
        return None

    @property
    def is_resolved(self) -> bool:
        return self is not Direction.MIXED


@dataclass(frozen=True)
class Question:
    """
    Single-choice quiz question (immutable).

    Attributes:
        word: The word being asked
        options: Candidate answers in display order
        correct_option: The correct answer string
        direction: Resolved direction (never MIXED)

    Invariants:
        - direction is resolved
        - correct_option appears in options exactly once
        - len(options) >= 2

    Example:
        >>> q.prompt
        'Hund'
        >>> q.is_correct("dog")
        True
    """

    word: Word
    options: Tuple[str, ...]
    correct_option: str
    direction: Direction

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.direction.is_resolved:
            raise ValueError("Question direction must be resolved, got MIXED")
        occurrences = self.options.count(self.correct_option)
        if occurrences != 1:
            raise ValueError(
                f"correct_option must appear exactly once in options "
                f"(found {occurrences}): {self.correct_option!r}"
            )
        if len(self.options) < 2:
            raise ValueError(f"Question needs at least 2 options: {self.options}")

    @property
    def prompt(self) -> str:
        """Text shown to the learner."""
        return self.word.prompt_for(self.direction)

    @property
    def distractors(self) -> Tuple[str, ...]:
        """Options other than the correct one, in display order."""
        return tuple(o for o in self.options if o != self.correct_option)

    def is_correct(self, answer: str) -> bool:
        """Exact string match against the correct option."""
        return answer == self.correct_option
