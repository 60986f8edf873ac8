"""
Module: words

Purpose:
    Provides the Word record and its MemoryState - the per-word spaced
    repetition state evolved by the scheduler.

Key Classes:
    - Word: A vocabulary entry as stored by the surrounding application
    - MemoryState: interval / ease factor / streak / next review

Dependencies:
    - dataclasses (std)
    - datetime (std)

Used By:
    - flashbang.scheduler: Due checks and review updates
    - flashbang.session: Pool selection and question generation
    - flashbang.core.utils.serialization: Store record conversion

Design Notes:
    Both classes are frozen. The scheduler never mutates a Word; it returns
    a new MemoryState which the caller persists and applies with
    ``Word.with_memory()``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional

from flashbang.common.thresholds import SCHEDULER
from flashbang.common.timestamps import format_timestamp, parse_timestamp

from .questions import Direction


@dataclass(frozen=True, slots=True)
class MemoryState:
    """
    Spaced repetition state of one word.

    Attributes:
        interval: Days until the next review
        ease_factor: Interval growth multiplier (floor 1.3, no ceiling)
        consecutive_correct: Current streak of successful reviews
        next_review: When the word is next due (None = due now)

    Invariants:
        - interval >= 0
        - consecutive_correct >= 0

    Example:
        >>> MemoryState.fresh().ease_factor
        2.5
    """

    interval: int = SCHEDULER.default_interval
    ease_factor: float = SCHEDULER.default_ease_factor
    consecutive_correct: int = SCHEDULER.default_consecutive_correct
    next_review: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate state on construction."""
        if self.interval < 0:
            raise ValueError(f"interval cannot be negative: {self.interval}")
        if self.consecutive_correct < 0:
            raise ValueError(
                f"consecutive_correct cannot be negative: {self.consecutive_correct}"
            )

    @classmethod
    def fresh(cls) -> MemoryState:
        """State of a word that has never been studied."""
        return cls()

    @property
    def is_new(self) -> bool:
        """True if the word was never scheduled."""
        return self.next_review is None

    def to_record(self) -> dict[str, Any]:
        """
        Build the key-by-id update payload for the store.

        Returns:
            Dict with the four store columns of the memory state
        """
        return {
            "next_review": format_timestamp(self.next_review),
            "interval": self.interval,
            "ease_factor": self.ease_factor,
            "consecutive_correct": self.consecutive_correct,
        }


@dataclass(frozen=True, slots=True)
class Word:
    """
    Vocabulary entry (immutable).

    Memory fields mirror the store and may be None for words that were
    imported or created without them; ``memory`` normalises them.

    Attributes:
        id: Store record id
        term: Source-language term (the word being learnt)
        translation: Target-language term
        spelling: Optional pronunciation/spelling hint
        category_id: Owning category id (None = uncategorized)
        image_url: Optional image reference
        created_at: Creation time in the store
        interval: Stored interval in days
        ease_factor: Stored ease factor
        consecutive_correct: Stored success streak
        next_review: When the word is next due (None = never scheduled)
    """

    id: str
    term: str
    translation: str
    spelling: Optional[str] = None
    category_id: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    interval: Optional[int] = None
    ease_factor: Optional[float] = None
    consecutive_correct: Optional[int] = None
    next_review: Optional[datetime] = None

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def memory(self) -> MemoryState:
        """
        Memory state with missing fields defaulted.

        Missing interval/ease/streak default to 0/2.5/0. A stored ease of 0
        counts as missing and other values below the 1.3 floor are raised to
        it. Negative stored counts are read as 0 rather than rejected.
        """
        interval = self.interval if self.interval is not None else SCHEDULER.default_interval
        ease = self.ease_factor or SCHEDULER.default_ease_factor
        streak = (
            self.consecutive_correct
            if self.consecutive_correct is not None
            else SCHEDULER.default_consecutive_correct
        )
        return MemoryState(
            interval=max(0, int(interval)),
            ease_factor=max(float(ease), SCHEDULER.min_ease_factor),
            consecutive_correct=max(0, int(streak)),
            next_review=self.next_review,
        )

    @property
    def is_uncategorized(self) -> bool:
        return self.category_id is None

    def prompt_for(self, direction: Direction) -> str:
        """Text shown to the learner for a question in ``direction``."""
        if direction is Direction.SOURCE_TO_TARGET:
            return self.term
        if direction is Direction.TARGET_TO_SOURCE:
            return self.translation
        raise ValueError(f"Direction must be resolved, got: {direction}")

    def answer_for(self, direction: Direction) -> str:
        """Text expected as the answer for a question in ``direction``."""
        if direction is Direction.SOURCE_TO_TARGET:
            return self.translation
        if direction is Direction.TARGET_TO_SOURCE:
            return self.term
        raise ValueError(f"Direction must be resolved, got: {direction}")

    def with_memory(self, state: MemoryState) -> Word:
        """Return a copy carrying ``state`` as its memory fields."""
        return replace(
            self,
            interval=state.interval,
            ease_factor=state.ease_factor,
            consecutive_correct=state.consecutive_correct,
            next_review=state.next_review,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to a store record.

        Column names follow the store schema (``german_word`` holds the
        source-language term whatever the language).

        Returns:
            Dict representation
        """
        return {
            "id": self.id,
            "german_word": self.term,
            "german_spelling": self.spelling,
            "translation": self.translation,
            "category_id": self.category_id,
            "image_url": self.image_url,
            "created_at": format_timestamp(self.created_at),
            "next_review": format_timestamp(self.next_review),
            "interval": self.interval,
            "ease_factor": self.ease_factor,
            "consecutive_correct": self.consecutive_correct,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Word:
        """
        Deserialize from a store record.

        Args:
            data: Dict representation

        Returns:
            Word instance
        """
        return cls(
            id=str(data["id"]),
            term=data["german_word"],
            translation=data["translation"],
            spelling=data.get("german_spelling") or None,
            category_id=_optional_id(data.get("category_id")),
            image_url=data.get("image_url") or None,
            created_at=parse_timestamp(data.get("created_at")),
            interval=data.get("interval"),
            ease_factor=data.get("ease_factor"),
            consecutive_correct=data.get("consecutive_correct"),
            next_review=parse_timestamp(data.get("next_review")),
        )


def _optional_id(value: Any) -> Optional[str]:
    # Store ids may arrive as integers; the core compares them as strings
    return None if value is None else str(value)
