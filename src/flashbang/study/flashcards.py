"""
Module: study.flashcards

Purpose:
    Caller-owned flip-card review state. A FlashcardDeck holds the cards,
    the current position and which face is showing; navigation returns new
    decks and always lands on the front face.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from flashbang.core.models import Category, Word

from .stats import category_for, source_locale, target_locale


@dataclass(frozen=True)
class FlashcardDeck:
    """
    Flip-card review position (immutable).

    Attributes:
        words: Cards in review order
        index: Current card
        flipped: True when the translation side is showing

    Invariants:
        - 0 <= index < len(words) unless words is empty
    """

    words: Tuple[Word, ...]
    index: int = 0
    flipped: bool = False

    def __post_init__(self) -> None:
        """Validate position on construction."""
        if self.words and not 0 <= self.index < len(self.words):
            raise ValueError(f"index out of range: {self.index}")

    @property
    def current(self) -> Optional[Word]:
        if not self.words:
            return None
        return self.words[self.index]

    @property
    def has_next(self) -> bool:
        return self.index < len(self.words) - 1

    @property
    def has_previous(self) -> bool:
        return self.index > 0

    @property
    def shown_text(self) -> Optional[str]:
        """Term on the front, translation on the back."""
        word = self.current
        if word is None:
            return None
        return word.translation if self.flipped else word.term

    @property
    def shown_image(self) -> Optional[str]:
        """Image reference; only the front face shows it."""
        word = self.current
        if word is None or self.flipped:
            return None
        return word.image_url

    @property
    def position_label(self) -> str:
        if not self.words:
            return "0 / 0"
        return f"{self.index + 1} / {len(self.words)}"

    @property
    def progress_percent(self) -> float:
        """Share of the deck reached, counting the current card."""
        if not self.words:
            return 0.0
        return (self.index + 1) / len(self.words) * 100

    def flip(self) -> FlashcardDeck:
        return replace(self, flipped=not self.flipped)

    def next(self) -> FlashcardDeck:
        """Next card, front face up; stays put on the last card."""
        if not self.has_next:
            return self
        return replace(self, index=self.index + 1, flipped=False)

    def previous(self) -> FlashcardDeck:
        """Previous card, front face up; stays put on the first card."""
        if not self.has_previous:
            return self
        return replace(self, index=self.index - 1, flipped=False)

    def speech_locale(self, categories: Iterable[Category]) -> Optional[str]:
        """Language tag of the face showing, from the card's category."""
        word = self.current
        if word is None:
            return None
        category = category_for(word, categories)
        return target_locale(category) if self.flipped else source_locale(category)


def start_flashcards(words: Iterable[Word], category_filter: Optional[str] = None) -> FlashcardDeck:
    """
    Start a flip-card review over ``words`` in their given order.

    Args:
        words: Word pool, typically newest first
        category_filter: Category id to restrict to (None = all words)
    """
    selected = tuple(
        w for w in words
        if category_filter is None or w.category_id == category_filter
    )
    return FlashcardDeck(words=selected)
