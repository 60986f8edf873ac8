"""
Module: session.config

Purpose:
    Configuration dataclass for quiz session building.
    Immutable configuration with validation on construction.

Key Classes:
    - SelectionMode: new / review / random pool selection
    - SessionConfig: Main configuration for session building

Dependencies:
    - dataclasses (std)
    - flashbang.core.models: Direction

Used By:
    - flashbang.session.selector: Pool selection
    - flashbang.session.builder: Session orchestration
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from flashbang.common.thresholds import SESSION
from flashbang.core.models import Direction


class SelectionMode(str, Enum):
    """
    How words are picked from the (category-filtered) pool.

    Attributes:
        NEW: Keep the pool in input order (callers pass newest first)
        REVIEW: Due words only, most overdue first
        RANDOM: Uniformly shuffled pool
    """

    NEW = "new"
    REVIEW = "review"
    RANDOM = "random"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SessionConfig:
    """
    Configuration for building a quiz session (immutable).

    Attributes:
        selection_mode: How words are chosen and ordered
        count: Maximum number of words; None or 9999 means all available
        direction: Question direction; MIXED is resolved per question
        seed: Random seed for reproducible sessions (None = unseeded)

    Invariants:
        - count is None or count > 0

    Example:
        >>> config = SessionConfig(count=9999)
        >>> config.is_unlimited
        True
    """

    selection_mode: SelectionMode = SelectionMode.NEW
    count: Optional[int] = 10
    direction: Direction = Direction.MIXED
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.selection_mode, SelectionMode):
            raise ValueError(f"selection_mode must be a SelectionMode: {self.selection_mode!r}")
        if not isinstance(self.direction, Direction):
            raise ValueError(f"direction must be a Direction: {self.direction!r}")
        if self.count is not None and (
            isinstance(self.count, bool) or not isinstance(self.count, int)
        ):
            raise ValueError(f"count must be an integer: {self.count!r}")
        if self.count is not None and self.count <= 0:
            raise ValueError(f"count must be positive: {self.count}")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_unlimited(self) -> bool:
        """True if every matching word should be used."""
        return self.count is None or self.count >= SESSION.unlimited_count

    @property
    def limit(self) -> Optional[int]:
        """Truncation length, or None when unlimited."""
        return None if self.is_unlimited else self.count

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SessionConfig:
        """
        Build a config from a UI payload.

        Accepts ``mode``/``selection_mode``, ``count`` and ``direction``
        as plain strings/ints, including the store's legacy direction names.

        Raises:
            ValueError: On unknown modes/directions or invalid count
        """
        mode = data.get("selection_mode", data.get("mode", SelectionMode.NEW))
        count = data.get("count", 10)
        return cls(
            selection_mode=SelectionMode(mode),
            count=None if count is None else int(count),
            direction=Direction(data.get("direction", Direction.MIXED)),
            seed=data.get("seed"),
        )
