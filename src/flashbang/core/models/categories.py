"""
Module: categories

Purpose:
    Provides the Category record. Categories group words and carry the
    language tags used to pick a speech/translation locale elsewhere.
    The core never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from flashbang.common.thresholds import LOCALES
from flashbang.common.timestamps import format_timestamp, parse_timestamp


@dataclass(frozen=True, slots=True)
class Category:
    """
    Word category (immutable).

    Attributes:
        id: Store record id
        name: Display name
        source_language: Language tag of word terms (e.g. "de")
        target_language: Language tag of translations (e.g. "en")
        is_system: True for the built-in "Uncategorized" category
        created_at: Creation time in the store
    """

    id: str
    name: str
    source_language: str = LOCALES.source_language
    target_language: str = LOCALES.target_language
    is_system: bool = False
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a store record."""
        return {
            "id": self.id,
            "name": self.name,
            "original_language": self.source_language,
            "translation_language": self.target_language,
            "is_system": self.is_system,
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Category:
        """Deserialize from a store record."""
        return cls(
            id=str(data["id"]),
            name=data["name"],
            source_language=data.get("original_language") or LOCALES.source_language,
            target_language=data.get("translation_language") or LOCALES.target_language,
            is_system=bool(data.get("is_system", False)),
            created_at=parse_timestamp(data.get("created_at")),
        )
