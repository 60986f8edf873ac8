"""
Serialization Utilities

Converts between store records (plain dicts keyed by store column names)
and core models.

- `deserialize_*` validate against the schema first, then build the model
- `serialize_*` produce records the store accepts
- Collections are converted one record at a time; a bad record fails the
  whole call with the offending index in the error path
"""

from __future__ import annotations

from typing import Any, Iterable

from ..models.categories import Category
from ..models.words import MemoryState, Word
from ..schemas.validator import (
    ValidationError,
    validate_category_record,
    validate_word_record,
)


# ─────────────────────────────────────────────────────────────────────────────
# Word Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_word(word: Word) -> dict[str, Any]:
    """
    Serialize a Word to a store record.

    Args:
        word: Word instance to serialize

    Returns:
        Dictionary using store column names
    """
    return word.to_dict()


def deserialize_word(data: dict[str, Any], *, validate: bool = True) -> Word:
    """
    Deserialize a Word from a store record.

    Args:
        data: Record from the store
        validate: Whether to validate against the schema first

    Returns:
        Word instance

    Raises:
        ValidationError: If the record is invalid or a timestamp cannot be parsed
    """
    if validate:
        validate_word_record(data)
    try:
        return Word.from_dict(data)
    except ValueError as e:
        raise ValidationError(f"Invalid word record: {e}", errors=[str(e)]) from e


def deserialize_words(records: Iterable[dict[str, Any]], *, validate: bool = True) -> list[Word]:
    """
    Deserialize a collection of word records, preserving order.

    Raises:
        ValidationError: For the first invalid record; ``path`` is prefixed
            with its index
    """
    words = []
    for index, record in enumerate(records):
        try:
            words.append(deserialize_word(record, validate=validate))
        except ValidationError as e:
            path = f"{index}/{e.path}" if e.path else str(index)
            raise ValidationError(f"Record {index}: {e}", path=path, errors=e.errors) from e
    return words


# ─────────────────────────────────────────────────────────────────────────────
# Category Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_category(category: Category) -> dict[str, Any]:
    """Serialize a Category to a store record."""
    return category.to_dict()


def deserialize_category(data: dict[str, Any], *, validate: bool = True) -> Category:
    """
    Deserialize a Category from a store record.

    Raises:
        ValidationError: If the record is invalid
    """
    if validate:
        validate_category_record(data)
    try:
        return Category.from_dict(data)
    except ValueError as e:
        raise ValidationError(f"Invalid category record: {e}", errors=[str(e)]) from e


def deserialize_categories(
    records: Iterable[dict[str, Any]], *, validate: bool = True
) -> list[Category]:
    """Deserialize a collection of category records, preserving order."""
    categories = []
    for index, record in enumerate(records):
        try:
            categories.append(deserialize_category(record, validate=validate))
        except ValidationError as e:
            path = f"{index}/{e.path}" if e.path else str(index)
            raise ValidationError(f"Record {index}: {e}", path=path, errors=e.errors) from e
    return categories


# ─────────────────────────────────────────────────────────────────────────────
# Memory State Updates
# ─────────────────────────────────────────────────────────────────────────────

def serialize_memory_update(state: MemoryState) -> dict[str, Any]:
    """
    Build the partial update a store applies to a word after a review.

    Returns:
        Dict with next_review, interval, ease_factor, consecutive_correct
    """
    return state.to_record()
