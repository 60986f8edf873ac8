"""Core utilities: store record conversion."""

from .serialization import (
    deserialize_categories,
    deserialize_category,
    deserialize_word,
    deserialize_words,
    serialize_category,
    serialize_memory_update,
    serialize_word,
)

__all__ = [
    "deserialize_categories",
    "deserialize_category",
    "deserialize_word",
    "deserialize_words",
    "serialize_category",
    "serialize_memory_update",
    "serialize_word",
]
