"""JSON schema validation for store records."""

from .validator import ValidationError, validate_category_record, validate_word_record

__all__ = [
    "ValidationError",
    "validate_category_record",
    "validate_word_record",
]
