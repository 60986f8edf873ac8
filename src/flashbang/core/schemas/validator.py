"""
Schema Validation Utilities

Validates store records against the JSON schemas shipped next to this
module before they are turned into models.

- `validate_word_record()` and `validate_category_record()` check one record
- Fail fast on any schema violation; every violation is reported at once
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}
_VALIDATORS: dict[str, jsonschema.Draft7Validator] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def _get_validator(name: str) -> jsonschema.Draft7Validator:
    if name not in _VALIDATORS:
        schema = _load_schema(name)
        jsonschema.Draft7Validator.check_schema(schema)
        _VALIDATORS[name] = jsonschema.Draft7Validator(schema)
    return _VALIDATORS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _validate(name: str, data: Any) -> None:
    validator = _get_validator(name)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if not errors:
        return
    messages = []
    for error in errors:
        location = "/".join(str(p) for p in error.path)
        messages.append(f"{location}: {error.message}" if location else error.message)
    first_path = "/".join(str(p) for p in errors[0].path)
    raise ValidationError(
        f"Invalid {name} record: {messages[0]}",
        path=first_path,
        errors=messages,
    )


def validate_word_record(data: dict[str, Any]) -> None:
    """
    Validate a word record from the store.

    Args:
        data: Word record to validate

    Raises:
        ValidationError: If data is invalid
    """
    _validate("word", data)


def validate_category_record(data: dict[str, Any]) -> None:
    """
    Validate a category record from the store.

    Args:
        data: Category record to validate

    Raises:
        ValidationError: If data is invalid
    """
    _validate("category", data)
