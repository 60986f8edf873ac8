"""
Timestamp helpers.

The store exchanges ISO-8601 strings (often with a trailing ``Z``) while the
core compares timezone-aware datetimes. Naive values are read as UTC so that
comparisons never mix naive and aware datetimes.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

TimestampLike = Union[str, datetime, None]

_FRACTION = re.compile(r"(?<=:\d{2})\.(\d+)")


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones to UTC."""
    if value.tzinfo is None or value.utcoffset() == timedelta(0):
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: TimestampLike) -> Optional[datetime]:
    """
    Parse a store timestamp.

    Args:
        value: ISO-8601 string, datetime, or None. Empty strings count as None.

    Returns:
        Aware UTC datetime, or None when absent

    Raises:
        ValueError: If the string is not ISO-8601
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    # fromisoformat before 3.11 only takes 3 or 6 fractional digits
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    return as_utc(datetime.fromisoformat(text))


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Format a datetime as an ISO-8601 UTC string (None passes through)."""
    if value is None:
        return None
    return as_utc(value).isoformat()
