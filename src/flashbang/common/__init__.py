"""Shared constants and timestamp helpers for flashbang."""

from .thresholds import (
    LOCALES,
    SCHEDULER,
    SESSION,
    LocaleDefaults,
    SchedulerThresholds,
    SessionThresholds,
)
from .timestamps import as_utc, format_timestamp, parse_timestamp, utcnow

__all__ = [
    "LOCALES",
    "SCHEDULER",
    "SESSION",
    "LocaleDefaults",
    "SchedulerThresholds",
    "SessionThresholds",
    "as_utc",
    "format_timestamp",
    "parse_timestamp",
    "utcnow",
]
