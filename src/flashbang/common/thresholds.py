"""Centralized threshold and magic number configuration.

This module contains the constants used by the scheduler and the session
builder. Having these in one place makes tuning easier and documents where
each value comes from.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SchedulerThresholds:
    """Constants of the SM-2 review schedule."""

    # Defaults for never-studied words
    default_interval: int = 0
    default_ease_factor: float = 2.5
    default_consecutive_correct: int = 0

    # Ease factor floor (SM-2); no ceiling is applied
    min_ease_factor: float = 1.3

    # Intervals (days) for the first two successful reviews
    first_interval: int = 1
    second_interval: int = 6
    relapse_interval: int = 1

    # Quality grades
    max_quality: int = 5
    passing_quality: int = 3  # Grades at or above this count as recalled
    correct_quality: int = 5  # Grade fed for a correct quiz answer
    incorrect_quality: int = 1  # Grade fed for a wrong quiz answer


@dataclass(frozen=True)
class SessionThresholds:
    """Constants of quiz session building."""

    min_session_words: int = 4  # Sessions need at least this many distinct words
    distractors_per_question: int = 3  # Options per question = this + 1
    min_distractors: int = 1  # Fewer than this and the word is skipped
    unlimited_count: int = 9999  # Session count meaning "all available"


@dataclass(frozen=True)
class LocaleDefaults:
    """Language tags used when a word has no category."""

    source_language: str = "de"
    target_language: str = "en"


SCHEDULER = SchedulerThresholds()
SESSION = SessionThresholds()
LOCALES = LocaleDefaults()
