"""
Unit Tests for Word and MemoryState Models

Tests for memory normalisation, direction lookups and immutability.
"""

from datetime import datetime, timezone

import pytest

from flashbang.core.models import Direction, MemoryState, Word


class TestMemoryState:
    """Tests for MemoryState dataclass."""

    def test_fresh_when_called_then_defaults(self):
        state = MemoryState.fresh()

        assert state.interval == 0
        assert state.ease_factor == 2.5
        assert state.consecutive_correct == 0
        assert state.next_review is None
        assert state.is_new is True

    def test_init_when_negative_interval_then_raises_error(self):
        with pytest.raises(ValueError, match="interval cannot be negative"):
            MemoryState(interval=-1)

    def test_init_when_negative_streak_then_raises_error(self):
        with pytest.raises(ValueError, match="consecutive_correct cannot be negative"):
            MemoryState(consecutive_correct=-2)

    def test_init_when_frozen_then_immutable(self):
        state = MemoryState.fresh()
        with pytest.raises(AttributeError):
            state.interval = 3  # type: ignore

    def test_to_record_when_scheduled_then_store_columns(self):
        review_at = datetime(2024, 3, 2, 12, 0, tzinfo=timezone.utc)
        state = MemoryState(interval=1, ease_factor=2.6, consecutive_correct=1, next_review=review_at)

        record = state.to_record()

        assert record == {
            "next_review": "2024-03-02T12:00:00+00:00",
            "interval": 1,
            "ease_factor": 2.6,
            "consecutive_correct": 1,
        }


class TestWordMemory:
    """Tests for Word.memory normalisation."""

    def test_memory_when_fields_missing_then_defaults(self):
        word = Word(id="w1", term="Hund", translation="dog")

        assert word.memory == MemoryState.fresh()

    def test_memory_when_fields_present_then_copied(self):
        review_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        word = Word(
            id="w1", term="Hund", translation="dog",
            interval=6, ease_factor=2.7, consecutive_correct=2, next_review=review_at,
        )

        assert word.memory == MemoryState(6, 2.7, 2, review_at)

    def test_memory_when_negative_counts_stored_then_read_as_zero(self):
        """Bad stored counts are normalised, not rejected."""
        word = Word(id="w1", term="Hund", translation="dog", interval=-4, consecutive_correct=-1)

        assert word.memory.interval == 0
        assert word.memory.consecutive_correct == 0

    def test_with_memory_when_applied_then_other_fields_kept(self):
        word = Word(id="w1", term="Hund", translation="dog", category_id="c1", image_url="dog.png")
        state = MemoryState(interval=6, ease_factor=2.7, consecutive_correct=2)

        updated = word.with_memory(state)

        assert updated.memory == state
        assert (updated.id, updated.term, updated.category_id, updated.image_url) == (
            "w1", "Hund", "c1", "dog.png"
        )
        assert word.interval is None

    @pytest.mark.parametrize("stored, expected", [(0.0, 2.5), (0.5, 1.3), (-1.0, 1.3)])
    def test_memory_when_ease_zero_or_below_floor_then_normalised(self, stored, expected):
        word = Word(id="w1", term="Hund", translation="dog", ease_factor=stored)

        assert word.memory.ease_factor == pytest.approx(expected)


class TestWordDirections:
    """Tests for prompt_for() / answer_for()."""

    @pytest.fixture
    def word(self) -> Word:
        return Word(id="w1", term="Hund", translation="dog")

    def test_answer_for_when_source_to_target_then_translation(self, word):
        assert word.prompt_for(Direction.SOURCE_TO_TARGET) == "Hund"
        assert word.answer_for(Direction.SOURCE_TO_TARGET) == "dog"

    def test_answer_for_when_target_to_source_then_term(self, word):
        assert word.prompt_for(Direction.TARGET_TO_SOURCE) == "dog"
        assert word.answer_for(Direction.TARGET_TO_SOURCE) == "Hund"

    def test_answer_for_when_mixed_then_raises_error(self, word):
        with pytest.raises(ValueError, match="must be resolved"):
            word.answer_for(Direction.MIXED)

    def test_is_uncategorized_when_no_category_then_true(self, word):
        assert word.is_uncategorized is True
