"""
Unit tests for timestamp helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest

from flashbang.common.timestamps import as_utc, format_timestamp, parse_timestamp


class TestParseTimestamp:
    """Tests for parse_timestamp()."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_parse_when_absent_then_none(self, value):
        assert parse_timestamp(value) is None

    def test_parse_when_zulu_suffix_then_utc(self):
        result = parse_timestamp("2024-03-01T12:00:00Z")

        assert result == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        assert result.utcoffset() == timedelta(0)

    def test_parse_when_offset_then_converted_to_utc(self):
        result = parse_timestamp("2024-03-01T14:00:00+02:00")

        assert result == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc

    def test_parse_when_naive_string_then_read_as_utc(self):
        result = parse_timestamp("2024-03-01T12:00:00")

        assert result.tzinfo is timezone.utc

    @pytest.mark.parametrize("value, micro", [
        ("2024-03-01T12:00:45.12345+00:00", 123450),
        ("2024-03-01T12:00:45.1234567Z", 123456),
        ("2024-03-01T12:00:45.5", 500000),
    ])
    def test_parse_when_uneven_fraction_digits_then_microseconds(self, value, micro):
        result = parse_timestamp(value)

        assert result.second == 45
        assert result.microsecond == micro
        assert result.tzinfo is timezone.utc

    def test_parse_when_garbage_then_raises_error(self):
        with pytest.raises(ValueError):
            parse_timestamp("yesterday")


class TestFormatTimestamp:
    """Tests for format_timestamp() and as_utc()."""

    def test_format_when_none_then_none(self):
        assert format_timestamp(None) is None

    def test_format_when_aware_then_iso_utc(self):
        plus_one = timezone(timedelta(hours=1))
        value = datetime(2024, 3, 1, 13, 0, tzinfo=plus_one)

        assert format_timestamp(value) == "2024-03-01T12:00:00+00:00"

    def test_as_utc_when_naive_then_attaches_utc(self):
        assert as_utc(datetime(2024, 3, 1)).tzinfo is timezone.utc
