"""Tests for timezone helpers."""

from datetime import datetime, timedelta, timezone

from workshop_queue.utils.dates import as_utc, utc_now


class TestAsUtc:

    def test_none(self):
        assert as_utc(None) is None

    def test_naive_taken_as_utc(self):
        assert as_utc(datetime(2026, 3, 2, 8, 0)) == datetime(
            2026, 3, 2, 8, 0, tzinfo=timezone.utc
        )

    def test_offset_converted(self):
        plus_two = timezone(timedelta(hours=2))
        result = as_utc(datetime(2026, 3, 2, 10, 0, tzinfo=plus_two))
        assert result.tzinfo is timezone.utc
        assert result.hour == 8


class TestUtcNow:

    def test_is_aware(self):
        assert utc_now().utcoffset() == timedelta(0)
