"""Tests for work order row validation."""

from datetime import datetime, timedelta, timezone

from workshop_queue.io.validators import parse_timestamp, validate_job_row


def _row(**overrides):
    row = {
        "id": 1,
        "status": "pending",
        "priority": "normal",
        "created_at": "2026-03-02T08:00:00+00:00",
    }
    row.update(overrides)
    return row


class TestParseTimestamp:

    def test_iso_with_offset(self):
        ts = parse_timestamp("2026-03-02T08:00:00+00:00")
        assert ts == datetime(2026, 3, 2, 8, 0, tzinfo=timezone.utc)

    def test_trailing_z(self):
        ts = parse_timestamp("2026-03-02T08:00:00Z")
        assert ts.utcoffset() == timedelta(0)

    def test_fractional_seconds(self):
        ts = parse_timestamp("2026-03-02T08:00:00.123456+00:00")
        assert ts.microsecond == 123456

    def test_date_only_taken_as_utc(self):
        ts = parse_timestamp("2026-03-02")
        assert ts == datetime(2026, 3, 2, tzinfo=timezone.utc)
        assert ts.tzinfo is timezone.utc

    def test_naive_string_taken_as_utc(self):
        ts = parse_timestamp("2026-03-02T08:00:00")
        assert ts.utcoffset() == timedelta(0)

    def test_other_offsets_converted_to_utc(self):
        ts = parse_timestamp("2026-03-02T10:00:00+02:00")
        assert ts == datetime(2026, 3, 2, 8, 0, tzinfo=timezone.utc)
        assert ts.tzinfo is timezone.utc

    def test_naive_datetime_passthrough_made_aware(self):
        now = datetime(2026, 1, 1, 9, 30)
        assert parse_timestamp(now) == now.replace(tzinfo=timezone.utc)

    def test_mixed_formats_are_comparable(self):
        day = parse_timestamp("2026-03-01")
        stamp = parse_timestamp("2026-03-02T08:00:00Z")
        assert day < stamp

    def test_unreadable_values(self):
        for value in (None, "", "   ", "yesterday", 12345, "2026-13-45"):
            assert parse_timestamp(value) is None


class TestValidateJobRow:

    def test_valid_row(self):
        assert validate_job_row(_row(), 1) == []

    def test_missing_priority_is_fine(self):
        row = _row()
        del row["priority"]
        assert validate_job_row(row, 1) == []

    def test_missing_id(self):
        errors = validate_job_row(_row(id=None), 4)
        assert errors == ["Row 4: id is missing"]

    def test_unknown_status(self):
        errors = validate_job_row(_row(status="on_hold"), 2)
        assert len(errors) == 1
        assert "unknown status 'on_hold'" in errors[0]

    def test_unknown_priority(self):
        errors = validate_job_row(_row(priority="asap"), 3)
        assert len(errors) == 1
        assert "Row 3" in errors[0]
        assert "treated as 'normal'" in errors[0]

    def test_bad_dates(self):
        errors = validate_job_row(
            _row(created_at="soon", promised_date="friday"), 5
        )
        assert len(errors) == 2
        assert any("created_at" in e for e in errors)
        assert any("promised_date" in e for e in errors)

    def test_blank_dates_allowed(self):
        row = _row(created_at=None, scheduled_start="")
        assert validate_job_row(row, 1) == []

    def test_multiple_problems(self):
        row = {"status": "bogus", "priority": "meh", "created_at": "x"}
        assert len(validate_job_row(row, 1)) == 4
