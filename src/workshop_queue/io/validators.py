"""Data-quality checks for upstream work order rows."""

from datetime import datetime
from typing import Optional

from workshop_queue.utils.constants import JOB_PRIORITIES, JOB_STATUSES
from workshop_queue.utils.dates import as_utc


def parse_timestamp(value) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as aware UTC, or None if unreadable.

    Timestamps without an offset (including bare dates) are taken as UTC.
    """
    if isinstance(value, datetime):
        return as_utc(value)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return as_utc(parsed)


def validate_job_row(row: dict, row_num: int) -> list[str]:
    """Check one work order row. Returns list of warning strings.

    Warnings never stop a row from loading; the affected field falls
    back to its default.
    """
    warnings = []

    if row.get("id") is None:
        warnings.append(f"Row {row_num}: id is missing")

    status = row.get("status")
    if status not in JOB_STATUSES:
        warnings.append(
            f"Row {row_num}: unknown status '{status}', using 'pending'"
        )

    priority = row.get("priority")
    if priority is not None and priority not in JOB_PRIORITIES:
        warnings.append(
            f"Row {row_num}: unknown priority '{priority}', "
            f"treated as 'normal'"
        )

    for key in ("created_at", "scheduled_start", "promised_date"):
        value = row.get(key)
        if value not in (None, "") and parse_timestamp(value) is None:
            warnings.append(f"Row {row_num}: {key} '{value}' is not a date")

    return warnings
