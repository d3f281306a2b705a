"""Convert joined work order rows into JobRecords.

Rows arrive in the shape of a work order joined with its customer and
vehicle, e.g. ``{"status": ..., "customers": {"is_priority": ...},
"vehicles": {"registration": ...}}``. Flat customer keys are accepted
as well. Bad values are logged and replaced by defaults.
"""

import logging
from typing import Iterable

from workshop_queue.io.validators import parse_timestamp, validate_job_row
from workshop_queue.jobs.models import JobRecord
from workshop_queue.utils.constants import JOB_STATUSES

logger = logging.getLogger(__name__)


def _nested(row: dict, key: str) -> dict:
    value = row.get(key)
    return value if isinstance(value, dict) else {}


def _text(value) -> str:
    return value if isinstance(value, str) else ""


def job_record_from_row(row: dict) -> JobRecord:
    """Build a JobRecord from one row. Never raises on bad field values."""
    customer = _nested(row, "customers")
    vehicle = _nested(row, "vehicles")

    status = row.get("status")
    if status not in JOB_STATUSES:
        status = "pending"

    priority_account = customer.get(
        "is_priority",
        row.get("customer_is_priority_account", row.get("is_priority")),
    )

    return JobRecord(
        id=row.get("id"),
        status=status,
        priority=row.get("priority"),
        customer_waiting=bool(row.get("customer_waiting")),
        customer_is_priority_account=bool(priority_account),
        created_at=parse_timestamp(row.get("created_at")),
        job_number=_text(row.get("job_number")),
        description=_text(row.get("description")),
        customer_first_name=_text(
            customer.get("first_name", row.get("customer_first_name"))
        ),
        customer_last_name=_text(
            customer.get("last_name", row.get("customer_last_name"))
        ),
        vehicle_registration=_text(
            vehicle.get("registration", row.get("vehicle_registration"))
        ),
        scheduled_start=parse_timestamp(row.get("scheduled_start")),
        promised_date=parse_timestamp(row.get("promised_date")),
    )


def load_job_records(rows: Iterable[dict]) -> list[JobRecord]:
    """Convert a batch of rows, logging a warning for each data problem."""
    records = []
    for row_num, row in enumerate(rows, start=1):
        for warning in validate_job_row(row, row_num):
            logger.warning(warning)
        records.append(job_record_from_row(row))
    logger.info(f"Loaded {len(records)} work orders")
    return records
