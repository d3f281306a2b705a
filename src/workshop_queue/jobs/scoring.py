"""Priority scoring for work order triage.

Every contribution is independent of the others, so a job's score is
just the sum of the weights whose condition holds. Missing or malformed
fields contribute nothing (or count as ``normal`` priority) instead of
raising, since upstream rows are not guaranteed complete.
"""

from datetime import datetime
from typing import Optional

from workshop_queue.jobs.models import JobRecord
from workshop_queue.utils.constants import (
    CUSTOMER_WAITING_WEIGHT, IN_PROGRESS_WEIGHT, PRIORITY_ACCOUNT_WEIGHT,
    PRIORITY_WEIGHTS,
)
from workshop_queue.utils.dates import as_utc, utc_now

MAX_SCORE = (
    IN_PROGRESS_WEIGHT
    + max(PRIORITY_WEIGHTS.values())
    + CUSTOMER_WAITING_WEIGHT
    + PRIORITY_ACCOUNT_WEIGHT
)


def score_breakdown(job: JobRecord) -> dict[str, int]:
    """Return each non-zero contribution to the job's score, by name."""
    parts: dict[str, int] = {}
    if job.status == "in_progress":
        parts["in_progress"] = IN_PROGRESS_WEIGHT
    priority_weight = PRIORITY_WEIGHTS[job.effective_priority]
    if priority_weight:
        parts[f"priority_{job.effective_priority}"] = priority_weight
    if job.customer_waiting:
        parts["customer_waiting"] = CUSTOMER_WAITING_WEIGHT
    if job.customer_is_priority_account:
        parts["priority_account"] = PRIORITY_ACCOUNT_WEIGHT
    return parts


def score(job: JobRecord) -> int:
    """Compute the triage score of a job (0 to ``MAX_SCORE``)."""
    return sum(score_breakdown(job).values())


def attention_flag(job: JobRecord,
                   now: Optional[datetime] = None) -> Optional[str]:
    """Classify why a job needs a mechanic's attention, if at all.

    Checks, in order: customer waiting on site, urgent priority, high
    priority, promised date reached. Returns the first matching flag
    name or ``None``. Naive datetimes are compared as UTC.
    """
    if job.customer_waiting:
        return "customer_waiting"
    if job.priority == "urgent":
        return "urgent"
    if job.priority == "high":
        return "high"
    if job.promised_date is not None:
        now = as_utc(now) if now is not None else utc_now()
        if as_utc(job.promised_date) <= now:
            return "overdue"
    return None
