"""Tallies behind the work order dashboard tiles."""

from collections import Counter
from typing import Iterable

from workshop_queue.jobs.models import JobRecord


def count_by_status(jobs: Iterable[JobRecord]) -> dict[str, int]:
    """Count jobs per status; statuses with no jobs are left out."""
    return dict(Counter(j.status for j in jobs))


def count_urgent_or_waiting(jobs: Iterable[JobRecord]) -> int:
    """Count jobs that are urgent or have the customer waiting on site."""
    return sum(1 for j in jobs if j.priority == "urgent" or j.customer_waiting)


def queue_stats(jobs: Iterable[JobRecord]) -> dict[str, int]:
    """The four dashboard tiles: pending, in progress, waiting, urgent."""
    jobs = list(jobs)
    by_status = count_by_status(jobs)
    return {
        "pending": by_status.get("pending", 0),
        "in_progress": by_status.get("in_progress", 0),
        "waiting": by_status.get("waiting_on_parts", 0),
        "urgent": count_urgent_or_waiting(jobs),
    }
