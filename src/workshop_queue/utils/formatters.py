"""Formatting utilities for display values."""

from workshop_queue.jobs.scoring import MAX_SCORE
from workshop_queue.utils.constants import (
    DEFAULT_PRIORITY, JOB_PRIORITIES, JOB_PRIORITY_LABELS, JOB_STATUS_LABELS,
)


def format_status(status: str) -> str:
    """Human-readable status, falling back to a title-cased key."""
    if status in JOB_STATUS_LABELS:
        return JOB_STATUS_LABELS[status]
    return str(status or "").replace("_", " ").title()


def format_priority(priority) -> str:
    """Human-readable priority; unknown values read as Normal."""
    if priority in JOB_PRIORITIES:
        return JOB_PRIORITY_LABELS[priority]
    return JOB_PRIORITY_LABELS[DEFAULT_PRIORITY]


def format_score(score: int) -> str:
    """Format a triage score against the maximum, e.g. '230 / 270'."""
    return f"{score} / {MAX_SCORE}"
