"""Data models for work order ranking."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from workshop_queue.utils.constants import (
    ACTIVE_STATUSES, DEFAULT_PRIORITY, JOB_PRIORITIES,
)


@dataclass
class JobRecord:
    id: Any = None
    status: str = "pending"
    priority: Optional[str] = DEFAULT_PRIORITY
    customer_waiting: bool = False
    customer_is_priority_account: bool = False
    created_at: Optional[datetime] = None
    # Search and scheduling fields (not scored)
    job_number: str = ""
    description: str = ""
    customer_first_name: str = ""
    customer_last_name: str = ""
    vehicle_registration: str = ""
    scheduled_start: Optional[datetime] = field(default=None, repr=False)
    promised_date: Optional[datetime] = field(default=None, repr=False)

    @property
    def effective_priority(self) -> str:
        """The priority used for scoring; unknown values count as normal."""
        if self.priority in JOB_PRIORITIES:
            return self.priority
        return DEFAULT_PRIORITY

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    @property
    def is_scheduled(self) -> bool:
        return self.scheduled_start is not None

    @property
    def customer_name(self) -> str:
        return f"{self.customer_first_name} {self.customer_last_name}".strip()


@dataclass(frozen=True)
class RankedJob:
    """A job paired with the score it was ranked by."""

    job: JobRecord
    priority_score: int = 0

    @property
    def id(self) -> Any:
        return self.job.id

    @property
    def status(self) -> str:
        return self.job.status

    @property
    def priority(self) -> Optional[str]:
        return self.job.priority

    @property
    def created_at(self) -> Optional[datetime]:
        return self.job.created_at
