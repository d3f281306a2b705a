"""Status views and free-text search over work orders."""

from typing import Callable, Iterable, Optional

from workshop_queue.jobs.models import JobRecord
from workshop_queue.utils.constants import JOB_VIEWS


def filter_by_view(jobs: Iterable[JobRecord],
                   view: Optional[str] = None) -> list[JobRecord]:
    """Keep the jobs whose status belongs to the named view.

    ``view`` defaults to ``Config.DEFAULT_JOB_VIEW``.
    """
    if view is None:
        from workshop_queue.config import Config
        view = Config.DEFAULT_JOB_VIEW
    if view not in JOB_VIEWS:
        raise ValueError(
            f"Unknown job view '{view}' "
            f"(expected one of: {', '.join(JOB_VIEWS)})"
        )
    statuses = JOB_VIEWS[view]
    return [j for j in jobs if j.status in statuses]


def _contains(value, needle: str) -> bool:
    return isinstance(value, str) and needle in value.lower()


def make_search_predicate(
        query: Optional[str]) -> Optional[Callable[[JobRecord], bool]]:
    """Build a case-insensitive search predicate, or None for no query.

    A job matches when the query appears in its job number, customer
    first or last name, vehicle registration, or description.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return None

    def _matches(job: JobRecord) -> bool:
        return any(_contains(value, needle) for value in (
            job.job_number,
            job.customer_first_name,
            job.customer_last_name,
            job.vehicle_registration,
            job.description,
        ))

    return _matches
