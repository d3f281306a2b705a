"""Work order ranking engine."""

import logging
from typing import Callable, Iterable, Optional

from workshop_queue.jobs.models import JobRecord, RankedJob
from workshop_queue.jobs.scoring import score
from workshop_queue.utils.constants import SORT_MODES
from workshop_queue.utils.dates import as_utc

logger = logging.getLogger(__name__)

SearchPredicate = Callable[[JobRecord], bool]


def _check_mode(mode: str):
    if mode not in SORT_MODES:
        raise ValueError(
            f"Unknown sort mode '{mode}' "
            f"(expected one of: {', '.join(SORT_MODES)})"
        )


def _by_date(ranked: list[RankedJob], newest_first: bool) -> list[RankedJob]:
    """Order by created_at; undated jobs go last in input order."""
    dated = [r for r in ranked if r.created_at is not None]
    undated = [r for r in ranked if r.created_at is None]
    dated = sorted(dated, key=lambda r: as_utc(r.created_at),
                   reverse=newest_first)
    return dated + undated


def rank(jobs: Iterable[JobRecord], mode: Optional[str] = None,
         search_predicate: Optional[SearchPredicate] = None
         ) -> list[RankedJob]:
    """Filter, score and order a batch of jobs.

    ``mode`` is one of ``SORT_MODES`` and defaults to
    ``Config.DEFAULT_SORT_MODE``. Priority ordering is stable, so jobs
    with equal scores keep their input order. The input is never
    mutated; a new list is returned.
    """
    if mode is None:
        from workshop_queue.config import Config
        mode = Config.DEFAULT_SORT_MODE
    _check_mode(mode)

    if search_predicate is not None:
        jobs = [j for j in jobs if search_predicate(j)]

    ranked = [RankedJob(job=j, priority_score=score(j)) for j in jobs]

    if mode == "priority":
        ranked = sorted(ranked, key=lambda r: r.priority_score, reverse=True)
    elif mode == "newest":
        ranked = _by_date(ranked, newest_first=True)
    else:
        ranked = _by_date(ranked, newest_first=False)

    logger.debug(f"Ranked {len(ranked)} jobs by {mode}")
    return ranked


def unscheduled_queue(jobs: Iterable[JobRecord]) -> list[RankedJob]:
    """Active jobs without a scheduled start, highest score first.

    Jobs are taken oldest first before ranking, so equal scores come
    out in creation order.
    """
    candidates = [j for j in jobs if j.is_active and not j.is_scheduled]
    oldest_first = [r.job for r in rank(candidates, "oldest")]
    return rank(oldest_first, "priority")
