"""Shared test fixtures."""

from datetime import datetime, timedelta

import pytest

from workshop_queue.jobs.models import JobRecord

BASE_TIME = datetime(2026, 3, 2, 8, 0, 0)


@pytest.fixture
def base_time():
    return BASE_TIME


@pytest.fixture
def three_jobs():
    """J1 (score 20), J2 (score 230), J3 (score 40), oldest to newest."""
    j1 = JobRecord(
        id="J1", status="pending", priority="normal",
        created_at=BASE_TIME,
        job_number="WO-1001", description="Annual service",
        customer_first_name="Dana", customer_last_name="Moss",
        vehicle_registration="AB12 CDE",
    )
    j2 = JobRecord(
        id="J2", status="in_progress", priority="urgent",
        customer_waiting=True,
        created_at=BASE_TIME + timedelta(hours=1),
        job_number="WO-1002", description="Rear brake pads",
        customer_first_name="Lee", customer_last_name="Park",
        vehicle_registration="XY65 ZZT",
    )
    j3 = JobRecord(
        id="J3", status="pending", priority="low",
        customer_is_priority_account=True,
        created_at=BASE_TIME + timedelta(hours=2),
        job_number="WO-1003", description="Chain and sprocket kit",
        customer_first_name="Sam", customer_last_name="Okafor",
        vehicle_registration="MK70 BKE",
    )
    return [j1, j2, j3]


@pytest.fixture
def mixed_jobs(three_jobs):
    """The three jobs plus one of each remaining status."""
    return three_jobs + [
        JobRecord(id="J4", status="waiting_on_parts", priority="high",
                  created_at=BASE_TIME + timedelta(hours=3)),
        JobRecord(id="J5", status="completed", priority="urgent",
                  created_at=BASE_TIME + timedelta(hours=4)),
        JobRecord(id="J6", status="cancelled", priority="normal",
                  created_at=BASE_TIME + timedelta(hours=5)),
    ]
