"""Factory functions for creating test job data."""

import itertools
from datetime import datetime, timedelta, timezone
from typing import Any

from models.job import JobRecord

# Fixed reference time so window boundaries are exact
NOW = datetime(2026, 1, 21, 15, 1, tzinfo=timezone.utc)

_ids = itertools.count(1)


def create_test_job(
    job_title: str = "Software Engineer",
    job_company: str = "Acme Corp",
    job_location: str | None = "Chicago, IL",
    remote_status: str | None = "hybrid",
    experience_level: str | None = "senior",
    url: str = "https://boards.example.com/acme/jobs/123",
    salary_range_min: int | None = None,
    salary_range_max: int | None = None,
    age: timedelta = timedelta(hours=6, minutes=30),
    now: datetime = NOW,
    **overrides,
) -> dict[str, Any]:
    """
    Factory for creating a job_analysis row.

    Args:
        job_title: Job title
        job_company: Company name
        job_location: Free-text location
        remote_status: Remote status text
        experience_level: Audience label (or anything else)
        url: Source posting URL
        salary_range_min: Lower salary bound
        salary_range_max: Upper salary bound
        age: How long before ``now`` the job was created (default: inside the window)
        now: Reference time
        **overrides: Override any field

    Returns:
        Dictionary matching the job_analysis schema
    """
    job = {
        "id": next(_ids),
        "job_title": job_title,
        "job_company": job_company,
        "job_location": job_location,
        "remote_status": remote_status,
        "experience_level": experience_level,
        "url": url,
        "salary_range_min": salary_range_min,
        "salary_range_max": salary_range_max,
        "created_at": (now - age).isoformat(),
        "is_software_engineering": True,
        "is_active": True,
        "is_us": True,
        "posted_to_discord": False,
    }

    job.update(overrides)
    return job


def create_test_job_record(**kwargs) -> JobRecord:
    """Same as create_test_job, validated into a JobRecord."""
    return JobRecord.model_validate(create_test_job(**kwargs))
