"""
Selection of job postings that are due for a Discord post.

A job is due once it has aged into the selection window (created 6-7 hours
ago by default), is still active, software-engineering relevant, US based,
and has not been posted yet.
"""

from datetime import datetime, timedelta
from typing import Any

from pydantic import ValidationError

from models.job import JobRecord
from notifications.error_logger import log_dispatch_error
from shared.db import JOBS_TABLE

MIN_AGE = timedelta(hours=6)
MAX_AGE = timedelta(hours=7)

JOB_COLUMNS = (
    "id, job_title, job_company, job_location, remote_status, "
    "experience_level, url, salary_range_min, salary_range_max, created_at, "
    "is_software_engineering, is_active, is_us, posted_to_discord"
)


def selection_window(
    now: datetime, min_age: timedelta = MIN_AGE, max_age: timedelta = MAX_AGE
) -> tuple[datetime, datetime]:
    """Return the inclusive (start, end) creation-time window for ``now``."""
    return now - max_age, now - min_age


def is_eligible(job: JobRecord, window_start: datetime, window_end: datetime) -> bool:
    """Check a record against every eligibility rule."""
    return (
        job.is_qualified
        and not job.posted_to_discord
        and window_start <= job.created_at <= window_end
    )


def select_jobs_to_post(
    supabase: Any,
    now: datetime,
    min_age: timedelta = MIN_AGE,
    max_age: timedelta = MAX_AGE,
) -> list[JobRecord]:
    """
    Fetch jobs that are due for posting, newest first.

    Never raises - a data store failure is reported and treated as
    "nothing to post".

    Args:
        supabase: Supabase client
        now: Reference time (timezone aware)
        min_age: Youngest age a job must have reached
        max_age: Oldest age a job may have

    Returns:
        Eligible JobRecords ordered by created_at descending
    """
    window_start, window_end = selection_window(now, min_age, max_age)

    try:
        response = (
            supabase.table(JOBS_TABLE)
            .select(JOB_COLUMNS)
            .gte("created_at", window_start.isoformat())
            .lte("created_at", window_end.isoformat())
            .eq("is_software_engineering", True)
            .eq("is_active", True)
            .eq("is_us", True)
            .eq("posted_to_discord", False)
            .order("created_at", desc=True)
            .execute()
        )
    except Exception as e:
        print(f"✗ Database query error: {e}")
        log_dispatch_error(
            error_type="selection",
            error_message=str(e),
            context={
                "window_start": window_start.isoformat(),
                "window_end": window_end.isoformat(),
            },
        )
        return []

    jobs = []
    for row in response.data or []:
        try:
            job = JobRecord.model_validate(row)
        except ValidationError as e:
            print(f"  ⚠ Skipping malformed job row {row.get('id')}: {e.error_count()} errors")
            continue

        # The store already filters; re-check so a loose query can't leak rows
        if is_eligible(job, window_start, window_end):
            jobs.append(job)

    jobs.sort(key=lambda job: job.created_at, reverse=True)
    return jobs
