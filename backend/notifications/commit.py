"""
Marking delivered jobs as posted.

posted_to_discord is the only record of what has been delivered, across
cycles and restarts. It only ever goes from false to true, in one bulk update
per cycle.
"""

from typing import Any, Iterable

from models.types import JobID
from notifications.error_logger import log_dispatch_error
from shared.db import JOBS_TABLE


def mark_jobs_as_posted(supabase: Any, job_ids: Iterable[JobID]) -> bool:
    """
    Flip posted_to_discord to true for the given jobs.

    Idempotent - ids that are already posted are simply set again. Never
    raises; on failure the jobs stay selectable for the next cycle.

    Args:
        supabase: Supabase client
        job_ids: Ids of every job attempted this cycle

    Returns:
        True if the update went through (or there was nothing to do)
    """
    ids = sorted(set(job_ids), key=str)
    if not ids:
        return True

    try:
        supabase.table(JOBS_TABLE).update({"posted_to_discord": True}).in_("id", ids).execute()
    except Exception as e:
        print(f"✗ Error marking jobs as posted: {e}")
        log_dispatch_error(
            error_type="commit",
            error_message=str(e),
            context={"job_count": len(ids), "job_ids": ids},
        )
        return False

    print(f"Marked {len(ids)} jobs as posted to Discord")
    return True
