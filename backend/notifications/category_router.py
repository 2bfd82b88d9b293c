"""
Routing of selected jobs into audience buckets.

Each job lands in exactly one bucket, picked by its experience_level. Missing
or unknown levels fall back to the senior bucket.
"""

from models.job import JobRecord
from models.types import AudienceLabel, JobID

SENIOR = "senior"
EARLY_CAREER = "early career"
NEW_GRAD = "new grad"
INTERNSHIP = "internship"

# Delivery order follows this tuple
AUDIENCE_LABELS: tuple[AudienceLabel, ...] = (SENIOR, EARLY_CAREER, NEW_GRAD, INTERNSHIP)
DEFAULT_AUDIENCE = SENIOR


def audience_for(job: JobRecord) -> AudienceLabel:
    """Pick the audience label for a job (exact match, else the default)."""
    if job.experience_level in AUDIENCE_LABELS:
        return job.experience_level
    return DEFAULT_AUDIENCE


def route_jobs(jobs: list[JobRecord]) -> dict[AudienceLabel, list[JobRecord]]:
    """
    Partition jobs into audience buckets.

    Every known label is present in the result, possibly with an empty list.
    Input order is preserved within each bucket.
    """
    buckets: dict[AudienceLabel, list[JobRecord]] = {label: [] for label in AUDIENCE_LABELS}
    for job in jobs:
        buckets[audience_for(job)].append(job)
    return buckets


def routed_job_ids(buckets: dict[AudienceLabel, list[JobRecord]]) -> set[JobID]:
    """Ids of every job in every bucket."""
    return {job.id for bucket in buckets.values() for job in bucket}
