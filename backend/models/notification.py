"""Pydantic models for the Discord dispatch pipeline."""

from pydantic import BaseModel, Field

from models.types import JobID


class DeliveryReport(BaseModel):
    """Outcome of one delivery pass over the routed buckets."""

    attempted_ids: set[JobID] = Field(default_factory=set)
    sent: int = 0
    failed: int = 0
    skipped: int = 0
