"""Pydantic models for data validation and type checking."""

from models.job import JobRecord
from models.notification import DeliveryReport
from models.types import AudienceLabel, ChannelBindings, ChannelID, JobID

__all__ = [
    "JobRecord",
    "DeliveryReport",
    "JobID",
    "AudienceLabel",
    "ChannelID",
    "ChannelBindings",
]
