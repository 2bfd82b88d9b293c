"""Pydantic models for job posting data."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.types import JobID


class JobRecord(BaseModel):
    """A row from the job_analysis table."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: JobID
    job_title: str
    job_company: str
    job_location: str | None = None
    remote_status: str | None = None
    experience_level: str | None = None
    url: str
    salary_range_min: int | None = Field(None, ge=0)
    salary_range_max: int | None = Field(None, ge=0)
    created_at: datetime

    # Qualification flags are set by ingestion
    is_software_engineering: bool = False
    is_active: bool = False
    is_us: bool = False
    posted_to_discord: bool = False

    @field_validator("salary_range_min", "salary_range_max", mode="before")
    @classmethod
    def _round_salary(cls, value):
        # numeric columns can come back as floats
        if isinstance(value, float):
            return round(value)
        return value

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def is_qualified(self) -> bool:
        return self.is_software_engineering and self.is_active and self.is_us
