"""
Discord embed formatting for job postings.

All field formatting lives here so the delivery engine only deals with
channels and pacing.
"""

from typing import Any, Optional

from models.job import JobRecord
from notifications.link_codec import LinkCodec

EMBED_COLOR = 0x6D28D9
FOOTER_TEXT = "JobRadar · Apply now"
NOT_SPECIFIED = "Not specified"
NO_SALARY = "Salary not provided"

# Discord embed limits
TITLE_LIMIT = 256
FIELD_VALUE_LIMIT = 1024
TRUNCATION_MARKER = "..."


def truncate(value: str, limit: int) -> str:
    """Shorten value to at most ``limit`` characters, marker included."""
    if len(value) <= limit:
        return value
    return value[: limit - len(TRUNCATION_MARKER)] + TRUNCATION_MARKER


def format_location(location: Optional[str]) -> str:
    if not location:
        return NOT_SPECIFIED
    return truncate(location, FIELD_VALUE_LIMIT)


def format_remote_status(remote_status: Optional[str]) -> str:
    if not remote_status:
        return NOT_SPECIFIED
    return remote_status[0].upper() + remote_status[1:]


def format_salary(salary_min: Optional[int], salary_max: Optional[int]) -> str:
    """
    Build the salary line.

    A bound only counts when it is positive, so a stored 0 reads as missing.

    Examples:
        >>> format_salary(90000, 120000)
        '$90,000 - $120,000'
        >>> format_salary(100000, None)
        '$100,000+'
        >>> format_salary(None, 120000)
        'Up to $120,000'
        >>> format_salary(None, None)
        'Salary not provided'
    """
    has_min = bool(salary_min and salary_min > 0)
    has_max = bool(salary_max and salary_max > 0)

    if has_min and has_max:
        return f"${salary_min:,} - ${salary_max:,}"
    if has_min:
        return f"${salary_min:,}+"
    if has_max:
        return f"Up to ${salary_max:,}"
    return NO_SALARY


def build_redirect_url(base_url: str, token: str) -> str:
    return f"{base_url.rstrip('/')}/redirect/{token}"


def build_job_embed(job: JobRecord, codec: LinkCodec, redirect_base_url: str) -> dict[str, Any]:
    """
    Build the Discord embed payload for one job.

    The link points at the redirect service, never at job.url. If the URL
    cannot be encoded the embed is sent without a link.

    Args:
        job: Job to render
        codec: Codec holding the redirect key material
        redirect_base_url: Public base URL of the redirect service

    Returns:
        Embed dict in Discord API shape
    """
    embed: dict[str, Any] = {
        "title": truncate(job.job_title, TITLE_LIMIT),
        "color": EMBED_COLOR,
        "author": {"name": truncate(job.job_company, TITLE_LIMIT)},
        "fields": [
            {"name": "Location", "value": format_location(job.job_location), "inline": True},
            {
                "name": "Remote",
                "value": truncate(format_remote_status(job.remote_status), FIELD_VALUE_LIMIT),
                "inline": True,
            },
            {
                "name": "Salary",
                "value": format_salary(job.salary_range_min, job.salary_range_max),
                "inline": False,
            },
        ],
        "footer": {"text": FOOTER_TEXT},
        "timestamp": job.created_at.isoformat(),
    }

    token = codec.encode(job.url)
    if token:
        embed["url"] = build_redirect_url(redirect_base_url, token)
    else:
        print(f"  ⚠ Sending job {job.id} without a link")

    return embed
