"""Shared type definitions for type checking.

Uses TypeAlias for identifiers and labels - the job_analysis table hands back
integer ids today, but ingestion has used UUID strings before, so both are
accepted.
"""

from typing import TypeAlias

JobID: TypeAlias = int | str

# One of the audience labels in notifications.category_router.AUDIENCE_LABELS
AudienceLabel: TypeAlias = str

# Discord snowflake, kept as a string (too large for JS-style clients)
ChannelID: TypeAlias = str

# Audience label -> destination channel (None when not configured)
ChannelBindings: TypeAlias = dict[AudienceLabel, ChannelID | None]
