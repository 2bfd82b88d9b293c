"""
Process configuration for the Discord job dispatcher.

Settings come from the environment (optionally a .env file) and are validated
once at startup, so a bad key or a missing credential stops the process before
the scheduler starts.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from models.types import ChannelBindings

load_dotenv()

# Environment variable per audience label
CHANNEL_ENV_VARS = {
    "senior": "DISCORD_CHANNEL_SENIOR",
    "early career": "DISCORD_CHANNEL_EARLY_CAREER",
    "new grad": "DISCORD_CHANNEL_NEW_GRAD",
    "internship": "DISCORD_CHANNEL_INTERNSHIPS",
}


class DispatchSettings(BaseModel):
    """Validated process configuration."""

    supabase_url: str = Field(..., min_length=1)
    supabase_service_key: str = Field(..., min_length=1)
    database_timeout_seconds: float = Field(5.0, gt=0)

    discord_bot_token: str | None = None
    channel_bindings: ChannelBindings = Field(default_factory=dict)

    url_encryption_key: str
    url_encryption_iv: str
    redirect_base_url: str = "https://jobradar.live"

    send_interval_seconds: float = Field(1.0, ge=0)
    send_timeout_seconds: float = Field(10.0, gt=0)

    cron_minute: int = Field(1, ge=0, le=59)
    timezone: str = "UTC"

    @field_validator("url_encryption_key")
    @classmethod
    def _check_key_length(cls, value: str) -> str:
        if len(value.encode("utf-8")) != 32:
            raise ValueError("URL_ENCRYPTION_KEY must be exactly 32 bytes")
        return value

    @field_validator("url_encryption_iv")
    @classmethod
    def _check_iv_length(cls, value: str) -> str:
        if len(value.encode("utf-8")) != 16:
            raise ValueError("URL_ENCRYPTION_IV must be exactly 16 bytes")
        return value

    @field_validator("redirect_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("channel_bindings")
    @classmethod
    def _drop_blank_channels(cls, value: ChannelBindings) -> ChannelBindings:
        return {label: (channel or None) for label, channel in value.items()}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_settings() -> DispatchSettings:
    """
    Build DispatchSettings from environment variables.

    Returns:
        Validated DispatchSettings

    Raises:
        ValueError: If a required variable is missing or a value is invalid
            (pydantic's ValidationError is a ValueError)
    """
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_SERVICE_KEY")
    if not url or not key:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set")

    encryption_key = os.getenv("URL_ENCRYPTION_KEY")
    encryption_iv = os.getenv("URL_ENCRYPTION_IV")
    if not encryption_key or not encryption_iv:
        raise ValueError("URL_ENCRYPTION_KEY and URL_ENCRYPTION_IV must be set")

    return DispatchSettings(
        supabase_url=url,
        supabase_service_key=key,
        database_timeout_seconds=_env_float("DATABASE_TIMEOUT_SECONDS", 5.0),
        discord_bot_token=os.getenv("DISCORD_BOT_TOKEN"),
        channel_bindings={
            label: os.getenv(env_var) for label, env_var in CHANNEL_ENV_VARS.items()
        },
        url_encryption_key=encryption_key,
        url_encryption_iv=encryption_iv,
        redirect_base_url=os.getenv("REDIRECT_BASE_URL", "https://jobradar.live"),
        send_interval_seconds=_env_float("DISCORD_SEND_INTERVAL_SECONDS", 1.0),
        send_timeout_seconds=_env_float("DISCORD_SEND_TIMEOUT_SECONDS", 10.0),
        cron_minute=int(os.getenv("DISPATCH_CRON_MINUTE", "1")),
        timezone=os.getenv("DISPATCH_TIMEZONE", "UTC"),
    )
