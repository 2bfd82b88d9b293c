"""
Minimal Discord REST client for posting job embeds.

Only the three calls the bot needs: who am I, resolve a channel, post a
message. Every request is bounded by ``timeout`` so a hung send fails instead
of stalling the cycle.
"""

import time
from typing import Any, Callable, Optional

import requests

from models.types import ChannelID

DISCORD_API_BASE = "https://discord.com/api/v10"
USER_AGENT = "DiscordBot (https://jobradar.live, 1.0)"

# Guild text and announcement channels
SENDABLE_CHANNEL_TYPES = {0, 5}

# Used when a 429 carries no delay
DEFAULT_RETRY_AFTER = 1.0


class DiscordError(Exception):
    """Raised when a Discord API call fails."""


class DiscordChannel:
    """A resolved channel that messages can be sent to."""

    def __init__(self, client: "DiscordClient", channel_id: ChannelID, name: str | None = None):
        self.client = client
        self.id = channel_id
        self.name = name

    def send(self, embed: dict[str, Any]) -> dict[str, Any]:
        """Post a message with a single embed."""
        return self.client.request(
            "POST", f"/channels/{self.id}/messages", json={"embeds": [embed]}
        )

    def __repr__(self) -> str:
        return f"DiscordChannel(id={self.id!r}, name={self.name!r})"


def retry_after(response: requests.Response) -> float | None:
    """Seconds to wait before retrying a 429, from the body or Retry-After header."""
    try:
        body = response.json()
    except ValueError:
        body = None
    value = body.get("retry_after") if isinstance(body, dict) else None
    if value is None:
        value = response.headers.get("Retry-After")
    if value is None:
        return DEFAULT_RETRY_AFTER
    try:
        return max(float(value), 0.0)
    except (TypeError, ValueError):
        return None


class DiscordClient:
    """Bot-token authenticated Discord API client."""

    def __init__(
        self,
        token: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
        api_base: str = DISCORD_API_BASE,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        if not token:
            raise ValueError("DISCORD_BOT_TOKEN must be set")
        self.timeout = timeout
        self.api_base = api_base.rstrip("/")
        self.session = session or requests.Session()
        self._sleep = sleep or time.sleep
        self.session.headers.update(
            {
                "Authorization": f"Bot {token}",
                "User-Agent": USER_AGENT,
            }
        )

    def request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """
        Perform an API call and return the decoded JSON body.

        A 429 is retried once after the advertised delay, provided the delay
        fits within ``timeout``.

        Raises:
            DiscordError: On transport errors, timeouts and non-2xx responses
        """
        url = f"{self.api_base}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            if response.status_code == 429:
                delay = retry_after(response)
                if delay is not None and delay <= self.timeout:
                    print(f"  ⚠ Rate limited on {method} {path}, retrying in {delay:.2f}s")
                    self._sleep(delay)
                    response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise DiscordError(f"{method} {path} failed with HTTP {status}") from e
        except requests.RequestException as e:
            raise DiscordError(f"{method} {path} failed: {e}") from e

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise DiscordError(f"{method} {path} returned invalid JSON") from e

    def fetch_current_user(self) -> dict[str, Any]:
        return self.request("GET", "/users/@me")

    def fetch_channel(self, channel_id: ChannelID) -> DiscordChannel:
        """
        Resolve a channel id to a sendable channel.

        Raises:
            DiscordError: If the channel is unknown, unreachable or not a text channel
        """
        data = self.request("GET", f"/channels/{channel_id}")
        if data.get("type") not in SENDABLE_CHANNEL_TYPES:
            raise DiscordError(f"Channel {channel_id} is not a text channel")
        return DiscordChannel(self, str(data.get("id", channel_id)), data.get("name"))
