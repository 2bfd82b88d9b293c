"""
Send pacing for Discord channels.

A token bucket of size one: each wait() returns no sooner than ``interval``
seconds after the previous one. The delivery engine keeps one limiter per
channel, so channels with different limits only need a different interval.
"""

import time
from typing import Callable, Optional


class RateLimiter:
    """Minimum spacing between consecutive sends."""

    def __init__(
        self,
        interval: float,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        if interval < 0:
            raise ValueError("interval must be >= 0")
        self.interval = interval
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep
        self._last: float | None = None

    def wait(self) -> None:
        """Block until the next send is allowed, then claim the slot."""
        if self._last is not None:
            remaining = self.interval - (self._clock() - self._last)
            if remaining > 0:
                self._sleep(remaining)
        self._last = self._clock()
