"""Client-side request throttling.

A throttle spaces outbound calls at a fixed interval derived from a
calls-per-minute budget. It is not a token bucket: apart from the very first
call, which is released immediately, no bursts are allowed. Spacing is
measured between successive releases, not between call arrivals.

Example:
    >>> throttle = configure_throttle(20)  # one call every 3 seconds
    >>> await throttle.wait()  # returns immediately
    >>> await throttle.wait()  # returns ~3 seconds after the previous release
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)

NANOSECONDS_PER_MINUTE = 60_000_000_000


class Throttle(ABC):
    """Gate awaited before every outbound call."""

    @abstractmethod
    async def wait(self) -> None:
        """Suspend the caller until the next call may be issued."""


class NoopThrottle(Throttle):
    """Throttle used when rate limiting is disabled."""

    async def wait(self) -> None:
        return None


class IntervalThrottle(Throttle):
    """Fixed-spacing throttle with a free first release.

    The check-and-update of the release timestamp runs under an asyncio lock,
    so concurrent callers sharing one throttle are released at most once per
    interval and only one of them can take the free first pass. The lock
    belongs to the event loop that uses it; a new loop gets a new lock while
    the release timestamp carries over.
    """

    def __init__(self, interval_ns: int):
        if interval_ns <= 0:
            raise ValueError(f"interval_ns must be positive, got {interval_ns}")
        self.interval_ns = interval_ns
        self._last_release_ns: Optional[int] = None
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def has_fired(self) -> bool:
        """Whether the free first release has been used."""
        return self._last_release_ns is not None

    def _get_lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def wait(self) -> None:
        async with self._get_lock():
            if self._last_release_ns is not None:
                # Re-check after sleeping: the event loop may wake us a clock
                # tick early.
                deadline_ns = self._last_release_ns + self.interval_ns
                remaining_ns = deadline_ns - time.monotonic_ns()
                while remaining_ns > 0:
                    logger.debug(f"Throttling request for {remaining_ns / 1e9:.3f}s")
                    await asyncio.sleep(remaining_ns / 1e9)
                    remaining_ns = deadline_ns - time.monotonic_ns()
            self._last_release_ns = time.monotonic_ns()


def configure_throttle(calls_per_minute: float) -> Throttle:
    """Create the throttle for a calls-per-minute budget.

    Args:
        calls_per_minute: Allowed calls per minute; 0 disables throttling

    Returns:
        NoopThrottle for a zero budget, IntervalThrottle otherwise

    Raises:
        ValueError: If calls_per_minute is negative
    """
    if calls_per_minute < 0:
        raise ValueError(
            f"calls_per_minute must be non-negative, got {calls_per_minute}"
        )
    if calls_per_minute == 0:
        return NoopThrottle()
    return IntervalThrottle(int(NANOSECONDS_PER_MINUTE / calls_per_minute))
