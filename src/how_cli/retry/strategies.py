"""
Backoff strategies for the retry engine.

A strategy sizes the delay between a failed retryable attempt and the next
one. Delays grow exponentially in the 0-indexed attempt number. Rate-limit
delays are offset by one unit beyond the timeout delay for the same attempt,
so a throttling endpoint is never hit sooner than a slow one.

    attempt   timeout   rate limit    (unit=1s, base=2, offset=1)
    0         1s        2s
    1         2s        3s
    2         4s        5s
"""

from typing import Protocol

from how_cli.config import Settings


class BackoffPolicy(Protocol):
    """Protocol for backoff strategies."""

    def timeout_delay(self, attempt: int) -> float:
        """Seconds to wait after attempt ``attempt`` timed out."""
        ...

    def rate_limit_delay(self, attempt: int) -> float:
        """Seconds to wait after attempt ``attempt`` was rate limited."""
        ...


class ExponentialBackoff:
    """
    Exponential backoff: ``unit * base**n`` for timeouts and
    ``unit * (base**n + offset)`` for rate limits.
    """

    def __init__(
        self,
        unit_seconds: float = 1.0,
        base: float = 2.0,
        rate_limit_offset: float = 1.0,
    ):
        """
        Initialize exponential backoff.

        Args:
            unit_seconds: Length of one backoff unit in seconds
            base: Growth factor per attempt
            rate_limit_offset: Extra units added to rate-limit delays
        """
        if unit_seconds < 0:
            raise ValueError("unit_seconds must be >= 0")
        if base < 1:
            raise ValueError("base must be >= 1")
        if rate_limit_offset < 0:
            raise ValueError("rate_limit_offset must be >= 0")
        self.unit_seconds = unit_seconds
        self.base = base
        self.rate_limit_offset = rate_limit_offset

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExponentialBackoff":
        return cls(
            unit_seconds=settings.BACKOFF_UNIT_SECONDS,
            base=settings.RETRY_BACKOFF_BASE,
            rate_limit_offset=settings.RATE_LIMIT_BACKOFF_OFFSET,
        )

    def timeout_delay(self, attempt: int) -> float:
        return self.unit_seconds * self.base ** attempt

    def rate_limit_delay(self, attempt: int) -> float:
        return self.unit_seconds * (self.base ** attempt + self.rate_limit_offset)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(unit_seconds={self.unit_seconds}, "
            f"base={self.base}, rate_limit_offset={self.rate_limit_offset})"
        )
