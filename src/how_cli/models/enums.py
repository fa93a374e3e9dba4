"""
Enumerations for the request engine.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """
    Classification of every failed call.

    Exactly one kind tags each Failure, so callers can branch on the kind
    without inspecting message text.
    """

    API = "api"  # transport failure, bad status, malformed body, retries exhausted
    AUTH = "auth"  # credential missing or rejected (raised by the credential store)
    CONTENT = "content"  # empty, partless, or safety-blocked response
    TIMEOUT = "timeout"  # every attempt exceeded the per-attempt deadline


class RetryReason(str, Enum):
    """Why the decoder asked for another attempt."""

    RATE_LIMITED = "rate_limited"
