"""
Retry state machine states.

The retry engine is a finite-state machine over three frozen states:

    Attempting(n) --timeout/429, n < last--> Backoff(n + 1, delay) --> Attempting(n + 1)
    Attempting(n) --anything else---------> Done(outcome)

Done is the only terminal state.
"""

from dataclasses import dataclass
from typing import Union

from how_cli.models.llm_models import GenerateRequest
from how_cli.models.outcome import Outcome


@dataclass(frozen=True)
class Attempting:
    """About to send attempt ``attempt`` (0-indexed)."""

    attempt: int

    def __post_init__(self) -> None:
        if self.attempt < 0:
            raise ValueError("attempt must be >= 0")


@dataclass(frozen=True)
class Backoff:
    """Waiting ``delay`` seconds before sending attempt ``attempt``."""

    attempt: int
    delay: float

    def __post_init__(self) -> None:
        if self.attempt < 1:
            raise ValueError("backoff always precedes a retry, attempt must be >= 1")
        if self.delay < 0:
            raise ValueError("delay must be >= 0")


@dataclass(frozen=True)
class Done:
    """Terminal state carrying the call's single Outcome."""

    outcome: Outcome


RetryState = Union[Attempting, Backoff, Done]


@dataclass(frozen=True)
class CallContext:
    """
    Everything that stays fixed for the duration of one call.

    Attributes:
        credential: API key
        request: Attempt-invariant request
        endpoint: generateContent URL for ``request.model``
        max_attempts: Retry budget (>= 1)
    """

    credential: str
    request: GenerateRequest
    endpoint: str
    max_attempts: int

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

    def is_last_attempt(self, attempt: int) -> bool:
        return attempt >= self.max_attempts - 1
