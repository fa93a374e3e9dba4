"""
Terminal results of a call to the request engine.

An Outcome is exactly one of Answer or Failure. Both are frozen
dataclasses whose invariants are checked on construction, so an Answer
with blank text cannot exist.
"""

from dataclasses import dataclass
from typing import Union

from how_cli.models.enums import ErrorKind, RetryReason


@dataclass(frozen=True)
class Answer:
    """
    A successful, non-empty answer.

    Attributes:
        text: Answer text with surrounding whitespace removed
    """

    text: str

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise ValueError("Answer text must not be empty or whitespace-only")
        if self.text != self.text.strip():
            raise ValueError("Answer text must be trimmed")

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """
    A classified failure.

    Attributes:
        kind: Error classification (callers branch on this)
        message: Human-readable detail, for display only
    """

    kind: ErrorKind
    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ErrorKind):
            raise ValueError(f"Unknown error kind: {self.kind!r}")

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class RetryableSignal:
    """Decoder verdict asking the retry engine for another attempt."""

    reason: RetryReason


Outcome = Union[Answer, Failure]
DecodeResult = Union[Answer, Failure, RetryableSignal]
