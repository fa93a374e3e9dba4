"""
Data models for the request engine.

Includes:
- Enums (ErrorKind, RetryReason)
- Wire models (GenerateRequest, GenerateContentResponse, TransportResponse, ...)
- Outcomes (Answer, Failure, RetryableSignal)
"""

from how_cli.models.enums import ErrorKind, RetryReason
from how_cli.models.llm_models import (
    Candidate,
    Content,
    GenerateContentResponse,
    GenerateRequest,
    Part,
    PromptFeedback,
    SafetyRating,
    TransportResponse,
)
from how_cli.models.outcome import (
    Answer,
    DecodeResult,
    Failure,
    Outcome,
    RetryableSignal,
)

__all__ = [
    "ErrorKind",
    "RetryReason",
    "Candidate",
    "Content",
    "GenerateContentResponse",
    "GenerateRequest",
    "Part",
    "PromptFeedback",
    "SafetyRating",
    "TransportResponse",
    "Answer",
    "DecodeResult",
    "Failure",
    "Outcome",
    "RetryableSignal",
]
