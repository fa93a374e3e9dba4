"""
Wire-level data models for the Gemini generateContent API.

These models are internal to the request engine. The request side is frozen
so a single instance can be replayed across retry attempts unchanged. The
response side is lenient: every field is optional, unknown fields are
ignored, and only the shape the decoder relies on is declared.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    """
    A single generateContent request.

    Built once per call by the request encoder and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True)

    model: str = Field(..., description="Model identifier without the 'models/' prefix")
    prompt: str = Field(..., description="Fully formed prompt text")

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body: {"contents": [{"parts": [{"text": prompt}]}]}."""
        return {"contents": [{"parts": [{"text": self.prompt}]}]}


class TransportResponse(BaseModel):
    """Status code and raw body of one delivered HTTP exchange."""
    model_config = ConfigDict(frozen=True)

    status_code: int
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parts: Optional[List[Part]] = None


class SafetyRating(BaseModel):
    model_config = ConfigDict(extra="ignore")

    category: Optional[str] = None
    probability: Optional[str] = None


class Candidate(BaseModel):
    """One proposed answer. Only the first candidate is ever consulted."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    content: Optional[Content] = None
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")
    safety_ratings: Optional[List[SafetyRating]] = Field(default=None, alias="safetyRatings")

    @property
    def parts(self) -> List[Part]:
        if self.content is None or not self.content.parts:
            return []
        return self.content.parts


class PromptFeedback(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    block_reason: Optional[str] = Field(default=None, alias="blockReason")


class GenerateContentResponse(BaseModel):
    """
    Decoded generateContent response body.

    Both top-level fields are optional-presence on the wire.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    candidates: Optional[List[Candidate]] = None
    prompt_feedback: Optional[PromptFeedback] = Field(default=None, alias="promptFeedback")

    @property
    def block_reason(self) -> Optional[str]:
        if self.prompt_feedback is None:
            return None
        return self.prompt_feedback.block_reason or None
