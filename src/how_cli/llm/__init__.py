"""
Gemini request/response layer.

Components:
- request_encoder: Builds the attempt-invariant GenerateRequest and endpoint
- BaseTransport: Abstract single-exchange transport
- GeminiTransport: httpx implementation for the Gemini REST API
- response_decoder: Classifies (status, body) into Answer/Failure/RetryableSignal
- PromptBuilder: Renders the shell-assistant prompt (caller side)
- text_utils: Answer clean-up (code fences, line splitting)
- exceptions: Transport and credential exceptions
"""

from how_cli.llm.base_client import BaseTransport
from how_cli.llm.gemini_client import GeminiTransport
from how_cli.llm.prompt_builder import PromptBuilder
from how_cli.llm.request_encoder import build_endpoint, encode_request, normalize_model_name
from how_cli.llm.response_decoder import decode_response
from how_cli.llm.exceptions import (
    HowClientError,
    TransportError,
    TransportConnectionError,
    TransportTimeoutError,
    CredentialError,
)

__all__ = [
    "BaseTransport",
    "GeminiTransport",
    "PromptBuilder",
    "build_endpoint",
    "encode_request",
    "normalize_model_name",
    "decode_response",
    "HowClientError",
    "TransportError",
    "TransportConnectionError",
    "TransportTimeoutError",
    "CredentialError",
]
