"""
Response decoding for generateContent exchanges.

Classifies one delivered (status, body) pair into exactly one of:
- RetryableSignal: rate limited, try again after backoff
- Failure: terminal, with an ErrorKind
- Answer: trimmed text of the first candidate's first part

Checks run in a fixed order and the first match wins:

    1. 429                         -> RetryableSignal(RATE_LIMITED)
    2. non-2xx                     -> Failure(API, "status <code>: <body>")
    3. unparseable body            -> Failure(API, "Failed to parse response: ...")
    4. promptFeedback.blockReason  -> Failure(CONTENT, "Blocked: <reason>")
    5. no candidates               -> Failure(CONTENT, "Empty response from API")
    6. first candidate has no parts-> Failure(CONTENT, "No content parts in response")
    7. blank text                  -> Failure(CONTENT, "Empty response from API")
    8. otherwise                   -> Answer(text.strip())
"""

from pydantic import ValidationError

from how_cli.models.enums import ErrorKind, RetryReason
from how_cli.models.llm_models import GenerateContentResponse
from how_cli.models.outcome import Answer, DecodeResult, Failure, RetryableSignal


HTTP_TOO_MANY_REQUESTS = 429

EMPTY_RESPONSE_MESSAGE = "Empty response from API"
NO_PARTS_MESSAGE = "No content parts in response"


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def parse_response_body(body: bytes | str) -> GenerateContentResponse:
    """
    Parse a generateContent body.

    Raises:
        pydantic.ValidationError: Body is not JSON or not the expected shape
    """
    return GenerateContentResponse.model_validate_json(body)


def decode_response(body: bytes | str, status_code: int) -> DecodeResult:
    """
    Classify one delivered exchange.

    Args:
        body: Raw response body
        status_code: HTTP status code

    Returns:
        Answer, Failure or RetryableSignal (never raises)
    """
    if status_code == HTTP_TOO_MANY_REQUESTS:
        return RetryableSignal(RetryReason.RATE_LIMITED)

    if isinstance(body, bytes):
        body_text = body.decode("utf-8", errors="replace")
    else:
        body_text = body

    if not is_success_status(status_code):
        return Failure(ErrorKind.API, f"status {status_code}: {body_text}")

    try:
        response = parse_response_body(body)
    except ValidationError as e:
        detail = e.errors()[0]["msg"] if e.errors() else str(e)
        return Failure(ErrorKind.API, f"Failed to parse response: {detail}")

    if response.block_reason:
        return Failure(ErrorKind.CONTENT, f"Blocked: {response.block_reason}")

    if not response.candidates:
        return Failure(ErrorKind.CONTENT, EMPTY_RESPONSE_MESSAGE)

    parts = response.candidates[0].parts
    if not parts:
        return Failure(ErrorKind.CONTENT, NO_PARTS_MESSAGE)

    text = (parts[0].text or "").strip()
    if not text:
        return Failure(ErrorKind.CONTENT, EMPTY_RESPONSE_MESSAGE)

    return Answer(text)
