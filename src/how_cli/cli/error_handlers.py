"""
Failure handlers for terminal output.

Maps each ErrorKind to a handler that prints the failure and returns the
process exit code. Dispatch is by kind, never by message text or
exception type.
"""

import sys
from typing import Callable, Optional, TextIO

import structlog

from how_cli.models.enums import ErrorKind
from how_cli.models.outcome import Failure

logger = structlog.get_logger(__name__)

EXIT_FAILURE = 1
ERROR_GLYPH = "❌"

FailureHandler = Callable[[Failure, TextIO], int]


def _print_failure(label: str, failure: Failure, stream: TextIO, leading_newline: bool = True) -> None:
    prefix = "\n" if leading_newline else ""
    print(f"{prefix}{ERROR_GLYPH} {label}: {failure.message}", file=stream)


def auth_failure_handler(failure: Failure, stream: TextIO) -> int:
    """
    Handle missing or rejected credentials.

    Raised before any request is sent, so there is no spinner line to
    clear and no leading newline.
    """
    logger.warning("Authentication failure", message=failure.message)
    _print_failure("Authentication Error", failure, stream, leading_newline=False)
    return EXIT_FAILURE


def api_failure_handler(failure: Failure, stream: TextIO) -> int:
    """Handle transport errors, bad statuses, malformed bodies, exhausted retries."""
    logger.warning("API failure", message=failure.message)
    _print_failure("Error", failure, stream)
    return EXIT_FAILURE


def content_failure_handler(failure: Failure, stream: TextIO) -> int:
    """Handle empty, partless or safety-blocked answers."""
    logger.warning("Content failure", message=failure.message)
    _print_failure("Error", failure, stream)
    return EXIT_FAILURE


def timeout_failure_handler(failure: Failure, stream: TextIO) -> int:
    """Handle every attempt exceeding its deadline."""
    logger.warning("Timeout failure", message=failure.message)
    _print_failure("Error", failure, stream)
    return EXIT_FAILURE


# Registry of failure handlers (one per ErrorKind)
FAILURE_HANDLERS: dict[ErrorKind, FailureHandler] = {
    ErrorKind.AUTH: auth_failure_handler,
    ErrorKind.API: api_failure_handler,
    ErrorKind.CONTENT: content_failure_handler,
    ErrorKind.TIMEOUT: timeout_failure_handler,
}


def handle_failure(failure: Failure, stream: Optional[TextIO] = None) -> int:
    """Print ``failure`` with the handler registered for its kind."""
    return FAILURE_HANDLERS[failure.kind](failure, stream or sys.stderr)
