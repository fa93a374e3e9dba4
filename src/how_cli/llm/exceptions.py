"""
Custom exceptions for the transport and credential seams.

These exceptions never escape the request engine: the retry engine turns
transport errors into classified Failure values. They exist so the engine
can tell a deadline overrun apart from any other connection problem
without inspecting message text.
"""

from how_cli.models.enums import ErrorKind


class HowClientError(Exception):
    """
    Base exception for all client-side errors.

    All how-specific exceptions inherit from this to allow catching
    any of them with a single except clause.
    """
    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(HowClientError):
    """Base for failures of a single HTTP exchange that produced no status."""
    pass


class TransportConnectionError(TransportError):
    """
    Raised when the exchange failed for a reason other than a deadline.

    DNS failures, refused connections, TLS and protocol errors. Not retried.
    """
    pass


class TransportTimeoutError(TransportConnectionError):
    """
    Raised when the exchange exceeded its deadline.

    Separate from generic connection errors because timeouts are retried
    with exponential backoff.
    """
    kind = ErrorKind.TIMEOUT


class CredentialError(HowClientError):
    """
    Raised when no usable API key can be obtained.

    Surfaces to the user as an AUTH failure.
    """
    kind = ErrorKind.AUTH
