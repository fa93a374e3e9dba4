"""
Abstract transport for the request engine.

Defines the interface every transport implementation must adhere to. The
retry engine depends only on this abstraction, which lets tests script a
sequence of outcomes without touching the network.
"""

from abc import ABC, abstractmethod

import structlog

from how_cli.models.llm_models import GenerateRequest, TransportResponse


logger = structlog.get_logger(__name__)


class BaseTransport(ABC):
    """
    Abstract base class for a single-exchange HTTP transport.

    Responsibilities:
    - Send exactly one request per ``send`` call
    - Apply the per-attempt deadline plus a grace margin
    - Report deadline overruns and other connection failures as distinct
      exceptions

    Does NOT handle:
    - Retries or backoff (that's RetryEngine's job)
    - Interpreting status codes or bodies (that's the response decoder's job)
    """

    def __init__(self, grace: float = 5.0, **kwargs):
        """
        Initialize base transport.

        Args:
            grace: Seconds added to each logical deadline for the transport's
                own connection handling, so a logical timeout is reported as
                a timeout rather than a hard abort
            **kwargs: Additional implementation-specific config
        """
        self.grace = grace
        self.extra_config = kwargs

    @abstractmethod
    def send(
        self,
        endpoint: str,
        credential: str,
        request: GenerateRequest,
        timeout: float,
    ) -> TransportResponse:
        """
        Perform one HTTP exchange.

        Args:
            endpoint: Full generateContent URL (without the key)
            credential: API key, sent as the ``key`` query parameter
            request: Attempt-invariant request to serialize
            timeout: Logical per-attempt deadline in seconds

        Returns:
            TransportResponse with the delivered status code and body,
            whatever the status

        Raises:
            TransportTimeoutError: The deadline was exceeded
            TransportConnectionError: Any other failure to complete the exchange
        """
        pass

    def close(self) -> None:
        """
        Release connections held by the transport.

        Default implementation does nothing.
        """
        logger.debug("Closing transport", transport_class=self.__class__.__name__)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(grace={self.grace}s)"
