"""
Gemini transport implementation.

Communicates with the Gemini REST API using a synchronous httpx Client.
Supports:
- One exchange per send() call (no internal retries)
- Connection reuse across attempts of the same call
- Structural timeout detection via httpx.TimeoutException
"""

import time
from typing import Callable, Optional

import httpx
import structlog

from how_cli.llm.base_client import BaseTransport
from how_cli.llm.exceptions import TransportConnectionError, TransportTimeoutError
from how_cli.models.llm_models import GenerateRequest, TransportResponse


logger = structlog.get_logger(__name__)


class GeminiTransport(BaseTransport):
    """
    httpx-backed transport for ``POST .../models/{model}:generateContent``.

    The key travels as the ``key`` query parameter and the body is the
    JSON payload rendered by ``GenerateRequest.to_payload()``.
    """

    def __init__(
        self,
        grace: float = 5.0,
        http_transport: Optional[httpx.BaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
        **kwargs
    ):
        """
        Initialize Gemini transport.

        Args:
            grace: Seconds added to each logical deadline
            http_transport: Optional httpx transport (e.g. httpx.MockTransport
                in tests); defaults to httpx's HTTP transport
            clock: Monotonic clock for the whole-exchange deadline
            **kwargs: Additional config
        """
        super().__init__(grace, **kwargs)
        self._client: Optional[httpx.Client] = None
        self._http_transport = http_transport
        self._clock = clock

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                transport=self._http_transport,
                follow_redirects=True,
            )
            logger.debug("Created new httpx Client")
        return self._client

    def _check_deadline(self, deadline: float, limit: float, response: httpx.Response) -> None:
        if self._clock() > deadline:
            raise httpx.ReadTimeout(f"Exchange exceeded {limit}s", request=response.request)

    def send(
        self,
        endpoint: str,
        credential: str,
        request: GenerateRequest,
        timeout: float,
    ) -> TransportResponse:
        """
        POST the request once and return whatever status comes back.

        Request:
        {"contents": [{"parts": [{"text": "<prompt>"}]}]}

        Both the httpx phase timeouts and the whole exchange are bounded by
        ``timeout + grace``. httpx only limits each connect/read/write phase,
        so the body is streamed and the overall deadline is checked per chunk.
        """
        start_time = time.time()
        limit = timeout + self.grace
        deadline = self._clock() + limit
        client = self._get_client()

        try:
            with client.stream(
                "POST",
                endpoint,
                params={"key": credential},
                json=request.to_payload(),
                timeout=httpx.Timeout(limit),
            ) as response:
                self._check_deadline(deadline, limit, response)
                chunks = []
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
                    self._check_deadline(deadline, limit, response)
                body = b"".join(chunks)
        except httpx.TimeoutException as e:
            logger.debug(
                "Gemini request timeout",
                model=request.model,
                timeout=timeout,
                error_type=type(e).__name__,
            )
            raise TransportTimeoutError(
                f"Request timeout after {timeout}s",
                details={"timeout": timeout, "error_type": type(e).__name__},
            ) from e
        except httpx.HTTPError as e:
            logger.debug(
                "Gemini network error",
                model=request.model,
                error_type=type(e).__name__,
            )
            raise TransportConnectionError(
                f"Request failed: {e}",
                details={"error_type": type(e).__name__},
            ) from e

        latency_ms = int((time.time() - start_time) * 1000)
        logger.debug(
            "Gemini exchange complete",
            model=request.model,
            status_code=response.status_code,
            latency_ms=latency_ms,
        )
        return TransportResponse(status_code=response.status_code, body=body)

    def close(self) -> None:
        """Close the HTTP client connection."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            logger.debug("Closed Gemini transport connection")
