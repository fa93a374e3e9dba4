"""
Retry engine for Gemini requests.

This module implements the RetryEngine that owns the call contract: one
prompt in, exactly one Outcome out. It drives an explicit state machine
(see ``how_cli.retry.states``) over a pluggable transport.

Retry Policy:
    - Timeout: retried with ``2^n`` units of backoff
    - HTTP 429: retried with ``2^n + 1`` units of backoff
    - Anything else (answer, content block, bad status, connection error):
      terminal on the spot

Usage:
    engine = RetryEngine.from_settings(settings, transport)
    outcome = engine.execute_with_retry(api_key, prompt, max_attempts=3)
"""

import time
from typing import Callable, Optional

import structlog

from how_cli.config import DEFAULT_BASE_URL, DEFAULT_MODEL, Settings
from how_cli.llm.base_client import BaseTransport
from how_cli.llm.exceptions import TransportConnectionError, TransportTimeoutError
from how_cli.llm.request_encoder import build_endpoint, encode_request
from how_cli.llm.response_decoder import decode_response
from how_cli.models.enums import ErrorKind
from how_cli.models.outcome import Failure, Outcome, RetryableSignal
from how_cli.retry.states import Attempting, Backoff, CallContext, Done, RetryState
from how_cli.retry.strategies import BackoffPolicy, ExponentialBackoff


logger = structlog.get_logger(__name__)

TIMEOUT_MESSAGE = "API request timed out"
RATE_LIMIT_MESSAGE = "Rate limit exceeded"
MAX_RETRIES_MESSAGE = "Max retries exceeded"


class RetryEngine:
    """
    Retry executor for generateContent calls.

    Encodes the request once, then alternates Attempting and Backoff states
    until it reaches Done. Runs synchronously: one attempt in flight, and the
    calling thread blocks on both the exchange and the backoff sleep.

    The engine never raises for runtime failures and never writes to the
    terminal; every failure comes back as a classified Failure.

    Attributes:
        transport: Transport used for each attempt
        model: Model identifier (``models/`` prefix tolerated)
        base_url: API base URL
        timeout: Logical per-attempt deadline in seconds
        backoff: Backoff policy
    """

    def __init__(
        self,
        transport: BaseTransport,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        backoff: Optional[BackoffPolicy] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize retry engine.

        Args:
            transport: Transport for the network exchange
            model: Target model identifier
            base_url: API base URL
            timeout: Per-attempt deadline in seconds
            backoff: Backoff policy (default: ExponentialBackoff())
            sleep: Blocking sleep function, injectable for tests
        """
        if timeout <= 0:
            raise ValueError("timeout must be > 0")
        self.transport = transport
        self.model = model or DEFAULT_MODEL
        self.base_url = base_url
        self.timeout = timeout
        self.backoff: BackoffPolicy = backoff or ExponentialBackoff()
        self._sleep = sleep

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: BaseTransport,
        sleep: Callable[[float], None] = time.sleep,
    ) -> "RetryEngine":
        """Build an engine from explicit settings rather than ambient state."""
        return cls(
            transport=transport,
            model=settings.MODEL,
            base_url=settings.BASE_URL,
            timeout=settings.REQUEST_TIMEOUT,
            backoff=ExponentialBackoff.from_settings(settings),
            sleep=sleep,
        )

    def execute_with_retry(
        self, credential: str, prompt: str, max_attempts: int = 3
    ) -> Outcome:
        """
        Run one call to completion.

        Args:
            credential: API key (not validated here)
            prompt: Fully formed prompt text
            max_attempts: Retry budget, at least 1

        Returns:
            Answer with trimmed text, or a classified Failure

        Raises:
            ValueError: max_attempts < 1
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

        request = encode_request(self.model, prompt)
        context = CallContext(
            credential=credential,
            request=request,
            endpoint=build_endpoint(self.base_url, request.model),
            max_attempts=max_attempts,
        )

        logger.debug(
            "Starting generation call",
            model=request.model,
            prompt_length=len(prompt),
            max_attempts=max_attempts,
        )

        state: RetryState = Attempting(0)
        while not isinstance(state, Done):
            state = self.transition(state, context)

        logger.debug(
            "Generation call finished",
            model=request.model,
            ok=state.outcome.ok,
            error_kind=getattr(state.outcome, "kind", None),
        )
        return state.outcome

    def transition(self, state: RetryState, context: CallContext) -> RetryState:
        """
        Advance the state machine by one step.

        Attempting performs one exchange; Backoff performs one sleep; Done
        is returned unchanged.
        """
        if isinstance(state, Attempting):
            return self._attempt(state.attempt, context)
        if isinstance(state, Backoff):
            logger.debug("Backing off", next_attempt=state.attempt, delay=state.delay)
            self._sleep(state.delay)
            return Attempting(state.attempt)
        return state

    def _attempt(self, attempt: int, context: CallContext) -> RetryState:
        if attempt >= context.max_attempts:
            return Done(Failure(ErrorKind.API, MAX_RETRIES_MESSAGE))

        logger.debug("Sending attempt", attempt=attempt + 1, max_attempts=context.max_attempts)

        try:
            response = self.transport.send(
                context.endpoint, context.credential, context.request, self.timeout
            )
        except TransportTimeoutError as e:
            if context.is_last_attempt(attempt):
                return Done(Failure(e.kind, TIMEOUT_MESSAGE))
            return Backoff(attempt + 1, self.backoff.timeout_delay(attempt))
        except TransportConnectionError as e:
            return Done(Failure(e.kind, e.message))

        result = decode_response(response.body, response.status_code)

        if isinstance(result, RetryableSignal):
            logger.debug("Rate limited", attempt=attempt + 1)
            if context.is_last_attempt(attempt):
                return Done(Failure(ErrorKind.API, RATE_LIMIT_MESSAGE))
            return Backoff(attempt + 1, self.backoff.rate_limit_delay(attempt))

        return Done(result)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(model={self.model}, "
            f"timeout={self.timeout}s, transport={self.transport!r})"
        )
