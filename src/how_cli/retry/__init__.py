"""
Retry engine for generateContent calls.

Retries only the two transient conditions - per-attempt timeouts and HTTP
429 rate limiting - with exponential backoff, and returns every other
condition immediately as a classified Failure.

Main Components:
    - RetryEngine: Owns the call contract and drives the state machine
    - Attempting / Backoff / Done: Explicit states of one call
    - BackoffPolicy / ExponentialBackoff: Delay sizing

Usage:
    >>> from how_cli.retry import RetryEngine
    >>> engine = RetryEngine.from_settings(settings, transport)
    >>> outcome = engine.execute_with_retry(api_key, prompt, max_attempts=3)
"""

from how_cli.retry.engine import RetryEngine
from how_cli.retry.states import Attempting, Backoff, CallContext, Done, RetryState
from how_cli.retry.strategies import BackoffPolicy, ExponentialBackoff

__all__ = [
    "RetryEngine",
    "Attempting",
    "Backoff",
    "CallContext",
    "Done",
    "RetryState",
    "BackoffPolicy",
    "ExponentialBackoff",
]
