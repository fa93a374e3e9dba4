"""Unit test fixtures (fakes and stubs).

Provides a scripted transport and a recording sleep so the retry engine can
be exercised without network access or real delays.
"""

import pytest
from typing import Union

from how_cli.llm.base_client import BaseTransport
from how_cli.llm.exceptions import TransportConnectionError, TransportTimeoutError
from how_cli.models.llm_models import GenerateRequest, TransportResponse


Step = Union[TransportResponse, Exception]


class ScriptedTransport(BaseTransport):
    """Transport that replays a fixed list of responses/exceptions."""

    def __init__(self, script: list[Step]):
        super().__init__(grace=5.0)
        self.script = list(script)
        self.calls: list[tuple[str, str, GenerateRequest, float]] = []
        self.closed = False

    def send(self, endpoint, credential, request, timeout):
        self.calls.append((endpoint, credential, request, timeout))
        if not self.script:
            raise AssertionError("ScriptedTransport ran out of scripted steps")
        step = self.script.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    def close(self):
        self.closed = True


class RecordingSleep:
    """Callable that records requested delays instead of sleeping."""

    def __init__(self):
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def scripted_transport():
    """Factory fixture: scripted_transport([step, step, ...])."""
    def _create(script: list[Step]) -> ScriptedTransport:
        return ScriptedTransport(script)

    return _create


@pytest.fixture
def timeout_error() -> TransportTimeoutError:
    return TransportTimeoutError("Request timeout after 30.0s", details={"timeout": 30.0})


@pytest.fixture
def connection_error() -> TransportConnectionError:
    return TransportConnectionError(
        "Request failed: [Errno 111] Connection refused",
        details={"error_type": "ConnectError"},
    )


@pytest.fixture
def ok(make_body):
    """Factory fixture: ok("text") -> 200 TransportResponse."""
    def _ok(*texts: str) -> TransportResponse:
        return TransportResponse(status_code=200, body=make_body(*texts))

    return _ok


@pytest.fixture
def status():
    """Factory fixture: status(429) / status(500, b"boom") -> TransportResponse."""
    def _status(code: int, body: bytes = b"") -> TransportResponse:
        return TransportResponse(status_code=code, body=body)

    return _status
