"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
import pytest
from pathlib import Path
from typing import Dict, Any

from how_cli.config import Settings


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Test settings with safe defaults for local testing.

    Never reads .env, never touches the real ~/.how-cli, and never sleeps
    for real between retries.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            settings = test_settings.model_copy(update={"MAX_ATTEMPTS": 5})
    """
    return Settings(
        _env_file=None,
        # === Application ===
        APP_NAME="how (test)",
        DEBUG=False,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Gemini API ===
        MODEL="gemini-2.5-flash",
        BASE_URL="https://gemini.test/v1beta",
        REQUEST_TIMEOUT=30.0,
        TIMEOUT_GRACE=5.0,
        GOOGLE_API_KEY=None,

        # === Retry ===
        MAX_ATTEMPTS=3,
        BACKOFF_UNIT_SECONDS=1.0,
        RETRY_BACKOFF_BASE=2.0,
        RATE_LIMIT_BACKOFF_OFFSET=1.0,

        # === Local State ===
        CONFIG_DIR=tmp_path / ".how-cli",

        # === Terminal ===
        TYPEWRITER_DELAY=0.0,
        SPINNER_INTERVAL=0.01,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def success_body(fixtures_dir: Path) -> bytes:
    """Raw 200 body whose first part is '  ls -la  \\n'."""
    return (fixtures_dir / "gemini_success.json").read_bytes()


@pytest.fixture
def blocked_body(fixtures_dir: Path) -> bytes:
    """Raw 200 body blocked with promptFeedback.blockReason = SAFETY."""
    return (fixtures_dir / "gemini_blocked.json").read_bytes()


@pytest.fixture
def fenced_body(fixtures_dir: Path) -> bytes:
    """Raw 200 body whose answer is wrapped in a ```bash fence."""
    return (fixtures_dir / "gemini_fenced.json").read_bytes()


@pytest.fixture
def make_body():
    """Factory fixture to build a generateContent body from answer texts.

    Usage:
        def test_something(make_body):
            body = make_body("pwd")
    """
    def _make(*texts: str) -> bytes:
        data: Dict[str, Any] = {
            "candidates": [
                {"content": {"parts": [{"text": t} for t in texts]}, "finishReason": "STOP"}
            ]
        }
        return json.dumps(data).encode("utf-8")

    return _make
