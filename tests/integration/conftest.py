"""Integration test fixtures (credentials and prerequisites).

Live Gemini tests are opt-in: they run only when HOW_INTEGRATION=1 and a
GOOGLE_API_KEY is present, and are skipped otherwise.
"""

import os

import pytest

from how_cli.config import Settings
from how_cli.llm.gemini_client import GeminiTransport


@pytest.fixture(scope="session")
def gemini_api_key() -> str:
    """Return the live API key, or skip the test."""
    if os.environ.get("HOW_INTEGRATION") != "1":
        pytest.skip("Live Gemini tests disabled (set HOW_INTEGRATION=1)")
    api_key = os.environ.get("GOOGLE_API_KEY", "").strip()
    if not api_key:
        pytest.skip("GOOGLE_API_KEY not set")
    return api_key


@pytest.fixture
def live_settings(tmp_path) -> Settings:
    """Settings pointing at the real API with a throwaway config dir."""
    return Settings(_env_file=None, CONFIG_DIR=tmp_path / ".how-cli", BACKOFF_UNIT_SECONDS=1.0)


@pytest.fixture
def live_transport(live_settings):
    with GeminiTransport(grace=live_settings.TIMEOUT_GRACE) as transport:
        yield transport
