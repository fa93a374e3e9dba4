"""Unit tests for CLI dependency wiring."""

import pytest

from how_cli.cli import dependencies
from how_cli.cli.app import HowApp, create_app
from how_cli.llm.gemini_client import GeminiTransport
from how_cli.retry.engine import RetryEngine


@pytest.fixture(autouse=True)
def clear_caches(monkeypatch, tmp_path):
    monkeypatch.setenv("HOW_CONFIG_DIR", str(tmp_path / ".how-cli"))
    monkeypatch.setenv("HOW_MODEL", "models/gemini-2.0-pro")
    monkeypatch.setenv("HOW_TIMEOUT_GRACE", "2.5")
    for cached in (dependencies.get_settings, dependencies.get_transport, dependencies.get_prompt_builder):
        cached.cache_clear()
    yield
    for cached in (dependencies.get_settings, dependencies.get_transport, dependencies.get_prompt_builder):
        cached.cache_clear()


def test_settings_cached():
    assert dependencies.get_settings() is dependencies.get_settings()


def test_transport_singleton_uses_grace():
    transport = dependencies.get_transport()

    assert isinstance(transport, GeminiTransport)
    assert transport.grace == 2.5
    assert dependencies.get_transport() is transport


def test_engine_shares_transport():
    engine = dependencies.get_retry_engine()

    assert isinstance(engine, RetryEngine)
    assert engine.transport is dependencies.get_transport()
    assert engine.model == "models/gemini-2.0-pro"


def test_stores_use_config_dir(tmp_path):
    assert dependencies.get_credential_store().key_file == tmp_path / ".how-cli" / ".google_api_key"
    assert dependencies.get_history_repository().path == tmp_path / ".how-cli" / "history.log"


def test_create_app():
    app = create_app()

    assert isinstance(app, HowApp)
    assert app.settings is dependencies.get_settings()
    assert app.prompt_builder is dependencies.get_prompt_builder()
