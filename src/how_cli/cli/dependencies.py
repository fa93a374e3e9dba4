"""
Dependency wiring for the CLI.

Provides cached instances of the expensive or stateful pieces (settings,
transport) and factory functions for the rest.
"""

from functools import lru_cache

from how_cli.config import Settings
from how_cli.llm.base_client import BaseTransport
from how_cli.llm.gemini_client import GeminiTransport
from how_cli.llm.prompt_builder import PromptBuilder
from how_cli.persistence.credential_store import CredentialStore
from how_cli.persistence.history import HistoryRepository
from how_cli.retry.engine import RetryEngine


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return Settings()


@lru_cache()
def get_transport() -> BaseTransport:
    """
    Get singleton transport.

    The underlying httpx Client is reused by every attempt of a call.

    Returns:
        GeminiTransport instance
    """
    return GeminiTransport(grace=get_settings().TIMEOUT_GRACE)


def get_retry_engine() -> RetryEngine:
    """
    Create retry engine with injected dependencies.

    Note: RetryEngine is NOT cached because it's lightweight and holds no
    per-call state. The transport it wraps is the cached singleton.
    """
    return RetryEngine.from_settings(get_settings(), get_transport())


@lru_cache()
def get_prompt_builder() -> PromptBuilder:
    """Get singleton prompt builder (template loaded once)."""
    return PromptBuilder(max_files=get_settings().MAX_CONTEXT_FILES)


def get_credential_store() -> CredentialStore:
    return CredentialStore(get_settings())


def get_history_repository() -> HistoryRepository:
    return HistoryRepository(get_settings())
