"""
Local persistence for the CLI.

Components:
- CredentialStore: API key lookup, prompting and storage
- HistoryRepository: Append-only question/command history
"""

from how_cli.persistence.credential_store import CredentialStore
from how_cli.persistence.history import HistoryRepository

__all__ = [
    "CredentialStore",
    "HistoryRepository",
]
