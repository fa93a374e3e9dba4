"""
Configuration settings for the how CLI.

All settings are loaded from environment variables (prefix ``HOW_``) with
sensible defaults. The Gemini key is read from the conventional
``GOOGLE_API_KEY`` variable.
"""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from how_cli import __version__


DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "how"
    APP_VERSION: str = __version__
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"  # stderr only; stdout is reserved for answers
    ENVIRONMENT: str = "development"

    # === Gemini API ===
    MODEL: str = DEFAULT_MODEL
    BASE_URL: str = DEFAULT_BASE_URL
    REQUEST_TIMEOUT: float = Field(default=30.0, gt=0)  # seconds, per attempt
    TIMEOUT_GRACE: float = Field(default=5.0, ge=0)  # extra transport margin
    GOOGLE_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "HOW_GOOGLE_API_KEY"),
    )

    # === Retry & Backoff ===
    MAX_ATTEMPTS: int = Field(default=3, ge=1)
    BACKOFF_UNIT_SECONDS: float = Field(default=1.0, ge=0)
    RETRY_BACKOFF_BASE: float = Field(default=2.0, ge=1)
    RATE_LIMIT_BACKOFF_OFFSET: float = Field(default=1.0, ge=0)

    # === Local State ===
    CONFIG_DIR: Path = Field(default_factory=lambda: Path.home() / ".how-cli")
    API_KEY_FILENAME: str = ".google_api_key"
    HISTORY_FILENAME: str = "history.log"

    # === Terminal ===
    TYPEWRITER_DELAY: float = 0.01  # seconds per character
    SPINNER_INTERVAL: float = 0.1
    MAX_CONTEXT_FILES: int = 20

    @field_validator("MODEL", mode="before")
    @classmethod
    def _default_blank_model(cls, value: Optional[str]) -> str:
        if value is None or not str(value).strip():
            return DEFAULT_MODEL
        return str(value).strip()

    @field_validator("BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("CONFIG_DIR")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def api_key_file(self) -> Path:
        return self.CONFIG_DIR / self.API_KEY_FILENAME

    @property
    def history_file(self) -> Path:
        return self.CONFIG_DIR / self.HISTORY_FILENAME

    @property
    def effective_log_level(self) -> str:
        """DEBUG when HOW_DEBUG is set, otherwise LOG_LEVEL."""
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()
