"""
API key storage.

Resolution order for the Gemini API key:
1. GOOGLE_API_KEY environment variable (via Settings)
2. Key file under the config directory (default ~/.how-cli/.google_api_key)
3. Interactive prompt, when stdin is a terminal; the entered key is saved
"""

import os
import sys
from typing import Callable, Optional, TextIO

import structlog

from how_cli.config import Settings
from how_cli.llm.exceptions import CredentialError

logger = structlog.get_logger(__name__)


class CredentialStore:
    """
    Load, prompt for, and persist the Gemini API key.

    The key file is written with mode 0600 inside a 0755 config directory.
    """

    FILE_MODE = 0o600
    DIR_MODE = 0o755

    def __init__(
        self,
        settings: Settings,
        input_func: Callable[[str], str] = input,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        """
        Initialize credential store.

        Args:
            settings: Application settings (key file location, env key)
            input_func: Line reader used for the interactive prompt
            stdin: Stream checked for interactivity (default: sys.stdin)
            stdout: Stream for prompt text (default: sys.stdout)
            stderr: Stream for warnings (default: sys.stderr)
        """
        self.settings = settings
        self.key_file = settings.api_key_file
        self._input = input_func
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr

    def load(self) -> Optional[str]:
        """Return the key from the environment or key file, or None."""
        if self.settings.GOOGLE_API_KEY and self.settings.GOOGLE_API_KEY.strip():
            return self.settings.GOOGLE_API_KEY.strip()

        try:
            stored = self.key_file.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("Failed to read API key file", path=str(self.key_file), error=str(e))
            return None
        return stored or None

    def get_or_create(self, force_reenter: bool = False) -> str:
        """
        Return a usable API key, prompting for one if needed.

        Args:
            force_reenter: Skip stored keys and always prompt

        Raises:
            CredentialError: No key available and none could be prompted for
        """
        api_key = None if force_reenter else self.load()
        if api_key:
            return api_key

        stdin = self._stdin or sys.stdin
        if stdin is None or not stdin.isatty():
            raise CredentialError("GOOGLE_API_KEY not found in non-interactive session")

        stdout = self._stdout or sys.stdout
        print("Paste your Google Gemini API key:", file=stdout)
        try:
            entered = self._input("API Key: ")
        except EOFError as e:
            raise CredentialError("API key input cancelled") from e

        api_key = entered.strip()
        if not api_key:
            raise CredentialError("API key cannot be empty")

        try:
            self.save(api_key)
        except OSError as e:
            logger.warning("Could not save API key", path=str(self.key_file), error=str(e))
            print(f"Warning: Could not save API key: {e}", file=self._stderr or sys.stderr)

        return api_key

    def save(self, api_key: str) -> None:
        """
        Persist the key to the key file.

        Raises:
            OSError: Directory or file could not be written
        """
        self.key_file.parent.mkdir(mode=self.DIR_MODE, parents=True, exist_ok=True)
        fd = os.open(self.key_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(api_key)
        os.chmod(self.key_file, self.FILE_MODE)
        logger.debug("Saved API key", path=str(self.key_file))
