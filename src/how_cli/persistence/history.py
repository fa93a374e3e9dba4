"""
Question/command history log.

Plain-text append-only file (default ~/.how-cli/history.log). Entry format:

    [2026-01-01 12:00:00] Q: list files by size
    Commands:
    ls -lS

"""

from datetime import datetime
from typing import Optional

import structlog

from how_cli.config import Settings

logger = structlog.get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class HistoryRepository:
    """Append and read the local history file."""

    def __init__(self, settings: Settings):
        """
        Initialize repository.

        Args:
            settings: Application settings (history file location)
        """
        self.settings = settings
        self.path = settings.history_file

    @staticmethod
    def format_entry(question: str, commands: list[str], now: datetime) -> str:
        lines = [f"[{now.strftime(TIMESTAMP_FORMAT)}] Q: {question}", "Commands:"]
        lines.extend(commands)
        return "\n".join(lines) + "\n\n"

    def append(self, question: str, commands: list[str], now: Optional[datetime] = None) -> None:
        """
        Append one entry.

        Raises:
            OSError: History file could not be written
        """
        entry = self.format_entry(question, commands, now or datetime.now())
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(entry)
        logger.debug("Logged history entry", path=str(self.path), commands_count=len(commands))

    def read(self) -> Optional[str]:
        """
        Return the whole history, or None if nothing has been logged yet.

        Raises:
            OSError: History file exists but could not be read
        """
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
