"""
Entry point for the ``how`` command.
"""

import signal
import sys
from typing import Optional

import structlog
from pydantic import ValidationError

from how_cli.cli.app import EXIT_INTERRUPTED, create_app
from how_cli.cli.dependencies import get_settings, get_transport
from how_cli.cli.error_handlers import EXIT_FAILURE
from how_cli.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def _raise_interrupt(signum, frame):
    raise KeyboardInterrupt


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the CLI and return its exit code.

    SIGINT and SIGTERM abort the whole run with exit code 130; there is no
    partial result.
    """
    argv = sys.argv[1:] if argv is None else argv

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(settings.effective_log_level, settings.ENVIRONMENT)
    signal.signal(signal.SIGTERM, _raise_interrupt)

    try:
        return create_app().run(argv)
    except KeyboardInterrupt:
        logger.debug("Interrupted by signal")
        print("\n👋 Interrupted.")
        return EXIT_INTERRUPTED
    finally:
        get_transport().close()
