"""
Command-line interface.

Components:
- app: argparse front end and the question/answer lifecycle (HowApp)
- dependencies: Cached factories wiring settings, transport and engine
- error_handlers: ErrorKind -> terminal output and exit code
"""

from how_cli.cli.app import HowApp, build_parser, create_app
from how_cli.cli.error_handlers import FAILURE_HANDLERS, handle_failure

__all__ = [
    "HowApp",
    "build_parser",
    "create_app",
    "FAILURE_HANDLERS",
    "handle_failure",
]
