"""
Terminal presentation helpers.

Components:
- terminal: Header, Spinner, typewriter output
- clipboard: Best-effort clipboard delivery
"""

from how_cli.ui.clipboard import ClipboardError, copy_to_clipboard
from how_cli.ui.terminal import Spinner, print_header, typewriter_print

__all__ = [
    "ClipboardError",
    "copy_to_clipboard",
    "Spinner",
    "print_header",
    "typewriter_print",
]
