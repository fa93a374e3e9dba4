"""
Clipboard delivery.

pyperclip is tried first. When it finds no clipboard mechanism (headless
boxes, SSH sessions) the platform commands are tried in order, ending with
the OSC 52 terminal escape sequence for SSH sessions on Linux.

    linux:   xclip -> xsel -> wl-copy -> OSC 52 (SSH only)
    darwin:  pbcopy
    windows: clip
"""

import base64
import os
import shutil
import subprocess
import sys
from typing import Optional, TextIO

import pyperclip
import structlog

logger = structlog.get_logger(__name__)

OSC52_MAX_LENGTH = 100_000

LINUX_COMMANDS = [
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["wl-copy"],
]


class ClipboardError(Exception):
    """Raised when no clipboard method succeeded."""
    pass


def try_command(args: list[str], text: str) -> bool:
    """Pipe ``text`` into ``args``; True on a zero exit status."""
    if shutil.which(args[0]) is None:
        return False
    try:
        subprocess.run(args, input=text, text=True, check=True, timeout=5,
                       stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Clipboard command failed", command=args[0], error=str(e))
        return False
    return True


def is_ssh_session() -> bool:
    return any(os.environ.get(var) for var in ("SSH_CLIENT", "SSH_TTY", "SSH_CONNECTION"))


def osc52_sequence(text: str) -> str:
    """Return the OSC 52 escape sequence that sets the clipboard to ``text``."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return f"\033]52;c;{encoded}\033\\"


def copy_with_osc52(text: str, stream: Optional[TextIO] = None) -> None:
    if len(text) > OSC52_MAX_LENGTH:
        raise ClipboardError("text too long for OSC 52 (max ~100KB)")
    stream = stream or sys.stdout
    stream.write(osc52_sequence(text))
    stream.flush()


def copy_to_clipboard(text: str, platform: Optional[str] = None) -> None:
    """
    Copy ``text`` to the system clipboard.

    Args:
        text: Text to copy
        platform: Override for ``sys.platform`` (tests)

    Raises:
        ClipboardError: Neither pyperclip nor any fallback worked
    """
    try:
        pyperclip.copy(text)
        return
    except pyperclip.PyperclipException as e:
        logger.debug("pyperclip unavailable, trying fallbacks", error=str(e))

    copy_with_fallback(text, platform=platform)


def copy_with_fallback(text: str, platform: Optional[str] = None) -> None:
    """
    Copy ``text`` with the platform clipboard commands.

    Args:
        text: Text to copy
        platform: Override for ``sys.platform`` (tests)

    Raises:
        ClipboardError: No clipboard method worked on this platform
    """
    platform = platform or sys.platform

    if platform.startswith("linux"):
        for args in LINUX_COMMANDS:
            if try_command(args, text):
                return
        if is_ssh_session():
            copy_with_osc52(text)
            return
        raise ClipboardError("no clipboard method available")

    if platform == "darwin":
        if try_command(["pbcopy"], text):
            return
        raise ClipboardError("pbcopy failed")

    if platform.startswith("win"):
        if try_command(["clip"], text):
            return
        raise ClipboardError("clip failed")

    raise ClipboardError(f"clipboard not supported on {platform}")
