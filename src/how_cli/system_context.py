"""
System context collection for the shell-assistant prompt.

Gathers a best-effort snapshot of the user's environment (OS, shell,
working directory, files, available tools) so the model can answer with
commands that fit. Every lookup degrades to "Unknown" instead of failing.
"""

import os
import platform
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Optional

import structlog
from pydantic import BaseModel, Field

logger = structlog.get_logger(__name__)

UNKNOWN = "Unknown"

KNOWN_TOOLS = [
    "git", "npm", "node", "python", "docker", "pip",
    "go", "rustc", "cargo", "java", "mvn", "gradle",
]


class SystemContext(BaseModel):
    """Snapshot of the environment the answer will run in."""

    os: str = Field(default=UNKNOWN, description="Platform name and release")
    shell: str = Field(default=UNKNOWN, description="Shell or parent process name")
    current_dir: str = Field(default=UNKNOWN)
    user: str = Field(default=UNKNOWN)
    git_repo: str = Field(default="No", description="'Yes' when CWD holds a .git entry")
    files: str = Field(default=UNKNOWN, description="Comma-separated directory listing")
    installed_tools: str = Field(default=UNKNOWN)


def _run(args: list[str]) -> Optional[str]:
    try:
        completed = subprocess.run(
            args, capture_output=True, text=True, timeout=2, check=True
        )
    except (OSError, subprocess.SubprocessError):
        return None
    output = completed.stdout.strip()
    return output or None


def get_os_version() -> str:
    """Return the OS release (kernel on Linux, product version on macOS)."""
    if sys.platform.startswith("linux"):
        return platform.release() or UNKNOWN
    if sys.platform == "darwin":
        return platform.mac_ver()[0] or UNKNOWN
    if sys.platform.startswith("win"):
        return platform.version() or UNKNOWN
    return UNKNOWN


def get_current_shell() -> str:
    """Return the shell name from $SHELL, else the parent process name."""
    shell = os.environ.get("SHELL")
    if shell:
        return Path(shell).name

    if sys.platform.startswith("linux") or sys.platform == "darwin":
        ppid = os.getppid()
        if sys.platform.startswith("linux"):
            try:
                comm = Path(f"/proc/{ppid}/comm").read_text().strip()
            except OSError:
                comm = ""
            if comm:
                return comm
        name = _run(["ps", "-p", str(ppid), "-o", "comm="])
        if name:
            return name

    return UNKNOWN


def list_files(directory: Path, max_files: int = 20) -> str:
    """Return up to ``max_files`` sorted entry names, then '...' if truncated."""
    try:
        entries = sorted(entry.name for entry in directory.iterdir())
    except OSError:
        return "Error listing files"

    if len(entries) > max_files:
        entries = entries[:max_files] + ["..."]
    return ", ".join(entries)


def get_installed_tools(tools: Optional[list[str]] = None) -> str:
    """Return the subset of ``tools`` found on PATH, comma-separated."""
    tools = KNOWN_TOOLS if tools is None else tools
    return ", ".join(tool for tool in tools if shutil.which(tool))


def gather_system_context(cwd: Optional[Path] = None, max_files: int = 20) -> SystemContext:
    """
    Collect a SystemContext for ``cwd`` (default: the process CWD).

    Raises:
        OSError: Only if the working directory itself cannot be determined
    """
    directory = Path(cwd) if cwd is not None else Path.cwd()
    user = os.environ.get("USER") or os.environ.get("USERNAME") or UNKNOWN

    context = SystemContext(
        os=f"{platform.system().lower() or sys.platform} {get_os_version()}",
        shell=get_current_shell(),
        current_dir=str(directory),
        user=user,
        git_repo="Yes" if (directory / ".git").exists() else "No",
        files=list_files(directory, max_files=max_files),
        installed_tools=get_installed_tools(),
    )
    logger.debug("Gathered system context", shell=context.shell, git_repo=context.git_repo)
    return context
