"""Terminal rendering: header, progress spinner, typewriter output."""

import sys
import threading
import time
from typing import Optional, TextIO

HEADER = (
    "   __             \n"
    "  / /  ___ _    __\n"
    " / _ \\/ _ \\ |/|/ /\n"
    "/_//_/\\___/__,__/ \n"
    "\n"
    "Ask me how to do anything in your terminal!"
)

SPINNER_FRAMES = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"]


def print_header(stream: Optional[TextIO] = None) -> None:
    print(HEADER, file=stream or sys.stdout)


class Spinner:
    """
    Animated spinner drawn on a background thread.

    Usage:
        with Spinner("Generating"):
            outcome = engine.execute_with_retry(...)
    """

    def __init__(
        self,
        message: str,
        interval: float = 0.1,
        stream: Optional[TextIO] = None,
    ):
        self.message = message
        self.interval = interval
        self.stream = stream or sys.stdout
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _spin(self) -> None:
        i = 0
        while not self._stop.is_set():
            frame = SPINNER_FRAMES[i % len(SPINNER_FRAMES)]
            self.stream.write(f"\r{frame} {self.message}")
            self.stream.flush()
            i += 1
            self._stop.wait(self.interval)
        # Clear the spinner line
        self.stream.write("\r" + " " * (len(self.message) + 2) + "\r")
        self.stream.flush()

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._spin, name="spinner", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()


def typewriter_print(text: str, delay: float = 0.01, stream: Optional[TextIO] = None) -> None:
    """Print ``text`` one character at a time, then a newline."""
    stream = stream or sys.stdout
    for char in text:
        stream.write(char)
        stream.flush()
        if delay > 0:
            time.sleep(delay)
    stream.write("\n")
    stream.flush()
