"""
Command-line application.

Request lifecycle (one question):
1. Resolve the API key (AUTH failure ends here)
2. Gather system context (best effort, defaults on failure)
3. Render the prompt and call the retry engine behind a spinner
4. On Answer: clean, split into commands, print, copy, log history
5. On Failure: print via the kind's handler and exit non-zero

Clipboard and history are side effects of a successful Answer only, and
neither can fail the command.
"""

import argparse
import os
import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

import structlog

from how_cli.config import Settings
from how_cli.cli import dependencies
from how_cli.cli.error_handlers import EXIT_FAILURE, handle_failure
from how_cli.llm.exceptions import CredentialError
from how_cli.llm.prompt_builder import PromptBuilder
from how_cli.llm.text_utils import clean_response, split_commands
from how_cli.models.outcome import Failure
from how_cli.persistence.credential_store import CredentialStore
from how_cli.persistence.history import HistoryRepository
from how_cli.retry.engine import RetryEngine
from how_cli.system_context import SystemContext, gather_system_context
from how_cli.ui.clipboard import ClipboardError, copy_to_clipboard
from how_cli.ui.terminal import Spinner, print_header, typewriter_print

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130

# Marks "--api-key" given without a value
PROMPT_FOR_KEY = object()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="how",
        usage="how <question> [--silent] [--history] [--type] [--help] [--api-key]",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("question", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument("--silent", action="store_true",
                        help="Suppress spinner and typewriter effect")
    parser.add_argument("--type", dest="typewriter", action="store_true",
                        help="Show output with typewriter effect")
    parser.add_argument("--history", action="store_true",
                        help="Show command/question history")
    parser.add_argument("--help", action="store_true",
                        help="Show this help message and exit")
    parser.add_argument("--api-key", nargs="?", const=PROMPT_FOR_KEY, default=None,
                        metavar="API_KEY",
                        help="Set the Gemini API key (usage: --api-key <API_KEY>)")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    """
    Parse ``argv``; unrecognized dash-words are kept as part of the question.
    """
    args, extras = build_parser().parse_known_intermixed_args(argv)
    args.question = list(args.question) + list(extras)
    return args


@dataclass
class HowApp:
    """
    The ``how`` command with its collaborators injected.

    Build one with ``how_cli.cli.app.create_app()`` in production; tests
    construct it directly with fakes.
    """

    settings: Settings
    engine: RetryEngine
    credential_store: CredentialStore
    history: HistoryRepository
    prompt_builder: PromptBuilder
    gather_context: Callable[..., SystemContext] = gather_system_context
    copy: Callable[[str], None] = copy_to_clipboard
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    def run(self, argv: list[str]) -> int:
        if not argv:
            return self.show_help()

        args = parse_args(argv)

        if args.help:
            return self.show_help()
        if args.history:
            return self.show_history()
        if args.api_key is not None:
            return self.replace_api_key(args.api_key)

        question = " ".join(args.question).strip()
        if not question:
            print("Error: No question provided.", file=self.stdout)
            return EXIT_FAILURE

        silent = args.silent
        return self.ask(question, silent=silent, typewriter=args.typewriter and not silent)

    def show_help(self) -> int:
        print_header(self.stdout)
        print(file=self.stdout)
        build_parser().print_help(self.stdout)
        return EXIT_OK

    def show_history(self) -> int:
        try:
            history = self.history.read()
        except OSError as e:
            print(f"Error: error reading history file: {e}", file=self.stderr)
            return EXIT_FAILURE
        if history is None:
            print("No history found.", file=self.stdout)
        else:
            self.stdout.write(history)
        return EXIT_OK

    def replace_api_key(self, value) -> int:
        if value is PROMPT_FOR_KEY:
            try:
                self.credential_store.get_or_create(force_reenter=True)
            except CredentialError as e:
                return handle_failure(Failure(e.kind, e.message), self.stderr)
            print("Gemini API key replaced successfully.", file=self.stdout)
            return EXIT_OK

        new_key = value.strip()
        if not new_key:
            print("Error: API key cannot be empty.", file=self.stdout)
            return EXIT_FAILURE
        try:
            self.credential_store.save(new_key)
        except OSError as e:
            print(f"Error saving API key: {e}", file=self.stderr)
            return EXIT_FAILURE
        print("Gemini API key replaced successfully.", file=self.stdout)
        return EXIT_OK

    def _context(self) -> SystemContext:
        try:
            return self.gather_context(max_files=self.settings.MAX_CONTEXT_FILES)
        except OSError as e:
            logger.warning("Failed to gather system context", error=str(e))
            print(f"Warning: Failed to gather system context: {e}", file=self.stderr)
            return SystemContext()

    def ask(self, question: str, silent: bool = False, typewriter: bool = False) -> int:
        try:
            api_key = self.credential_store.get_or_create()
        except CredentialError as e:
            return handle_failure(Failure(e.kind, e.message), self.stderr)

        prompt = self.prompt_builder.build_prompt(question, self._context())

        spinner = None
        if not silent:
            spinner = Spinner("Generating", interval=self.settings.SPINNER_INTERVAL, stream=self.stdout)
            spinner.start()
        try:
            outcome = self.engine.execute_with_retry(api_key, prompt, self.settings.MAX_ATTEMPTS)
        finally:
            if spinner is not None:
                spinner.stop()

        if isinstance(outcome, Failure):
            return handle_failure(outcome, self.stderr)

        commands = split_commands(clean_response(outcome.text))
        if not commands:
            print("⚠️ No valid commands generated.", file=self.stdout)
            return EXIT_FAILURE

        full_command = "\n".join(commands)
        if typewriter:
            typewriter_print(full_command, delay=self.settings.TYPEWRITER_DELAY, stream=self.stdout)
        else:
            print(full_command, file=self.stdout)

        self._deliver(question, commands, full_command)
        return EXIT_OK

    def _deliver(self, question: str, commands: list[str], full_command: str) -> None:
        try:
            self.copy(full_command)
        except ClipboardError as e:
            logger.debug("Clipboard copy failed", error=str(e))
            if os.environ.get("DISPLAY") or self.settings.DEBUG:
                print(f"Warning: Could not copy to clipboard: {e}", file=self.stderr)

        try:
            self.history.append(question, commands)
        except OSError as e:
            logger.warning("Failed to write history", error=str(e))
            print(f"Warning: Failed to write history: {e}", file=self.stderr)


def create_app() -> HowApp:
    """Wire a HowApp from the cached dependencies."""
    return HowApp(
        settings=dependencies.get_settings(),
        engine=dependencies.get_retry_engine(),
        credential_store=dependencies.get_credential_store(),
        history=dependencies.get_history_repository(),
        prompt_builder=dependencies.get_prompt_builder(),
    )
