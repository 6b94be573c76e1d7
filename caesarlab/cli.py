"""
Command line and interactive menu for the Caesar cipher.

Both front ends only move text between files and the cipher services;
all cipher logic lives in ``caesarlab.services``.
"""

import argparse
import logging
import sys
from enum import Enum
from typing import Callable, TextIO

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from caesarlab.core.config import Settings, get_settings
from caesarlab.core.exceptions import CryptanalysisError, InvalidKeyError, UnknownLanguageError
from caesarlab.core.logging import configure_logging
from caesarlab.models.schemas import KeyScore, Script
from caesarlab.services.analysis import frequency
from caesarlab.services.analysis.brute_force import brute_force_decrypt
from caesarlab.services.engines.caesar import decrypt
from caesarlab.services.files import process_file, read_lines_joined, write_brute_force_report

logger = logging.getLogger(__name__)


class MenuAction(int, Enum):
    """Numbered entries of the interactive menu."""

    ENCRYPT_FILE = 1
    DECRYPT_FILE = 2
    BRUTE_FORCE = 3
    FREQUENCY_ANALYSIS = 4
    EXIT = 5


MENU_LABELS: dict[MenuAction, str] = {
    MenuAction.ENCRYPT_FILE: "Encrypt file",
    MenuAction.DECRYPT_FILE: "Decrypt file with key",
    MenuAction.BRUTE_FORCE: "Brute force decryption",
    MenuAction.FREQUENCY_ANALYSIS: "Frequency analysis",
    MenuAction.EXIT: "Exit",
}


def parse_key(raw: str) -> int:
    """Read a shift typed by the user."""
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidKeyError(raw) from None


def parse_language(raw: str) -> Script | None:
    """Blank means detect from the text."""
    raw = raw.strip().lower()
    if not raw:
        return None
    if raw not in frequency.REFERENCE_TABLES:
        raise UnknownLanguageError(raw)
    return Script(raw)


def render_scores(console: Console, scores: list[KeyScore], best_key: int, limit: int = 5) -> None:
    """Print the best ``limit`` keys as a table."""
    table = Table(box=box.SIMPLE, header_style="bold", title="[bold]Best keys[/bold]")
    table.add_column("#", width=4)
    table.add_column("Key", width=6)
    table.add_column("Score", justify="right")

    ranked = sorted(scores, key=lambda s: s.score, reverse=True)[:limit]
    for i, entry in enumerate(ranked, 1):
        marker = "*" if entry.key == best_key else str(i)
        table.add_row(marker, str(entry.key), f"{entry.score:.4f}")

    console.print(table)


class InteractiveMenu:
    """
    Numbered menu loop over the file operations.

    Each MenuAction maps to a handler through a dispatch table. A failing
    action prints the error and returns to the menu.

    Args:
        console: Output console
        stream: Input stream; reads from the terminal when None
        settings: Application settings
    """

    def __init__(
        self,
        console: Console | None = None,
        stream: TextIO | None = None,
        settings: Settings | None = None,
    ):
        self.console = console or Console()
        self.stream = stream
        self.settings = settings or get_settings()
        self._handlers: dict[MenuAction, Callable[[], None]] = {
            MenuAction.ENCRYPT_FILE: self.encrypt_file,
            MenuAction.DECRYPT_FILE: self.decrypt_file,
            MenuAction.BRUTE_FORCE: self.brute_force,
            MenuAction.FREQUENCY_ANALYSIS: self.frequency_analysis,
        }

    def ask(self, prompt: str) -> str:
        """Read one answer; raises EOFError when input is exhausted."""
        if self.stream is None:
            return self.console.input(f"{prompt} ").strip()

        self.console.print(f"{prompt} ", end="", markup=False)
        line = self.stream.readline()
        if not line:
            raise EOFError
        return line.strip()

    def show_menu(self) -> None:
        self.console.print()
        self.console.print("[bold]Choose an action:[/bold]")
        for action in MenuAction:
            self.console.print(f"{action.value}. {MENU_LABELS[action]}")

    def run(self) -> None:
        """Run the menu until Exit is chosen or input ends."""
        self.console.print(Panel("[bold cyan]Caesar Cipher[/bold cyan]", border_style="cyan"))

        while True:
            self.show_menu()
            try:
                raw = self.ask("Choice:")
            except EOFError:
                return

            try:
                choice = int(raw)
            except ValueError:
                self.console.print(f"Error: enter a number from 1 to {len(MenuAction)}")
                continue

            try:
                action = MenuAction(choice)
            except ValueError:
                self.console.print("Invalid choice")
                continue

            if action is MenuAction.EXIT:
                self.console.print("Exiting...")
                return

            try:
                self._handlers[action]()
            except EOFError:
                return
            except (CryptanalysisError, OSError) as e:
                logger.warning("%s failed: %s", MENU_LABELS[action], e)
                self.console.print(f"Error: {e}", style="red", markup=False)

    def _transform_file(self, encrypt_mode: bool) -> None:
        input_path = self.ask("Input file:")
        output_path = self.ask("Output file:")
        key = parse_key(self.ask("Key:"))

        process_file(input_path, output_path, key, encrypt_mode, self.settings.file_encoding)
        self.console.print("Operation completed successfully", style="green")

    def encrypt_file(self) -> None:
        self._transform_file(encrypt_mode=True)

    def decrypt_file(self) -> None:
        self._transform_file(encrypt_mode=False)

    def brute_force(self) -> None:
        input_path = self.ask("Input file:")
        output_path = self.ask("Output file for results:")

        text = read_lines_joined(
            input_path,
            separator="\n",
            encoding=self.settings.file_encoding,
            keep_trailing=True,
        )
        write_brute_force_report(output_path, brute_force_decrypt(text), self.settings.file_encoding)
        self.console.print("Brute force finished. Check the output file.", style="green")

    def frequency_analysis(self) -> None:
        input_path = self.ask("Input file:")
        language = parse_language(self.ask("Language (english/russian, blank to detect):"))

        text = read_lines_joined(input_path, encoding=self.settings.file_encoding)
        key, plaintext = analyze_text(self.console, text, language or self.settings.default_language)
        self.console.print(f"Probable key: {key}")
        self.console.print(Panel(Text(plaintext), title="Decrypted text", border_style="green"))


def analyze_text(console: Console, text: str, language: Script | None) -> tuple[int, str]:
    """Run frequency analysis, print the key ranking and return (key, plaintext)."""
    if language is None:
        language = frequency.detect_language(text)

    table = frequency.reference_table(language)
    key = frequency.statistical_analysis(text, table)
    render_scores(console, frequency.rank_keys(text, table), key)
    return key, decrypt(text, key)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="caesarlab",
        description="Caesar cipher for English and Russian text with brute force and frequency analysis.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = parser.add_subparsers(dest="command")

    for name, help_text in (("encrypt", "Encrypt a file"), ("decrypt", "Decrypt a file with a key")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("input", help="Input file")
        cmd.add_argument("output", help="Output file")
        cmd.add_argument("-k", "--key", required=True, help="Integer shift")

    cmd = sub.add_parser("brute-force", help="Write the decryption under every key")
    cmd.add_argument("input", help="Input file")
    cmd.add_argument("output", help="Report file")

    cmd = sub.add_parser("analyze", help="Guess the key by frequency analysis")
    cmd.add_argument("input", help="Input file")
    cmd.add_argument(
        "-l", "--language",
        choices=[Script.ENGLISH.value, Script.RUSSIAN.value],
        help="Reference language (detected when omitted)",
    )

    sub.add_parser("menu", help="Interactive menu (default)")

    cmd = sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    cmd.add_argument("--host", default="0.0.0.0")
    cmd.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Command line entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    console = console or Console()

    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        if args.command in ("encrypt", "decrypt"):
            count = process_file(
                args.input,
                args.output,
                parse_key(args.key),
                args.command == "encrypt",
                settings.file_encoding,
            )
            console.print(f"Processed {count} lines into {args.output}", markup=False)

        elif args.command == "brute-force":
            text = read_lines_joined(args.input, "\n", settings.file_encoding, keep_trailing=True)
            write_brute_force_report(args.output, brute_force_decrypt(text), settings.file_encoding)
            console.print(f"Brute force candidates written to {args.output}", markup=False)

        elif args.command == "analyze":
            text = read_lines_joined(args.input, encoding=settings.file_encoding)
            language = Script(args.language) if args.language else settings.default_language
            key, plaintext = analyze_text(console, text, language)
            console.print(f"Probable key: {key}")
            console.print(Text(plaintext))

        elif args.command == "serve":
            from caesarlab.main import run

            run(host=args.host, port=args.port)

        else:
            InteractiveMenu(console=console, settings=settings).run()

    except CryptanalysisError as e:
        Console(stderr=True).print(f"Error: {e}", style="red", markup=False)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
