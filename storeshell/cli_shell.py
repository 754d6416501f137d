from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, Iterator

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from storeshell import __version__
from storeshell.config.settings import Settings
from storeshell.container import DependencyContainer
from storeshell.exceptions import BaseAppError
from storeshell.use_cases.shell.dispatcher import CommandDispatcher, CommandResult


def _stdin_lines(console: Console, dispatcher: CommandDispatcher) -> Iterator[str]:
    """Prompt and read lines until EOF or Ctrl+C."""
    while True:
        try:
            console.print(Text(f"{dispatcher.state.cwd}> ", style="cyan"), end="")
            yield input()
        except (EOFError, KeyboardInterrupt):
            console.print()
            return


def print_result(console: Console, result: CommandResult) -> None:
    if result.clear_screen:
        console.clear()
        return
    if not result.output:
        return
    # Plain Text: file contents must never be parsed as rich markup
    console.print(
        Text(result.output, style="" if result.ok else "red"), highlight=False
    )


def run_session(
    lines: Iterable[str], dispatcher: CommandDispatcher, console: Console
) -> int:
    """Feed lines to the dispatcher one at a time and print every result.

    Returns the number of lines processed.
    """
    count = 0
    for line in lines:
        print_result(console, dispatcher.handle_line(line))
        count += 1
    return count


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="storeshell",
        description="Interactive command shell over a directory-backed file store.",
    )
    parser.add_argument(
        "--root", default=None, help="Host directory backing the store"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: STORESHELL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--no-banner", action="store_true", help="Do not print the welcome banner"
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except BaseAppError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    if args.root:
        settings.root = args.root
    if args.log_level:
        settings.log_level = args.log_level

    # Configure logging; stderr keeps it apart from command output
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        dispatcher = DependencyContainer(settings).get_dispatcher()
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    console = Console(highlight=False, soft_wrap=True)
    if not args.no_banner:
        console.print(
            Panel(
                f"storeshell v{__version__} - store root: {os.path.abspath(settings.root)}\n"
                "Type HELP for commands. Ctrl+D or Ctrl+C exits.",
                title="storeshell",
                border_style="cyan",
                box=box.ROUNDED,
            )
        )

    run_session(_stdin_lines(console, dispatcher), dispatcher, console)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
