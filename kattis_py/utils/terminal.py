"""Utility functions for terminal output and logging."""

import logging
from pathlib import Path
from typing import Iterable, Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def setup_logging(debug: bool = False) -> None:
    """Send kattis_py log records to stderr through rich."""
    logger = logging.getLogger("kattis_py")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


def print_error(message: object) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(message))}")


def print_warning(message: object) -> None:
    err_console.print(f"[bold yellow]Warning:[/bold yellow] {escape(str(message))}")


def clear_screen() -> None:
    """Clear the terminal screen."""
    console.clear()


def print_named_paths(entries: Iterable[Tuple[str, Path]]) -> None:
    """Print a two-column table of names and paths."""
    table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
    table.add_column("Name", style="cyan")
    table.add_column("Path", style="white")

    for name, path in entries:
        table.add_row(name, str(path))

    console.print(table)
