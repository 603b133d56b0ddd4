"""Console helpers shared by dalia commands."""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape

from dalia.model import LineError

# stdout carries alias lines for `eval`; diagnostics go to stderr.
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    err_console.print(f"[bold red]dalia:[/] {escape(message)}")


def print_line_errors(errors: Iterable[LineError]) -> None:
    """Report skipped lines as warnings."""
    for error in errors:
        err_console.print(
            f"[yellow]warning:[/] {escape(str(error))} "
            f"[dim]({escape(error.line.strip())})[/]"
        )
