"""Console output shared by the lifecycle manager, git ops and the CLI."""

from __future__ import annotations

import os

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def quiet_enabled() -> bool:
    return os.getenv("GITDRILLS_QUIET", "0") == "1"


def info(message: str) -> None:
    if quiet_enabled():
        return
    console.print(escape(message))


def success(message: str) -> None:
    if quiet_enabled():
        return
    console.print(f"[green]✓[/green] {escape(message)}")


def warn(message: str) -> None:
    if quiet_enabled():
        return
    console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")


def error(message: str) -> None:
    """Print a failure line; never silenced."""
    err_console.print(f"[bold red]❌ Error:[/bold red] {escape(message)}", soft_wrap=True)
