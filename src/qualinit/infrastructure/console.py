"""Colored operator-facing output shared by every pipeline stage."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from rich.status import Status

console = Console(highlight=False, soft_wrap=True)

_ORANGE = "#FFA500"


def info(message: str) -> None:
    console.print(f"[blue]{escape(message)}[/blue]")


def warn(message: str) -> None:
    console.print(f"[{_ORANGE}]{escape(message)}[/{_ORANGE}]")


def error(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]")


def succeed(message: str) -> None:
    console.print(f"[green]{escape(message)}[/green]")


def loading(text: str) -> Status:
    """Return a spinner labelled *text*; use it as a context manager."""
    return console.status(f"[green]{escape(text)}[/green]")
