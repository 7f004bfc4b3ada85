"""Rich console utilities for output formatting."""

from __future__ import annotations

import platform

from rich.console import Console

from native_platform import __version__


def create_console() -> Console:
    """Console without syntax highlighting, and without emoji on Windows terminals."""
    return Console(emoji=platform.system() != "Windows", highlight=False)


def print_header(console: Console, title: str) -> None:
    """Print a ruled section header tagged with the tool version."""
    console.rule(f"[bold cyan]{title}[/bold cyan] [dim]native-platform v{__version__}[/dim]")


def print_warning(console: Console, message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]{message}[/yellow]")


def print_error(console: Console, message: str) -> None:
    """Print an error message."""
    console.print(f"[red]{message}[/red]")
