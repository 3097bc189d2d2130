"""Rich console output formatting utilities."""

from __future__ import annotations

from rich.console import Console

__all__ = [
    "console",
    "error_console",
    "print_did_you_mean",
    "print_error",
    "print_warning",
]

# Shared console instance
console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_did_you_mean(suggestions: list[str]) -> None:
    """Print 'Did you mean?' suggestions.

    Args:
        suggestions: List of similar names to suggest.
    """
    if not suggestions:
        return

    console.print("[dim]Did you mean?[/dim]")
    for name in suggestions:
        console.print(f"  [cyan]{name}[/cyan]", highlight=False)
