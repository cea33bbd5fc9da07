"""Rich console helpers for user-facing output.

Errors and warnings go to stderr so that generated documents printed to
stdout stay clean. Messages are escaped, never interpreted as markup.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(escape(message), highlight=False)


def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    error_console.print(f"[yellow]{escape(message)}[/yellow]", highlight=False)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {escape(message)}", highlight=False)


def print_panel(message: str, title: str | None = None, style: str = "cyan") -> None:
    """Print a rich-markup message inside a bordered panel."""
    console.print(Panel(message, title=title, border_style=style))
