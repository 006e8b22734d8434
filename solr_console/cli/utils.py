"""Utility functions for the Solr Console CLI."""

from rich.console import Console
from rich.table import Table

console = Console()


def print_table(data: list[dict], title: str = "") -> None:
    """Print data as a rich table."""
    if not data:
        console.print(f"[yellow]No {title.lower()} found.[/yellow]")
        return

    table = Table(title=title)

    # Columns come from the first row
    for key in data[0].keys():
        table.add_column(key.replace("_", " ").title())

    for row in data:
        table.add_row(*[str(value) for value in row.values()])

    console.print(table)


def echo_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓ {message}[/green]")


def echo_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗ {message}[/red]")


def echo_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠ {message}[/yellow]")


def echo_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ {message}[/blue]")
