"""Rich UI helpers for terminal output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import Repository, Settings


console = Console()
err_console = Console(stderr=True)


def info(message: str) -> None:
    """Print an info message."""
    err_console.print(f"[blue]ℹ[/blue] {message}")


def success(message: str) -> None:
    """Print a success message."""
    err_console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[red]✗[/red] {message}", style="red")


def repositories_table(repositories: list[Repository], last_selected: list[str]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Path")
    table.add_column("All branches", justify="center")
    table.add_column("Last used", justify="center")
    previous = set(last_selected)
    for index, repo in enumerate(repositories, start=1):
        table.add_row(
            str(index),
            escape(repo.name),
            escape(repo.path),
            "[green]✓[/green]" if repo.all_branches else "",
            "[green]✓[/green]" if repo.name in previous else "",
        )
    return table


def show_repositories(settings: Settings) -> None:
    if not settings.repositories:
        console.print("No repositories registered. Add one with `git-log-note repo add`.")
        return
    console.print(repositories_table(settings.repositories, settings.last_selected_names))
