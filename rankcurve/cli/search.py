"""Search command implementation."""

from typing import Sequence

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..models import Item, MediaType
from ..search import MediaSearch

console = Console()


def print_search_results(items: Sequence[Item], title: str) -> None:
    """Print numbered search results."""
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Released", style="magenta")
    table.add_column("ID", style="blue", justify="right")
    table.add_column("Authors", style="yellow")

    for number, item in enumerate(items, 1):
        table.add_row(
            str(number),
            item.title,
            item.release_date or "",
            str(item.id),
            ", ".join(item.authors or []),
        )

    console.print(table)


def search_command(
    query: str = typer.Argument(..., help="Search text"),
    kind: MediaType = typer.Option(MediaType.MOVIE, "--kind", "-k", help="Kind of item"),
) -> None:
    """Search the movie, TV and book catalogs."""
    try:
        config = Config()
        media_search = MediaSearch.from_config(config.get_search_config())
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"[dim]Searching {kind.value} catalog for '{query}'...[/dim]")
    result = media_search.search(query, kind)

    if not result.success:
        console.print(f"[red]Search failed: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.items:
        console.print("[yellow]No results.[/yellow]")
        return

    console.print(f"[green]Found {result.item_count} results[/green]")
    print_search_results(result.items, f"Results for '{query}'")
