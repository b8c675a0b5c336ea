"""List management commands."""

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..models import MediaList, MediaType
from ..storage import ListStore, open_store

console = Console()
lists_app = typer.Typer(help="Manage ranked lists")


def get_store() -> ListStore:
    """Open the configured store, exiting with a message if that fails."""
    try:
        return open_store(Config())
    except FileNotFoundError as e:
        console.print(f"[red]{e}. Run 'rankcurve init' first.[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def get_list(store: ListStore, list_id: str) -> MediaList:
    """Load a list, exiting with a message if it is missing."""
    try:
        media_list = store.load(list_id)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if media_list is None:
        console.print(f"[red]List '{list_id}' not found.[/red]")
        raise typer.Exit(1)
    return media_list


@lists_app.command("list")
def lists_list() -> None:
    """List all stored lists."""
    store = get_store()
    lists = store.get_lists()

    if not lists:
        console.print("[yellow]No lists yet.[/yellow]")
        return

    table = Table(title="Lists")
    table.add_column("ID", style="blue")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Items", style="green", justify="right")
    table.add_column("Rated", style="yellow", justify="right")
    table.add_column("Updated", style="dim")

    for media_list in lists:
        updated = media_list.updated_at.strftime("%Y-%m-%d %H:%M") if media_list.updated_at else ""
        table.add_row(
            media_list.id,
            media_list.name,
            media_list.list_type.value,
            str(len(media_list.items)),
            str(media_list.rated_count),
            updated,
        )

    console.print(table)


@lists_app.command("create")
def lists_create(
    name: str = typer.Argument(..., help="List name"),
    kind: MediaType = typer.Option(MediaType.MOVIE, "--kind", "-k", help="Kind of items"),
) -> None:
    """Create an empty list."""
    store = get_store()
    media_list = store.create(name, kind)
    console.print(f"[green]✅ Created list: {name} ({media_list.id})[/green]")


@lists_app.command("show")
def lists_show(
    list_id: str = typer.Argument(..., help="List ID"),
) -> None:
    """Show a list in preference order."""
    store = get_store()
    media_list = get_list(store, list_id)

    if not media_list.items:
        console.print(f"[yellow]'{media_list.name}' is empty.[/yellow]")
        return

    table = Table(title=f"{media_list.name} ({media_list.list_type.value})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Released", style="magenta")
    table.add_column("Rank", style="blue", justify="right")
    table.add_column("Rating", style="green", justify="right")

    for position, item in enumerate(media_list.items, 1):
        table.add_row(
            str(position),
            item.title,
            item.release_date or "",
            str(item.rank),
            f"{item.rating:.2f}" if item.rating is not None else "-",
        )

    console.print(table)


@lists_app.command("delete")
def lists_delete(
    list_id: str = typer.Argument(..., help="List ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete a list."""
    store = get_store()
    media_list = get_list(store, list_id)

    if not yes and not typer.confirm(f"Delete '{media_list.name}'?"):
        console.print("[yellow]Cancelled.[/yellow]")
        return

    store.delete(list_id)
    console.print(f"[green]✅ Deleted list: {media_list.name}[/green]")
