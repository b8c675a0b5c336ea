"""Add command implementation."""

from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from ..config import Config
from ..models import Item
from ..ranking import BatchSorter, Comparison, print_sort_summary
from ..search import MediaSearch
from .lists import get_list, get_store
from .search import print_search_results

console = Console()


def parse_picks(picks: str, count: int) -> List[int]:
    """
    Parse a comma separated list of 1-based result numbers.

    Returns:
        0-based indices, in the order given, without repeats
    """
    indices: List[int] = []
    for part in picks.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= count:
            raise ValueError(f"Invalid pick '{part}', expected numbers from 1 to {count}")
        index = int(part) - 1
        if index not in indices:
            indices.append(index)
    return indices


def _describe(item: Item) -> str:
    year = f" ({item.release_date[:4]})" if item.release_date else ""
    return f"{item.title}{year}"


def ask_preference(comparison: Comparison) -> bool:
    """Ask which of two items is preferred; True means the new one."""
    console.print(
        Panel(
            f"[bold]1.[/bold] [cyan]{_describe(comparison.new_item)}[/cyan]\n"
            f"[bold]2.[/bold] [yellow]{_describe(comparison.existing_item)}[/yellow]",
            title="Which do you prefer?",
        )
    )
    return Prompt.ask("Choice", choices=["1", "2"], console=console) == "1"


def add_command(
    list_id: str = typer.Argument(..., help="List ID"),
    query: str = typer.Argument(..., help="Search text"),
    pick: Optional[str] = typer.Option(
        None,
        "--pick",
        "-p",
        help="Result numbers to add, e.g. 1,3 (asked for if omitted)",
    ),
) -> None:
    """Search for items and sort them into a list by pairwise comparison."""
    store = get_store()
    media_list = get_list(store, list_id)
    media_search = MediaSearch.from_config(Config().get_search_config())

    result = media_search.search(query, media_list.list_type)
    if not result.success:
        console.print(f"[red]Search failed: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.items:
        console.print("[yellow]No results.[/yellow]")
        return

    print_search_results(result.items, f"Results for '{query}'")

    if pick is None:
        pick = Prompt.ask("Add which results", default="1", console=console)

    try:
        indices = parse_picks(pick, len(result.items))
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    candidates = [result.items[index] for index in indices]
    sorter = BatchSorter(candidates, existing=media_list.items)

    if sorter.total == 0:
        console.print("[yellow]Everything picked is already in the list.[/yellow]")
        return

    skipped = len(candidates) - sorter.total
    if skipped:
        console.print(f"[dim]Skipping {skipped} item(s) already in the list[/dim]")

    try:
        while not sorter.done:
            sorter.answer(ask_preference(sorter.pending))
    except KeyboardInterrupt:
        console.print("\n[yellow]Sorting interrupted; nothing saved[/yellow]")
        raise typer.Exit(1)

    store.save_items(list_id, sorter.result)
    print_sort_summary(sorter)
    console.print(f"[green]✅ Saved {len(sorter.result)} items to '{media_list.name}'[/green]")
