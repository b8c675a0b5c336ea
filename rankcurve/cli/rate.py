"""Rate command implementation."""

from typing import List, Optional, Tuple

import typer
from rich.console import Console

from ..config import Config
from ..exceptions import GestureError, InsufficientItemsError
from ..rating import RatingSession, print_rating_summary
from .lists import get_list, get_store

console = Console()

DIRECTIONS = {"up": -1, "down": 1, "-1": -1, "+1": 1, "1": 1}


def parse_assignment(value: str) -> Tuple[int, float]:
    """Parse ``POS=RATING`` with a 1-based position."""
    position, sep, rating = value.partition("=")
    if not sep:
        raise ValueError(f"Expected POS=RATING, got '{value}'")
    try:
        return int(position) - 1, float(rating)
    except ValueError:
        raise ValueError(f"Expected POS=RATING, got '{value}'")


def parse_move(value: str) -> Tuple[int, int]:
    """Parse ``POS:DIR`` where DIR is up or down."""
    position, sep, direction = value.partition(":")
    if not sep or direction.lower() not in DIRECTIONS:
        raise ValueError(f"Expected POS:up or POS:down, got '{value}'")
    try:
        return int(position) - 1, DIRECTIONS[direction.lower()]
    except ValueError:
        raise ValueError(f"Expected POS:up or POS:down, got '{value}'")


def rate_command(
    list_id: str = typer.Argument(..., help="List ID"),
    mean: Optional[float] = typer.Option(
        None,
        "--mean",
        help="Curve mean (1-5); a fully rated list only re-fits with --reset",
    ),
    std_dev: Optional[float] = typer.Option(
        None,
        "--std-dev",
        help="Curve standard deviation (0.5-2); a fully rated list only re-fits with --reset",
    ),
    reset: bool = typer.Option(False, "--reset", help="Discard manual adjustments"),
    assignments: Optional[List[str]] = typer.Option(
        None,
        "--set",
        help="Set a rating, e.g. 2=4.1 (applied before --swap)",
    ),
    moves: Optional[List[str]] = typer.Option(
        None,
        "--swap",
        help="Move an item one place, e.g. 3:up",
    ),
    zoom: bool = typer.Option(False, "--zoom", help="Zoom the view to the ratings"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the result without saving"),
) -> None:
    """Fit a list to a bell curve and adjust its ratings."""
    store = get_store()
    media_list = get_list(store, list_id)
    config = Config().config

    try:
        session = RatingSession(media_list.items, config.rating, config.adjustment)

        if mean is not None or std_dev is not None:
            session.set_curve(
                mean if mean is not None else session.mean,
                std_dev if std_dev is not None else session.std_dev,
            )
            if not reset and all(item.rating is not None for item in media_list.items):
                console.print(
                    "[yellow]Every item is already rated; pass --reset to re-fit the curve.[/yellow]"
                )

        if reset:
            session.reset_ratings()

        for value in assignments or []:
            index, rating = parse_assignment(value)
            session.set_rating(index, rating)

        for value in moves or []:
            index, direction = parse_move(value)
            session.swap(index, direction)

        if zoom:
            session.zoom_to_fit()
    except InsufficientItemsError as e:
        console.print(f"[red]{e}. Add more items with 'rankcurve add'.[/red]")
        raise typer.Exit(1)
    except (GestureError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    print_rating_summary(session)

    if dry_run:
        console.print("[dim]Dry run; nothing saved[/dim]")
        return

    store.save_items(list_id, session.commit())
    console.print(f"[green]✅ Saved ratings for '{media_list.name}'[/green]")
