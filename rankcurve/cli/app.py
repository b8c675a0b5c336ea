"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .add import add_command
from .init import init_command
from .lists import lists_app
from .rate import rate_command
from .search import search_command

app = typer.Typer(
    name="rankcurve",
    help="rankcurve - Rank by pairwise comparison, rate on a bell curve",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("search")(search_command)
app.command("add")(add_command)
app.command("rate")(rate_command)
app.add_typer(lists_app, name="lists", help="Manage ranked lists")


if __name__ == "__main__":
    app()
