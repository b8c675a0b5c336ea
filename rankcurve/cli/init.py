"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, save_config
from ..db import init_database, validate_connection

console = Console()

PASSWORD_ENV = "RANKCURVE_DB_PASSWORD"


def init_command(
    config_dir: Path = typer.Option(
        Path.home() / ".config" / "rankcurve",
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    workspace: Path = typer.Option(
        Path.home() / "RankCurve",
        "--workspace",
        "-w",
        help="Workspace root directory",
    ),
    backend: str = typer.Option(
        "file",
        "--backend",
        "-b",
        help="List storage backend (file, postgres)",
    ),
    db_host: str = typer.Option("localhost", "--db-host", help="Postgres host"),
    db_port: int = typer.Option(5432, "--db-port", help="Postgres port"),
    db_name: str = typer.Option("rankcurve", "--db-name", help="Database name"),
    db_user: str = typer.Option("rankcurve_user", "--db-user", help="Database user"),
) -> None:
    """Initialize rankcurve configuration and storage."""
    if backend not in ("file", "postgres"):
        console.print(f"[red]Unknown backend '{backend}'. Use 'file' or 'postgres'.[/red]")
        raise typer.Exit(1)

    console.print(Panel.fit("📈 rankcurve - Initialization", style="bold blue"))

    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"

    config = ConfigModel(
        workspace_root=str(workspace),
        postgres={
            "host": db_host,
            "port": db_port,
            "database": db_name,
            "user": db_user,
            "password_env": PASSWORD_ENV,
        },
        storage={"backend": backend},
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    workspace.mkdir(parents=True, exist_ok=True)
    console.print(f"✅ Created workspace: {workspace}")

    if backend == "postgres":
        console.print("\n[bold]Testing database connection...[/bold]")
        db_config = config.postgres.model_dump()

        if not validate_connection(db_config):
            console.print(
                "[red]❌ Database connection failed![/red]\n"
                "Please ensure Postgres is running and credentials are correct.\n"
                f"Set the password via environment variable: [bold]export {PASSWORD_ENV}=your_password[/bold]"
            )
            raise typer.Exit(1)

        console.print("✅ Database connection successful")

        console.print("\n[bold]Initializing database schema...[/bold]")
        try:
            init_database(db_config)
        except Exception as e:
            console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
            raise typer.Exit(1)

    console.print(
        Panel(
            f"[green]✅ rankcurve initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Workspace: {workspace}\n"
            f"Storage: {backend}\n\n"
            f"Next steps:\n"
            f"1. Set TMDB API key: [bold]export TMDB_API_KEY=your_key[/bold]\n"
            f"2. Create a list: [bold]rankcurve lists create \"Favourite films\"[/bold]\n"
            f"3. Add items: [bold]rankcurve add LIST_ID \"blade runner\"[/bold]",
            style="green",
        )
    )
