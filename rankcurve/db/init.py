"""Database initialization and schema management."""

from typing import Any, Dict

from psycopg.errors import DatabaseError
from rich.console import Console

from .connection import get_connection

console = Console()


SCHEMA_SQL = """
-- Lists table
CREATE TABLE IF NOT EXISTS media_lists (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    list_type TEXT NOT NULL DEFAULT 'movie' CHECK (list_type IN ('movie', 'tv', 'book')),
    created_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
);

-- List items table, one row per item per list
CREATE TABLE IF NOT EXISTS list_items (
    list_id TEXT NOT NULL REFERENCES media_lists(id) ON DELETE CASCADE,
    item_id INTEGER NOT NULL,
    item_type TEXT NOT NULL CHECK (item_type IN ('movie', 'tv', 'book')),
    title TEXT NOT NULL,
    poster_path TEXT,
    release_date TEXT,
    overview TEXT,
    authors TEXT[],
    rank INTEGER NOT NULL CHECK (rank >= 0),
    rating REAL,
    PRIMARY KEY (list_id, item_id, item_type),
    UNIQUE (list_id, rank)
);

CREATE INDEX IF NOT EXISTS idx_list_items_list_id ON list_items(list_id);
"""


def validate_connection(config: Dict[str, Any]) -> bool:
    """Validate database connection."""
    try:
        with get_connection(config) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1 AS ok")
                result = cur.fetchone()
                return result is not None and result["ok"] == 1
    except DatabaseError as e:
        console.print(f"[red]Database connection failed: {e}[/red]")
        return False


def init_database(config: Dict[str, Any]) -> None:
    """Initialize database schema."""
    try:
        with get_connection(config) as conn:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
            conn.commit()
            console.print("[green]Database schema initialized successfully[/green]")
    except DatabaseError as e:
        console.print(f"[red]Failed to initialize database schema: {e}[/red]")
        raise
