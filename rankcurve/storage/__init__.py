"""Persistence for ranked lists."""

from ..config import Config
from .base import ListStore
from .files import FileListStore


def open_store(config: Config) -> ListStore:
    """Open the list store selected by the configuration."""
    if config.config.storage.backend == "postgres":
        from ..db import PostgresListStore

        return PostgresListStore(config.get_db_config())
    return FileListStore(config.lists_path)


__all__ = ["FileListStore", "ListStore", "open_store"]
