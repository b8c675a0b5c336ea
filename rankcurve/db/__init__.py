"""Database management for rankcurve."""

from .connection import conninfo_for, get_connection, get_connection_pool
from .init import init_database, validate_connection
from .lists import PostgresListStore

__all__ = [
    "PostgresListStore",
    "conninfo_for",
    "get_connection",
    "get_connection_pool",
    "init_database",
    "validate_connection",
]
