"""Database connection management."""

import os
from contextlib import contextmanager
from typing import Any, Dict, Generator

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

DEFAULTS = {
    "host": "localhost",
    "port": 5432,
    "database": "rankcurve",
    "user": "rankcurve_user",
}


def conninfo_for(config: Dict[str, Any]) -> str:
    """
    Build a libpq connection string from a ``postgres`` config section.

    A password found in the variable named by ``password_env`` takes
    precedence over an inline ``password``.
    """
    settings = {**DEFAULTS, **{k: v for k, v in config.items() if v is not None}}

    password = settings.get("password") or ""
    password_env = settings.get("password_env")
    if password_env and os.environ.get(password_env):
        password = os.environ[password_env]

    return make_conninfo(
        host=settings["host"],
        port=settings["port"],
        dbname=settings["database"],
        user=settings["user"],
        password=password,
    )


_pools: Dict[str, ConnectionPool] = {}


def get_connection_pool(config: Dict[str, Any]) -> ConnectionPool:
    """Get or create the pool for a database; one pool per connection string."""
    conninfo = conninfo_for(config)
    if conninfo not in _pools:
        _pools[conninfo] = ConnectionPool(
            conninfo,
            min_size=1,
            max_size=4,
            kwargs={"row_factory": dict_row},
            open=True,
        )
    return _pools[conninfo]


@contextmanager
def get_connection(config: Dict[str, Any]) -> Generator[psycopg.Connection, None, None]:
    """Get a database connection from the pool."""
    with get_connection_pool(config).connection() as conn:
        yield conn
