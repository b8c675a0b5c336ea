"""List management in database."""

from contextlib import AbstractContextManager
from typing import Any, Callable, Dict, Iterable, List, Optional

from psycopg import Connection

from ..models import MediaList, RankedItem
from ..storage.base import ListStore
from .connection import get_connection

ConnectionFactory = Callable[[], AbstractContextManager]


def _item_from_row(row: Dict[str, Any]) -> RankedItem:
    return RankedItem(
        id=row["item_id"],
        type=row["item_type"],
        title=row["title"],
        poster_path=row.get("poster_path"),
        release_date=row.get("release_date"),
        overview=row.get("overview"),
        authors=row.get("authors"),
        rank=row["rank"],
        rating=row.get("rating"),
    )


def _list_from_row(row: Dict[str, Any], items: Iterable[RankedItem]) -> MediaList:
    return MediaList(
        id=row["id"],
        name=row["name"],
        list_type=row["list_type"],
        items=sorted(items, key=lambda item: item.rank, reverse=True),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class PostgresListStore(ListStore):
    """Store lists in PostgreSQL."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        connect: Optional[ConnectionFactory] = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            config: Database configuration dict (see ``Config.get_db_config``)
            connect: Callable returning a connection context manager;
                defaults to the shared pool for ``config``
        """
        if connect is None:
            db_config = config or {}
            connect = lambda: get_connection(db_config)  # noqa: E731
        self._connect = connect

    def load(self, list_id: str) -> Optional[MediaList]:
        with self._connect() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT * FROM media_lists WHERE id = %s", (list_id,))
                row = cur.fetchone()
                if row is None:
                    return None

                cur.execute(
                    "SELECT * FROM list_items WHERE list_id = %s ORDER BY rank DESC",
                    (list_id,),
                )
                items = [_item_from_row(item_row) for item_row in cur.fetchall()]

        return _list_from_row(row, items)

    def save(self, media_list: MediaList) -> None:
        """Upsert the list row and replace its items in one transaction."""
        with self._connect() as conn:
            self._save(conn, media_list)

    def _save(self, conn: Connection, media_list: MediaList) -> None:
        try:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO media_lists (id, name, list_type, created_at, updated_at)
                    VALUES (%s, %s, %s, COALESCE(%s, CURRENT_TIMESTAMP), COALESCE(%s, CURRENT_TIMESTAMP))
                    ON CONFLICT (id) DO UPDATE SET
                        name = EXCLUDED.name,
                        list_type = EXCLUDED.list_type,
                        updated_at = EXCLUDED.updated_at
                    """,
                    (
                        media_list.id,
                        media_list.name,
                        media_list.list_type.value,
                        media_list.created_at,
                        media_list.updated_at,
                    ),
                )

                cur.execute("DELETE FROM list_items WHERE list_id = %s", (media_list.id,))

                if media_list.items:
                    cur.executemany(
                        """
                        INSERT INTO list_items (
                            list_id, item_id, item_type, title, poster_path,
                            release_date, overview, authors, rank, rating
                        )
                        VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                        """,
                        [
                            (
                                media_list.id,
                                item.id,
                                item.type.value,
                                item.title,
                                item.poster_path,
                                item.release_date,
                                item.overview,
                                item.authors,
                                item.rank,
                                item.rating,
                            )
                            for item in media_list.items
                        ],
                    )
        except Exception:
            conn.rollback()
            raise

        conn.commit()

    def get_lists(self) -> List[MediaList]:
        with self._connect() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT * FROM media_lists ORDER BY created_at, name")
                list_rows = cur.fetchall()

                cur.execute("SELECT * FROM list_items ORDER BY list_id, rank DESC")
                item_rows = cur.fetchall()

        items_by_list: Dict[str, List[RankedItem]] = {}
        for item_row in item_rows:
            items_by_list.setdefault(item_row["list_id"], []).append(_item_from_row(item_row))

        return [_list_from_row(row, items_by_list.get(row["id"], [])) for row in list_rows]

    def delete(self, list_id: str) -> bool:
        with self._connect() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM media_lists WHERE id = %s", (list_id,))
                deleted = cur.rowcount > 0
            conn.commit()
        return deleted
