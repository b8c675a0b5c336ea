"""Open Library search for books."""

import re
import zlib
from typing import List, Optional

import httpx

from ..models import Item, MediaType
from .base import SearchProvider

OPENLIBRARY_BASE_URL = "https://openlibrary.org"
COVER_URL = "https://covers.openlibrary.org/b/id/{cover_id}-L.jpg"

_WORK_KEY = re.compile(r"/works/(.+)")


def work_id(key: str) -> int:
    """
    Numeric id for an Open Library work key.

    "/works/OL45804W" becomes 45804. Keys without digits fall back to a
    stable checksum of the key.
    """
    match = _WORK_KEY.search(key)
    digits = re.sub(r"\D", "", match.group(1)) if match else ""
    if digits:
        return int(digits)
    return zlib.crc32(key.encode("utf-8"))


class OpenLibrarySearchProvider(SearchProvider):
    """Open Library search client."""

    kinds = {MediaType.BOOK}

    def __init__(
        self,
        base_url: str = OPENLIBRARY_BASE_URL,
        limit: int = 20,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(timeout=timeout, client=client)
        self.base_url = base_url.rstrip("/")
        self.limit = limit

    def _search(self, query: str, kind: MediaType) -> List[Item]:
        data = self._get(
            f"{self.base_url}/search.json",
            {"q": query, "limit": self.limit},
        )

        items = []
        for doc in data["docs"]:
            cover_id = doc.get("cover_i")
            year = doc.get("first_publish_year")
            description = doc.get("description")
            if isinstance(description, dict):
                description = description.get("value")

            items.append(
                Item(
                    id=work_id(doc["key"]),
                    type=MediaType.BOOK,
                    title=doc.get("title") or "Untitled",
                    poster_path=COVER_URL.format(cover_id=cover_id) if cover_id else None,
                    release_date=str(year) if year else None,
                    overview=description,
                    authors=doc.get("author_name"),
                )
            )
        return items
