"""TMDB search for movies and TV shows."""

from typing import List, Optional

import httpx

from ..models import Item, MediaType
from .base import SearchProvider
from .models import SearchResult

TMDB_BASE_URL = "https://api.themoviedb.org/3"


class TMDBSearchProvider(SearchProvider):
    """The Movie Database search client."""

    kinds = {MediaType.MOVIE, MediaType.TV}

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = TMDB_BASE_URL,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(timeout=timeout, client=client)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def search(self, query: str, kind: MediaType) -> SearchResult:
        if not self.api_key:
            return SearchResult(
                query=query, kind=kind, success=False, error="TMDB API key is not set"
            )
        return super().search(query, kind)

    def _search(self, query: str, kind: MediaType) -> List[Item]:
        data = self._get(
            f"{self.base_url}/search/{kind.value}",
            {"api_key": self.api_key, "query": query},
        )

        items = []
        for result in data["results"]:
            if kind == MediaType.MOVIE:
                title = result.get("title")
                release_date = result.get("release_date")
            else:
                title = result.get("name")
                release_date = result.get("first_air_date")

            items.append(
                Item(
                    id=result["id"],
                    type=kind,
                    title=title or "Untitled",
                    poster_path=result.get("poster_path"),
                    release_date=release_date or None,
                    overview=result.get("overview") or None,
                )
            )
        return items
