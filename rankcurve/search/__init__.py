"""Catalog search for movies, TV shows and books."""

from typing import Any, Dict, List, Optional

import httpx

from ..models import MediaType
from .base import SearchProvider
from .models import SearchResult
from .openlibrary import OpenLibrarySearchProvider, work_id
from .tmdb import TMDBSearchProvider


class MediaSearch:
    """Dispatch searches to the provider that serves each kind."""

    def __init__(self, providers: List[SearchProvider]) -> None:
        self.providers: Dict[MediaType, SearchProvider] = {}
        for provider in providers:
            for kind in provider.kinds:
                self.providers[kind] = provider

    @classmethod
    def from_config(
        cls, search_config: Dict[str, Any], client: Optional[httpx.Client] = None
    ) -> "MediaSearch":
        """Build from ``Config.get_search_config()``."""
        timeout = search_config.get("timeout", 10.0)
        return cls(
            [
                TMDBSearchProvider(
                    api_key=search_config.get("tmdb_api_key"),
                    base_url=search_config.get("tmdb_base_url", "https://api.themoviedb.org/3"),
                    timeout=timeout,
                    client=client,
                ),
                OpenLibrarySearchProvider(
                    base_url=search_config.get("openlibrary_base_url", "https://openlibrary.org"),
                    limit=search_config.get("book_limit", 20),
                    timeout=timeout,
                    client=client,
                ),
            ]
        )

    def search(self, query: str, kind: MediaType) -> SearchResult:
        provider = self.providers.get(kind)
        if provider is None:
            return SearchResult(
                query=query, kind=kind, success=False, error=f"No provider for {kind.value}"
            )
        return provider.search(query, kind)


__all__ = [
    "MediaSearch",
    "OpenLibrarySearchProvider",
    "SearchProvider",
    "SearchResult",
    "TMDBSearchProvider",
    "work_id",
]
