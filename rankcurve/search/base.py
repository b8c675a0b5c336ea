"""Search provider interface."""

from abc import ABC, abstractmethod
from typing import Optional, Set

import httpx

from ..models import MediaType
from .models import SearchResult


class SearchProvider(ABC):
    """Abstract base class for catalog search providers."""

    kinds: Set[MediaType] = set()

    def __init__(self, timeout: float = 10.0, client: Optional[httpx.Client] = None) -> None:
        """
        Initialize search provider.

        Args:
            timeout: HTTP timeout in seconds
            client: Shared HTTP client (one is created per request otherwise)
        """
        self.timeout = timeout
        self.client = client

    def _get(self, url: str, params: dict) -> dict:
        """GET a JSON document."""
        if self.client is not None:
            response = self.client.get(url, params=params)
            response.raise_for_status()
            return response.json()

        with httpx.Client(timeout=self.timeout) as client:
            response = client.get(url, params=params)
            response.raise_for_status()
            return response.json()

    def search(self, query: str, kind: MediaType) -> SearchResult:
        """
        Search the catalog.

        Failures never raise; they come back as an unsuccessful result.
        """
        if kind not in self.kinds:
            return SearchResult(
                query=query,
                kind=kind,
                success=False,
                error=f"{type(self).__name__} cannot search for {kind.value}",
            )

        try:
            items = self._search(query, kind)
        except httpx.HTTPError as e:
            return SearchResult(query=query, kind=kind, success=False, error=f"HTTP error: {e}")
        except (KeyError, TypeError, ValueError) as e:
            return SearchResult(
                query=query, kind=kind, success=False, error=f"Unexpected response: {e}"
            )

        return SearchResult(query=query, kind=kind, success=True, items=items)

    @abstractmethod
    def _search(self, query: str, kind: MediaType) -> list:
        """
        Run the search.

        Args:
            query: Search text
            kind: Kind of item to look for

        Returns:
            List of items
        """
        pass
