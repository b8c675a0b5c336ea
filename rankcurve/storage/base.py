"""List store interface."""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import pendulum

from ..exceptions import ListNotFoundError
from ..models import MediaList, MediaType, RankedItem, by_rank, dedupe, rerank


class ListStore(ABC):
    """Abstract base class for list persistence."""

    @abstractmethod
    def load(self, list_id: str) -> Optional[MediaList]:
        """Load a list, or None if it does not exist."""
        pass

    @abstractmethod
    def save(self, media_list: MediaList) -> None:
        """
        Write a list, replacing any stored version in full.

        Args:
            media_list: List to store
        """
        pass

    @abstractmethod
    def get_lists(self) -> List[MediaList]:
        """All stored lists."""
        pass

    @abstractmethod
    def delete(self, list_id: str) -> bool:
        """
        Delete a list.

        Returns:
            True if a list was deleted
        """
        pass

    def create(self, name: str, list_type: MediaType = MediaType.MOVIE) -> MediaList:
        """Create and store an empty list."""
        now = pendulum.now("UTC")
        media_list = MediaList(
            id=uuid.uuid4().hex,
            name=name,
            list_type=list_type,
            items=[],
            created_at=now,
            updated_at=now,
        )
        self.save(media_list)
        return media_list

    def save_items(self, list_id: str, items: Sequence[RankedItem]) -> MediaList:
        """
        Replace the items of a stored list.

        Repeated identities are dropped (first one wins) and ranks are
        recomputed so they stay a permutation of 0..N-1.
        """
        media_list = self.load(list_id)
        if media_list is None:
            raise ListNotFoundError(f"List not found: {list_id}")

        updated = media_list.model_copy(
            update={
                "items": rerank(dedupe(by_rank(items))),
                "updated_at": pendulum.now("UTC"),
            }
        )
        self.save(updated)
        return updated
