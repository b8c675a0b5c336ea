"""Data models for rankcurve."""

from .media import Item, ItemKey, MediaType, RankedItem
from .media_list import MediaList
from .sequence import (
    PLACEHOLDER_RATING,
    by_rank,
    dedupe,
    effective_rating,
    ensure_unique,
    new_candidates,
    rerank,
)

__all__ = [
    "Item",
    "ItemKey",
    "MediaList",
    "MediaType",
    "PLACEHOLDER_RATING",
    "RankedItem",
    "by_rank",
    "dedupe",
    "effective_rating",
    "ensure_unique",
    "new_candidates",
    "rerank",
]
