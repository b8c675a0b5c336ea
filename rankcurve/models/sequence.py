"""Helpers for ordered sequences of ranked items."""

from typing import Iterable, List, Sequence, Set, TypeVar

from ..exceptions import DuplicateItemError
from .media import Item, ItemKey, RankedItem

# Stand-in for an unrated item wherever a number is needed.
PLACEHOLDER_RATING = 3.0

T = TypeVar("T", bound=Item)


def effective_rating(item: RankedItem) -> float:
    """Rating of an item, or the mid-scale placeholder while it is unrated."""
    return item.rating if item.rating is not None else PLACEHOLDER_RATING


def rerank(items: Sequence[Item]) -> List[RankedItem]:
    """
    Recompute dense ranks from array order.

    Position 0 receives rank N-1 and the last position receives rank 0.
    Plain items are promoted to unrated ranked items.
    """
    total = len(items)
    ranked = []
    for index, item in enumerate(items):
        rank = total - 1 - index
        if isinstance(item, RankedItem):
            ranked.append(item.model_copy(update={"rank": rank}))
        else:
            ranked.append(RankedItem.from_item(item, rank=rank))
    return ranked


def by_rank(items: Iterable[RankedItem]) -> List[RankedItem]:
    """Copy of the items sorted best first (rank descending)."""
    return sorted(items, key=lambda item: item.rank, reverse=True)


def dedupe(items: Iterable[T]) -> List[T]:
    """Drop repeated identities, keeping the first occurrence."""
    seen: Set[ItemKey] = set()
    unique = []
    for item in items:
        if item.key in seen:
            continue
        seen.add(item.key)
        unique.append(item)
    return unique


def new_candidates(existing: Iterable[Item], candidates: Iterable[T]) -> List[T]:
    """Candidates not yet in ``existing``, without duplicates among themselves."""
    present = {item.key for item in existing}
    return [item for item in dedupe(candidates) if item.key not in present]


def ensure_unique(items: Iterable[Item]) -> None:
    """Raise if two items share an identity."""
    seen: Set[ItemKey] = set()
    for item in items:
        if item.key in seen:
            raise DuplicateItemError(
                f"Duplicate item {item.title!r} ({item.type.value} #{item.id}) in sequence"
            )
        seen.add(item.key)
