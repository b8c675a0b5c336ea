"""Make room for an item placed beyond every rated item."""

from typing import List, Sequence

from ..models import RankedItem
from .bounds import MAX_RATING, MIN_RATING, round_rating

TOP = "top"
BOTTOM = "bottom"

# Gap kept between the new item and the rated block
BOUNDARY_OFFSET = 0.1
# Share of the near-edge shift carried over to the far edge
FAR_EDGE_FACTOR = 0.5


def rescale_for_extreme(
    items: Sequence[RankedItem],
    boundary: float,
    side: str,
    min_rating: float = MIN_RATING,
    max_rating: float = MAX_RATING,
) -> List[RankedItem]:
    """
    Linearly rescale rated items away from ``boundary``.

    Args:
        items: Rated items to move (unrated items pass through)
        boundary: Rating the new item will take
        side: ``TOP`` if the new item goes above every rated item,
            ``BOTTOM`` if it goes below
        min_rating: Lowest allowed rating
        max_rating: Highest allowed rating

    Returns:
        Items in the same order with rescaled ratings
    """
    ratings = [item.rating for item in items if item.rating is not None]
    if not ratings:
        return list(items)

    current_min = min(ratings)
    current_max = max(ratings)

    if side == BOTTOM:
        new_min = boundary + BOUNDARY_OFFSET
        new_max = min(max_rating, current_max + abs(new_min - current_min) * FAR_EDGE_FACTOR)
        new_max = max(new_max, new_min)
    elif side == TOP:
        new_max = boundary - BOUNDARY_OFFSET
        new_min = max(min_rating, current_min - abs(current_max - new_max) * FAR_EDGE_FACTOR)
        new_min = min(new_min, new_max)
    else:
        raise ValueError(f"Unknown side: {side!r}")

    old_range = current_max - current_min
    new_range = new_max - new_min

    rescaled = []
    for item in items:
        if item.rating is None:
            rescaled.append(item)
            continue

        if old_range > 0:
            relative_position = (item.rating - current_min) / old_range
            rating = new_min + relative_position * new_range
        else:
            # Every item shared one rating
            rating = new_min + new_range * 0.5

        rescaled.append(
            item.model_copy(update={"rating": round_rating(rating, min_rating, max_rating)})
        )
    return rescaled


def place_at_extreme(
    ordered: Sequence[RankedItem],
    index: int,
    side: str,
    min_rating: float = MIN_RATING,
    max_rating: float = MAX_RATING,
) -> List[RankedItem]:
    """
    Rate the unrated item at ``index``, which sits beyond every rated item.

    The item takes the rating of its nearest rated neighbor and every rated
    item is rescaled past it.

    Args:
        ordered: Items, best first
        index: Position of the unrated item
        side: ``TOP`` or ``BOTTOM``

    Returns:
        New items, best first
    """
    step = 1 if side == TOP else -1
    neighbor = index + step
    while 0 <= neighbor < len(ordered) and ordered[neighbor].rating is None:
        neighbor += step
    if not 0 <= neighbor < len(ordered):
        raise ValueError(f"No rated item found {'below' if side == TOP else 'above'} index {index}")

    boundary = ordered[neighbor].rating
    updated = rescale_for_extreme(ordered, boundary, side, min_rating, max_rating)
    updated[index] = updated[index].model_copy(
        update={"rating": round_rating(boundary, min_rating, max_rating)}
    )
    return updated
