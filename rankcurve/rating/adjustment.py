"""Rating transitions behind the direct manipulation gestures."""

from typing import List, Optional, Sequence, Tuple

from ..models import RankedItem, effective_rating
from .bounds import MAX_RATING, MIN_RATING, clamp
from .viewport import Viewport

DRAG_SENSITIVITY = 0.5
DRAG_DEAD_ZONE = 2.0

# Closest a dragged point may get to a neighbor
NEIGHBOR_GAP = 0.01

# Proportional adjustment guards
MIN_SPAN = 0.01
DOWN_RATIO_RANGE = (0.1, 10.0)
UP_RATIO_RANGE = (0.0, 10.0)


def rating_order(items: Sequence[RankedItem]) -> List[int]:
    """Indices sorted by rating, lowest first; ties put the later item lower."""
    return sorted(
        range(len(items)),
        key=lambda index: (effective_rating(items[index]), -index),
    )


def neighbor_bounds(
    items: Sequence[RankedItem],
    index: int,
    min_rating: float = MIN_RATING,
    max_rating: float = MAX_RATING,
) -> Tuple[float, float]:
    """
    Range an item may move in without meeting a neighbor.

    Neighbors are the items just below and above it in rating order. Where
    there is none, the absolute bound applies.
    """
    order = rating_order(items)
    position = order.index(index)
    current = effective_rating(items[index])

    if position > 0:
        below = effective_rating(items[order[position - 1]])
        lower = min(current, below + NEIGHBOR_GAP)
    else:
        lower = min(current, min_rating)

    if position < len(order) - 1:
        above = effective_rating(items[order[position + 1]])
        upper = max(current, above - NEIGHBOR_GAP)
    else:
        upper = max(current, max_rating)

    return lower, upper


def grab_offset(pointer_x: float, rating: float, viewport: Viewport, width: float) -> float:
    """Pixel distance between the pointer and the point it grabbed."""
    return pointer_x - viewport.rating_to_x(rating, width)


def drag_target(
    pointer_x: float,
    offset_x: float,
    current_rating: float,
    viewport: Viewport,
    width: float,
    sensitivity: float = DRAG_SENSITIVITY,
    dead_zone: float = DRAG_DEAD_ZONE,
    min_rating: float = MIN_RATING,
    max_rating: float = MAX_RATING,
) -> Optional[float]:
    """
    Rating a drag is heading for, or None for sub-threshold jitter.

    Args:
        pointer_x: Pointer position relative to the left edge of the axis
        offset_x: Offset captured when the drag began
        current_rating: Rating of the dragged item now
        viewport: Visible range of the axis
        width: Axis width in pixels
        sensitivity: Fraction of the pointer movement applied
        dead_zone: Movements shorter than this many pixels are ignored
    """
    current_x = viewport.rating_to_x(current_rating, width)
    delta_x = (pointer_x - offset_x) - current_x
    if abs(delta_x) < dead_zone:
        return None

    new_x = clamp(current_x + delta_x * sensitivity, 0.0, width)
    return viewport.x_to_rating(new_x, width, min_rating, max_rating)


def move_point(
    items: Sequence[RankedItem],
    index: int,
    target: float,
    min_rating: float = MIN_RATING,
    max_rating: float = MAX_RATING,
) -> List[RankedItem]:
    """Move one item toward ``target`` without passing its neighbors."""
    lower, upper = neighbor_bounds(items, index, min_rating, max_rating)
    new_rating = clamp(round(clamp(target, lower, upper), 2), lower, upper)

    updated = list(items)
    if items[index].rating == new_rating:
        return updated
    updated[index] = items[index].model_copy(update={"rating": new_rating})
    return updated


def span_ratio(
    original_range: float,
    new_range: float,
    ratio_range: Tuple[float, float],
) -> Optional[float]:
    """
    Scale factor for a proportional rescale, or None when it is rejected.

    Spans narrower than ``MIN_SPAN`` and ratios outside ``ratio_range`` are
    rejected. Within ``adjust_proportionally`` the neighbor clamp keeps both
    spans wider than ``NEIGHBOR_GAP``, so only the downward ratio bound can
    trip there.
    """
    if original_range < MIN_SPAN:
        return None
    ratio = new_range / original_range
    if not ratio_range[0] <= ratio <= ratio_range[1]:
        return None
    return ratio


def adjust_proportionally(
    items: Sequence[RankedItem],
    index: int,
    target: float,
    min_rating: float = MIN_RATING,
    max_rating: float = MAX_RATING,
) -> List[RankedItem]:
    """
    Move one item and stretch or squeeze everything on the far side of it.

    Moving down rescales every item rated below the dragged one between the
    lowest rating and the new rating, keeping each item's fraction of that
    span; the lowest item stays put. Moving up mirrors this above, keeping
    the highest item fixed. Degenerate spans and extreme ratios leave the
    items untouched.
    """
    lower, upper = neighbor_bounds(items, index, min_rating, max_rating)
    new_rating = clamp(round(clamp(target, lower, upper), 2), lower, upper)
    current = effective_rating(items[index])
    if new_rating == current:
        return list(items)

    order = rating_order(items)
    position = order.index(index)
    list_min = effective_rating(items[order[0]])
    list_max = effective_rating(items[order[-1]])

    updated = list(items)
    updated[index] = items[index].model_copy(update={"rating": new_rating})

    if new_rating < current and position > 0:
        original_range = current - list_min
        new_range = new_rating - list_min
        if span_ratio(original_range, new_range, DOWN_RATIO_RANGE) is None:
            return list(items)

        for other in order[:position]:
            fraction = (effective_rating(items[other]) - list_min) / original_range
            rating = round(list_min + fraction * new_range, 2)
            updated[other] = items[other].model_copy(update={"rating": rating})

    elif new_rating > current and position < len(order) - 1:
        original_range = list_max - current
        new_range = list_max - new_rating
        if span_ratio(original_range, new_range, UP_RATIO_RANGE) is None:
            return list(items)

        for other in order[position + 1:]:
            fraction = (list_max - effective_rating(items[other])) / original_range
            rating = round(list_max - fraction * new_range, 2)
            updated[other] = items[other].model_copy(update={"rating": rating})

    return updated


def swap_with_neighbor(
    items: Sequence[RankedItem],
    index: int,
    direction: int,
) -> Tuple[List[RankedItem], int]:
    """
    Trade places and ratings with the adjacent item.

    The dragged item takes its neighbor's slot and rating and the neighbor
    takes the dragged item's, so ratings stay in place along the sequence.

    Returns:
        Tuple of (updated items, new index of the dragged item); unchanged
        at either end of the sequence
    """
    if direction not in (-1, 1):
        raise ValueError(f"direction must be -1 or 1, got {direction}")

    target = index + direction
    if target < 0 or target >= len(items):
        return list(items), index

    dragged = items[index]
    neighbor = items[target]
    updated = list(items)
    updated[target] = dragged.model_copy(update={"rating": neighbor.rating})
    updated[index] = neighbor.model_copy(update={"rating": dragged.rating})
    return updated, target


def commit_order(items: Sequence[RankedItem]) -> List[RankedItem]:
    """
    Final order by rating, best first, with ranks recomputed.

    Equal ratings keep their current relative order.
    """
    ordered = sorted(items, key=lambda item: effective_rating(item), reverse=True)
    total = len(ordered)
    return [
        item.model_copy(update={"rank": total - 1 - position})
        for position, item in enumerate(ordered)
    ]
