"""Bell-curve ratings and direct manipulation."""

from .adjustment import (
    adjust_proportionally,
    commit_order,
    drag_target,
    move_point,
    neighbor_bounds,
    swap_with_neighbor,
)
from .bounds import DEFAULT_MEAN, DEFAULT_STD_DEV, MAX_RATING, MIN_RATING
from .distribution import distribute, fill_unrated, inverse_normal_cdf
from .rescaler import BOTTOM, TOP, place_at_extreme, rescale_for_extreme
from .session import GestureKind, GestureState, RatingSession, print_rating_summary
from .viewport import Viewport, compute_zoom, full_range

__all__ = [
    "BOTTOM",
    "DEFAULT_MEAN",
    "DEFAULT_STD_DEV",
    "GestureKind",
    "GestureState",
    "MAX_RATING",
    "MIN_RATING",
    "RatingSession",
    "TOP",
    "Viewport",
    "adjust_proportionally",
    "commit_order",
    "compute_zoom",
    "distribute",
    "drag_target",
    "fill_unrated",
    "full_range",
    "inverse_normal_cdf",
    "move_point",
    "neighbor_bounds",
    "place_at_extreme",
    "print_rating_summary",
    "rescale_for_extreme",
    "swap_with_neighbor",
]
