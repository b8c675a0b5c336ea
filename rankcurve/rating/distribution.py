"""Map a preference order onto a bell-curve rating scale."""

import math
from typing import List, Optional, Sequence

from ..exceptions import InsufficientItemsError
from ..models import RankedItem, by_rank
from .bounds import DEFAULT_MEAN, DEFAULT_STD_DEV, MAX_RATING, MIN_RATING, round_rating
from .rescaler import BOTTOM, TOP, place_at_extreme

# Quantile returned at p <= 0 and p >= 1
Z_LIMIT = 5.0

# Rational approximation coefficients (central region, then tails)
_A = (2.50662823884, -18.61500062529, 41.39119773534, -25.44106049637)
_B = (-8.4735109309, 23.08336743743, -21.06224101826, 3.13082909833)
_C = (
    0.3374754822726147,
    0.9761690190917186,
    0.1607979714918209,
    0.0276438810333863,
    0.0038405729373609,
)


def _upper_quantile(p: float) -> float:
    """Quantile for 0.5 <= p < 1."""
    if p <= 0.92:
        y = p - 0.5
        r = y * y
        numerator = y * (((_A[3] * r + _A[2]) * r + _A[1]) * r + _A[0])
        denominator = (((_B[3] * r + _B[2]) * r + _B[1]) * r + _B[0]) * r + 1
        return numerator / denominator

    t = math.log(-math.log(1 - p))
    return _C[0] + t * (_C[1] + t * (_C[2] + t * (_C[3] + t * _C[4])))


def inverse_normal_cdf(p: float) -> float:
    """
    Approximate standard-normal quantile for percentile ``p``.

    Uses one polynomial for the central region (0.5 <= p <= 0.92) and a
    polynomial in log(-log(1 - p)) for the tail; the lower half follows by
    symmetry. Clamped to +/-5 at the ends of the unit interval.
    """
    if p <= 0:
        return -Z_LIMIT
    if p >= 1:
        return Z_LIMIT
    if p < 0.5:
        return -_upper_quantile(1 - p)
    return _upper_quantile(p)


def distribute(
    items: Sequence[RankedItem],
    mean: float = DEFAULT_MEAN,
    std_dev: float = DEFAULT_STD_DEV,
    min_rating: float = MIN_RATING,
    max_rating: float = MAX_RATING,
) -> List[RankedItem]:
    """
    Rate every item from its position on a normal curve.

    Items are sorted best first; the item at index i of N sits at percentile
    i / (N - 1). The best item lands in the upper tail.

    Args:
        items: Ranked items (ratings, if any, are overwritten)
        mean: Curve mean
        std_dev: Curve standard deviation
        min_rating: Lowest allowed rating
        max_rating: Highest allowed rating

    Returns:
        New items, best first, ratings non-increasing

    Raises:
        InsufficientItemsError: With fewer than two items
    """
    total = len(items)
    if total < 2:
        raise InsufficientItemsError(
            f"At least 2 items are needed to distribute ratings on a curve, got {total}"
        )

    rated = []
    for index, item in enumerate(by_rank(items)):
        percentile = index / (total - 1)
        z = -inverse_normal_cdf(percentile)
        rating = round_rating(mean + std_dev * z, min_rating, max_rating)
        rated.append(item.model_copy(update={"rating": rating}))
    return rated


def _nearest_rated(items: List[RankedItem], start: int, step: int) -> Optional[int]:
    index = start + step
    while 0 <= index < len(items):
        if items[index].rating is not None:
            return index
        index += step
    return None


def fill_unrated(
    items: Sequence[RankedItem],
    mean: float = DEFAULT_MEAN,
    std_dev: float = DEFAULT_STD_DEV,
    min_rating: float = MIN_RATING,
    max_rating: float = MAX_RATING,
) -> List[RankedItem]:
    """
    Rate unrated items without disturbing the relative order of rated ones.

    With nothing rated yet the whole sequence is distributed. Otherwise every
    unrated item between two rated items takes the average of its nearest
    rated neighbors. A run of unrated items is filled top-down, so each one
    averages the item just filled above it and keeps the run strictly
    ordered instead of tied. Unrated items beyond all rated items push the
    rated block aside (see ``rescaler.place_at_extreme``).

    Returns:
        New items, best first
    """
    ordered = by_rank(items)
    unrated = [index for index, item in enumerate(ordered) if item.rating is None]
    if not unrated:
        return ordered
    if len(unrated) == len(ordered):
        return distribute(ordered, mean, std_dev, min_rating, max_rating)

    first_rated = min(i for i, item in enumerate(ordered) if item.rating is not None)
    last_rated = max(i for i, item in enumerate(ordered) if item.rating is not None)

    # Gaps first, top-down, so runs of unrated items stay strictly ordered
    for index in unrated:
        if first_rated < index < last_rated:
            upper = ordered[_nearest_rated(ordered, index, -1)].rating
            lower = ordered[_nearest_rated(ordered, index, 1)].rating
            rating = round_rating((upper + lower) / 2.0, min_rating, max_rating)
            ordered[index] = ordered[index].model_copy(update={"rating": rating})

    # Then the extremes, working outward from the rated block
    for index in reversed(range(first_rated)):
        ordered = place_at_extreme(ordered, index, TOP, min_rating, max_rating)
    for index in range(last_rated + 1, len(ordered)):
        ordered = place_at_extreme(ordered, index, BOTTOM, min_rating, max_rating)

    return ordered

