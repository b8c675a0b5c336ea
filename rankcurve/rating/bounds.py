"""Rating scale bounds."""

MIN_RATING = 0.5
MAX_RATING = 5.0
DEFAULT_MEAN = 3.0
DEFAULT_STD_DEV = 1.0


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_rating(value: float, min_rating: float = MIN_RATING, max_rating: float = MAX_RATING) -> float:
    """Clamp to the rating bounds and round to two decimals."""
    return round(clamp(value, min_rating, max_rating), 2)
