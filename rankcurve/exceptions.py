"""Exceptions raised by rankcurve."""


class RankCurveError(Exception):
    """Base exception for all rankcurve errors."""


class DuplicateItemError(RankCurveError, ValueError):
    """Raised when an item identity already exists in a sequence."""


class InsufficientItemsError(RankCurveError, ValueError):
    """Raised when a rating distribution is requested for fewer than two items."""


class SorterStateError(RankCurveError, RuntimeError):
    """Raised when an insertion is driven past completion or read too early."""


class GestureError(RankCurveError, RuntimeError):
    """Raised when a gesture is started while another one is active."""


class ListNotFoundError(RankCurveError, KeyError):
    """Raised when a stored list does not exist."""
