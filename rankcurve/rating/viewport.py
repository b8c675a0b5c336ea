"""Visible range of the rating axis."""

from typing import Iterable

from pydantic import BaseModel, Field

from .bounds import MAX_RATING, MIN_RATING, clamp

ZOOM_PADDING = 0.1
ZOOM_THRESHOLD = 0.7


class Viewport(BaseModel):
    """Sub-range of the rating axis mapped onto a drawing surface."""

    visible_min: float = Field(MIN_RATING, description="Rating at the left edge")
    visible_max: float = Field(MAX_RATING, description="Rating at the right edge")
    zoomed: bool = Field(False, description="Whether a sub-range is shown")

    @property
    def span(self) -> float:
        return self.visible_max - self.visible_min

    def rating_to_x(self, rating: float, width: float) -> float:
        """Pixel position of a rating on a surface ``width`` pixels wide."""
        return (rating - self.visible_min) / self.span * width

    def x_to_rating(
        self,
        x: float,
        width: float,
        min_rating: float = MIN_RATING,
        max_rating: float = MAX_RATING,
    ) -> float:
        """Rating under pixel ``x``, rounded to 0.01 and kept in bounds."""
        raw = self.visible_min + (x / width) * self.span
        return clamp(round(raw, 2), min_rating, max_rating)


def full_range(min_rating: float = MIN_RATING, max_rating: float = MAX_RATING) -> Viewport:
    return Viewport(visible_min=min_rating, visible_max=max_rating, zoomed=False)


def compute_zoom(
    ratings: Iterable[float],
    min_rating: float = MIN_RATING,
    max_rating: float = MAX_RATING,
    padding: float = ZOOM_PADDING,
    threshold: float = ZOOM_THRESHOLD,
) -> Viewport:
    """
    Fit the viewport to the data.

    Pads the data range by ``padding`` of its span on each side and clamps
    to the absolute bounds. Zooms only when the padded range is narrower
    than ``threshold`` of the full scale; otherwise shows everything.
    """
    values = list(ratings)
    if len(values) < 2:
        return full_range(min_rating, max_rating)

    data_min = min(values)
    data_max = max(values)
    pad = (data_max - data_min) * padding

    new_min = max(min_rating, data_min - pad)
    new_max = min(max_rating, data_max + pad)

    # A single distinct rating has no range to fit
    if new_max <= new_min:
        return full_range(min_rating, max_rating)

    if new_max - new_min < (max_rating - min_rating) * threshold:
        return Viewport(visible_min=new_min, visible_max=new_max, zoomed=True)
    return full_range(min_rating, max_rating)
