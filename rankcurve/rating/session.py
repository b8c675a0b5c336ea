"""Interactive rating session: the sequence, the active gesture and the viewport."""

from enum import Enum
from typing import Callable, List, Optional, Sequence

from pydantic import BaseModel, Field
from rich.console import Console
from rich.table import Table

from ..config.models import AdjustmentConfig, RatingConfig
from ..exceptions import GestureError, InsufficientItemsError
from ..models import ItemKey, RankedItem, by_rank, effective_rating, rerank
from .adjustment import (
    adjust_proportionally,
    commit_order,
    drag_target,
    grab_offset,
    move_point,
    swap_with_neighbor,
)
from .distribution import distribute, fill_unrated
from .viewport import Viewport, compute_zoom, full_range

console = Console()

Listener = Callable[["RatingSession"], None]


class GestureKind(str, Enum):
    """Direct manipulation gestures; at most one is active."""

    IDLE = "idle"
    POINT_DRAG = "point_drag"
    ADJUSTER_DRAG = "adjuster_drag"
    CARD_DRAG = "card_drag"


class GestureState(BaseModel):
    """State of the active gesture."""

    kind: GestureKind = Field(GestureKind.IDLE, description="Active gesture")
    item_key: Optional[ItemKey] = Field(None, description="Identity of the dragged item")
    offset_x: float = Field(0.0, description="Pointer offset from the grabbed point")
    start_x: float = Field(0.0, description="Pointer position the card drag is measured from")
    original_rating: Optional[float] = Field(None, description="Rating when an adjuster drag began")

    @property
    def active(self) -> bool:
        return self.kind != GestureKind.IDLE


class RatingSession:
    """
    Owns a sequence being rated and applies gestures to it.

    Items are kept best first. Every gesture changes ratings only; ranks are
    recomputed once by ``commit``. Subscribers are called after every change.
    """

    def __init__(
        self,
        items: Sequence[RankedItem],
        rating: Optional[RatingConfig] = None,
        adjustment: Optional[AdjustmentConfig] = None,
    ) -> None:
        """
        Initialize rating session.

        Args:
            items: Ranked items, rated or not
            rating: Curve parameters and bounds
            adjustment: Gesture tuning

        Raises:
            InsufficientItemsError: With fewer than two items
        """
        if len(items) < 2:
            raise InsufficientItemsError(
                f"At least 2 items are needed to rate on a curve, got {len(items)}"
            )
        self.rating_config = rating or RatingConfig()
        self.adjustment = adjustment or AdjustmentConfig()
        self._source = by_rank(items)
        self._listeners: List[Listener] = []

        self.gesture = GestureState()
        self.viewport = self._full_range()
        self.items: List[RankedItem] = self._seed()

    @property
    def mean(self) -> float:
        return self.rating_config.mean

    @property
    def std_dev(self) -> float:
        return self.rating_config.std_dev

    @property
    def ratings(self) -> List[float]:
        return [effective_rating(item) for item in self.items]

    @property
    def highlighted_key(self) -> Optional[ItemKey]:
        """Identity of the item under the active gesture."""
        return self.gesture.item_key

    def _full_range(self) -> Viewport:
        return full_range(self.rating_config.min_rating, self.rating_config.max_rating)

    def _seed(self) -> List[RankedItem]:
        config = self.rating_config
        return fill_unrated(
            self._source, config.mean, config.std_dev, config.min_rating, config.max_rating
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _replace(self, items: List[RankedItem]) -> bool:
        if items == self.items:
            return False
        self.items = items
        self._emit()
        return True

    def _index_of(self, key: ItemKey) -> int:
        for index, item in enumerate(self.items):
            if item.key == key:
                return index
        raise GestureError(f"Item {key} is not in this session")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise GestureError(f"No item at position {index}")

    def _begin(self, kind: GestureKind, index: int, **state) -> None:
        if self.gesture.active:
            raise GestureError(
                f"Cannot start {kind.value}: {self.gesture.kind.value} is in progress"
            )
        self._check_index(index)
        self.gesture = GestureState(kind=kind, item_key=self.items[index].key, **state)
        self._emit()

    def _require_idle(self, action: str) -> None:
        if self.gesture.active:
            raise GestureError(f"Cannot {action} during {self.gesture.kind.value}")

    def begin_point_drag(self, index: int, pointer_x: float) -> None:
        """Grab a point on the curve."""
        self._check_index(index)
        rating = effective_rating(self.items[index])
        offset = grab_offset(pointer_x, rating, self.viewport, self.adjustment.curve_width_px)
        self._begin(GestureKind.POINT_DRAG, index, offset_x=offset, start_x=pointer_x)

    def begin_adjuster_drag(self, index: int, pointer_x: float) -> None:
        """Grab the axis adjuster of an item."""
        self._check_index(index)
        rating = effective_rating(self.items[index])
        offset = grab_offset(pointer_x, rating, self.viewport, self.adjustment.curve_width_px)
        self._begin(
            GestureKind.ADJUSTER_DRAG,
            index,
            offset_x=offset,
            start_x=pointer_x,
            original_rating=rating,
        )

    def begin_card_drag(self, index: int, pointer_x: float) -> None:
        """Grab an item card."""
        self._begin(GestureKind.CARD_DRAG, index, start_x=pointer_x)

    def move(self, pointer_x: float) -> bool:
        """
        Feed a pointer position to the active gesture.

        Returns:
            Whether any rating changed; always False while idle
        """
        kind = self.gesture.kind
        if kind == GestureKind.IDLE:
            return False

        index = self._index_of(self.gesture.item_key)
        if kind == GestureKind.CARD_DRAG:
            return self._move_card(index, pointer_x)

        config = self.rating_config
        target = drag_target(
            pointer_x,
            self.gesture.offset_x,
            effective_rating(self.items[index]),
            self.viewport,
            self.adjustment.curve_width_px,
            self.adjustment.drag_sensitivity,
            self.adjustment.dead_zone_px,
            config.min_rating,
            config.max_rating,
        )
        if target is None:
            return False

        if kind == GestureKind.POINT_DRAG:
            updated = move_point(self.items, index, target, config.min_rating, config.max_rating)
        else:
            updated = adjust_proportionally(
                self.items, index, target, config.min_rating, config.max_rating
            )
        return self._replace(updated)

    def _move_card(self, index: int, pointer_x: float) -> bool:
        distance = pointer_x - self.gesture.start_x
        if abs(distance) < self.adjustment.card_width_px / 2:
            return False

        direction = 1 if distance > 0 else -1
        updated, new_index = swap_with_neighbor(self.items, index, direction)
        if new_index == index:
            return False

        self.gesture = self.gesture.model_copy(update={"start_x": pointer_x})
        return self._replace(updated)

    def end(self) -> None:
        """Pointer released or left the surface."""
        if not self.gesture.active:
            return
        self.gesture = GestureState()
        self._emit()

    def set_rating(self, index: int, rating: float) -> bool:
        """Keyboard equivalent of a point drag to ``rating``."""
        self._require_idle("set a rating")
        self._check_index(index)
        config = self.rating_config
        return self._replace(
            move_point(self.items, index, rating, config.min_rating, config.max_rating)
        )

    def swap(self, index: int, direction: int) -> int:
        """
        Keyboard equivalent of a one-step card drag.

        Returns:
            New position of the moved item
        """
        self._require_idle("reorder")
        self._check_index(index)
        updated, new_index = swap_with_neighbor(self.items, index, direction)
        self._replace(updated)
        return new_index

    def set_curve(self, mean: float, std_dev: float) -> None:
        """Change the curve; ratings are re-seeded from the input sequence."""
        self._require_idle("change the curve")
        data = self.rating_config.model_dump()
        data.update(mean=mean, std_dev=std_dev)
        self.rating_config = RatingConfig(**data)
        self.items = self._seed()
        self.viewport = self._full_range()
        self._emit()

    def reset_ratings(self) -> None:
        """Drop manual adjustments and follow the curve exactly."""
        self._require_idle("reset ratings")
        config = self.rating_config
        self.items = distribute(
            rerank(self.items), config.mean, config.std_dev, config.min_rating, config.max_rating
        )
        self._emit()

    def zoom_to_fit(self) -> Viewport:
        config = self.rating_config
        self.viewport = compute_zoom(
            self.ratings,
            config.min_rating,
            config.max_rating,
            self.adjustment.zoom_padding,
            self.adjustment.zoom_threshold,
        )
        self._emit()
        return self.viewport

    def reset_zoom(self) -> None:
        self.viewport = self._full_range()
        self._emit()

    def commit(self) -> List[RankedItem]:
        """Final items ordered by rating, best first, with ranks recomputed."""
        self._require_idle("commit")
        return commit_order(self.items)


def print_rating_summary(session: RatingSession) -> None:
    """Print the current ratings as a table."""
    table = Table(title=f"Ratings (mean {session.mean:.2f}, std dev {session.std_dev:.2f})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Rating", style="green", justify="right")

    for position, item in enumerate(session.items, 1):
        table.add_row(
            str(position),
            item.title,
            item.type.value,
            f"{effective_rating(item):.2f}",
        )

    console.print(table)

    viewport = session.viewport
    if viewport.zoomed:
        console.print(
            f"[dim]Zoomed to {viewport.visible_min:.2f} - {viewport.visible_max:.2f}[/dim]"
        )
