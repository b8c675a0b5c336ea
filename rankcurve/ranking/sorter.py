"""Binary insertion driven by pairwise preferences."""

from typing import Callable, List, Optional, Sequence, Tuple

from ..exceptions import DuplicateItemError, SorterStateError
from ..models import Item, RankedItem, ensure_unique, rerank
from .models import Comparison

# Returns True when the first (new) item is preferred over the second.
PreferenceOracle = Callable[[Item, Item], bool]


class BinaryInsertion:
    """
    Place one new item into a sequence ordered best first.

    The search window is the half-open range [low, high) of candidate
    insertion indices. Every step offers the item at the pivot for one
    comparison; the insertion is complete once the window is empty and
    ``low`` is the insertion index.
    """

    def __init__(self, sequence: Sequence[RankedItem], new_item: Item) -> None:
        """
        Start an insertion.

        Args:
            sequence: Current order, most preferred at index 0
            new_item: Item to place

        Raises:
            DuplicateItemError: If the new item's identity is already present
        """
        ensure_unique(sequence)
        if any(item.key == new_item.key for item in sequence):
            raise DuplicateItemError(
                f"{new_item.title!r} ({new_item.type.value} #{new_item.id}) is already in the list"
            )
        self.sequence = list(sequence)
        self.new_item = new_item
        self.low = 0
        self.high = len(self.sequence)
        self.comparisons = 0

    @property
    def done(self) -> bool:
        return self.low >= self.high

    @property
    def pivot(self) -> Optional[int]:
        """Index offered for the next comparison, None once done."""
        if self.done:
            return None
        return (self.low + self.high) // 2

    @property
    def pending(self) -> Optional[Comparison]:
        """The question awaiting an answer."""
        pivot = self.pivot
        if pivot is None:
            return None
        return Comparison(
            new_item=self.new_item,
            existing_item=self.sequence[pivot],
            pivot=pivot,
            low=self.low,
            high=self.high,
        )

    def answer(self, prefer_new: bool) -> None:
        """Narrow the window with the user's choice for the pending pivot."""
        pivot = self.pivot
        if pivot is None:
            raise SorterStateError("Insertion already complete; no comparison is pending")

        if prefer_new:
            # Better than the pivot: the slot is at or before it
            self.high = pivot
        else:
            self.low = pivot + 1
        self.comparisons += 1

    @property
    def position(self) -> int:
        """Insertion index once the window has closed."""
        if not self.done:
            raise SorterStateError(
                f"Insertion still pending: window [{self.low}, {self.high})"
            )
        return self.low

    def commit(self) -> List[RankedItem]:
        """Sequence with the new item inserted and every rank recomputed."""
        position = self.position
        placed = RankedItem.from_item(self.new_item, rank=0)
        updated = self.sequence[:position] + [placed] + self.sequence[position:]
        return rerank(updated)


def binary_insert(
    sequence: Sequence[RankedItem],
    new_item: Item,
    prefers: PreferenceOracle,
) -> Tuple[List[RankedItem], int]:
    """
    Run an insertion to completion against a preference oracle.

    Returns:
        Tuple of (updated sequence, comparisons used)
    """
    insertion = BinaryInsertion(sequence, new_item)
    while not insertion.done:
        insertion.answer(prefers(new_item, insertion.sequence[insertion.pivot]))
    return insertion.commit(), insertion.comparisons
