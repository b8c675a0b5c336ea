"""Sequential sorting of a batch of new items through pairwise comparisons."""

from typing import Iterable, List, Optional

from rich.console import Console

from ..exceptions import SorterStateError
from ..models import Item, RankedItem, by_rank, new_candidates, rerank
from .models import Comparison, SortProgress
from .sorter import BinaryInsertion

console = Console()


class BatchSorter:
    """Insert a queue of candidates one at a time into a sorted list."""

    def __init__(
        self,
        candidates: Iterable[Item],
        existing: Iterable[RankedItem] = (),
    ) -> None:
        """
        Initialize batch sorter.

        Args:
            candidates: Items to place, in the order they will be asked about
            existing: Already sorted items (any order; sorted best first here)
        """
        self.sorted_items: List[RankedItem] = by_rank(existing)
        queue = new_candidates(self.sorted_items, candidates)
        self.total = len(queue)
        self.sorted_count = 0

        # An empty list takes its first item without a question
        if not self.sorted_items and queue:
            self.sorted_items = rerank([queue.pop(0)])
            self.sorted_count = 1

        self._queue = queue
        self._completed_comparisons = 0
        self.current: Optional[BinaryInsertion] = None
        self._advance()

    def _advance(self) -> None:
        """Commit finished insertions and start the next pending one."""
        while True:
            if self.current is not None:
                if not self.current.done:
                    return
                self.sorted_items = self.current.commit()
                self._completed_comparisons += self.current.comparisons
                self.sorted_count += 1
                self.current = None

            if not self._queue:
                return
            self.current = BinaryInsertion(self.sorted_items, self._queue.pop(0))

    @property
    def done(self) -> bool:
        return self.current is None and not self._queue

    @property
    def pending(self) -> Optional[Comparison]:
        """Question for the user, None once every item is placed."""
        if self.current is None:
            return None
        return self.current.pending

    def answer(self, prefer_new: bool) -> None:
        """Answer the pending comparison and move on."""
        if self.current is None:
            raise SorterStateError("Batch sort complete; no comparison is pending")
        self.current.answer(prefer_new)
        self._advance()

    @property
    def comparison_count(self) -> int:
        in_flight = self.current.comparisons if self.current is not None else 0
        return self._completed_comparisons + in_flight

    @property
    def remaining(self) -> int:
        return len(self._queue) + (1 if self.current is not None else 0)

    @property
    def progress(self) -> SortProgress:
        return SortProgress(
            sorted_count=self.sorted_count,
            total=self.total,
            comparison_count=self.comparison_count,
            remaining=self.remaining,
        )

    @property
    def result(self) -> List[RankedItem]:
        """Current sorted list, most preferred first."""
        return list(self.sorted_items)


def print_sort_summary(sorter: BatchSorter) -> None:
    """Print batch sort summary."""
    progress = sorter.progress
    console.print("\n[bold]Sorting Summary:[/bold]")
    console.print(f"  Items placed: {progress.sorted_count}/{progress.total}")
    console.print(f"  Comparisons: {progress.comparison_count}")

    if sorter.done and sorter.sorted_items:
        console.print("\n[bold]Final Order:[/bold]")
        for position, item in enumerate(sorter.sorted_items, 1):
            console.print(f"{position}. [yellow]{item.title}[/yellow] (rank {item.rank})")
