"""Pairwise comparison sorting."""

from .batch import BatchSorter, print_sort_summary
from .models import Comparison, SortProgress
from .sorter import BinaryInsertion, PreferenceOracle, binary_insert

__all__ = [
    "BatchSorter",
    "BinaryInsertion",
    "Comparison",
    "PreferenceOracle",
    "SortProgress",
    "binary_insert",
    "print_sort_summary",
]
