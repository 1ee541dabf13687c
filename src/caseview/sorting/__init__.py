"""
Sorting

Tri-state single-column sorting for list screens.
"""

from caseview.sorting.sort import (
    UNSORTED,
    SortDirection,
    SortState,
    next_sort_state,
    sort_key,
    sort_records,
)

__all__ = [
    "UNSORTED",
    "SortDirection",
    "SortState",
    "next_sort_state",
    "sort_key",
    "sort_records",
]
