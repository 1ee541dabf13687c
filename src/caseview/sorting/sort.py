"""
Single-column sorting with a tri-state column toggle.

Values of one column can be of mixed types in practice (a missing date next
to an ISO string next to a datetime). The sort key maps every value into one
total order so sorting never raises:

    missing < numbers < dates < strings < anything else (by str())
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, Iterable

import pandas as pd

from caseview.records import get_field, is_missing, to_timestamp


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"
    NONE = "none"


@dataclass(frozen=True)
class SortState:
    field: str | None = None
    direction: SortDirection = SortDirection.NONE

    @property
    def is_sorted(self) -> bool:
        return self.field is not None and self.direction is not SortDirection.NONE


UNSORTED = SortState()


def next_sort_state(current: SortState, field: str) -> SortState:
    """
    Column header click.

    The same column cycles none -> ascending -> descending -> none; another
    column always starts at ascending.
    """
    if current.field != field:
        return SortState(field, SortDirection.ASCENDING)
    if current.direction is SortDirection.ASCENDING:
        return SortState(field, SortDirection.DESCENDING)
    if current.direction is SortDirection.DESCENDING:
        return UNSORTED
    return SortState(field, SortDirection.ASCENDING)


def sort_key(value: Any) -> tuple:
    if is_missing(value):
        return (0,)
    if isinstance(value, bool):
        return (1, int(value))
    if isinstance(value, (Real, Decimal)):
        return (1, value)
    if isinstance(value, (date, datetime, pd.Timestamp)):
        ts = to_timestamp(value)
        if ts is not None:
            return (2, ts)
    if isinstance(value, str):
        return (3, value)
    return (4, str(value))


def sort_records(records: Iterable[Any], sort_state: SortState) -> list:
    """Return a new, stably sorted list; unsorted state keeps the input order."""
    records = list(records)
    if not sort_state.is_sorted:
        return records

    field = sort_state.field
    return sorted(
        records,
        key=lambda record: sort_key(get_field(record, field)),
        reverse=sort_state.direction is SortDirection.DESCENDING,
    )
