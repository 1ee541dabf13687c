"""
Classifies filter values as active or cleared.

A cleared value is equivalent to the filter not being set at all. The same
predicate drives the badge count and lets the matcher skip filters that
cannot exclude anything.
"""

from collections.abc import Mapping
from numbers import Number
from typing import Any

from caseview.filters.descriptor import BooleanChoice, DateRange
from caseview.records import MISSING

SEQUENCE_TYPES = (list, tuple, set, frozenset)


def range_bounds(value: Any) -> tuple[Any, Any] | None:
    """Return (start, end) for range-shaped values, None for anything else."""
    if isinstance(value, DateRange):
        return value.start, value.end
    if isinstance(value, Mapping) and ("start" in value or "end" in value):
        return value.get("start"), value.get("end")
    return None


def is_blank(value: Any) -> bool:
    """True for None, MISSING and whitespace-only strings."""
    if value is None or value is MISSING:
        return True
    return isinstance(value, str) and not value.strip()


def is_active(value: Any) -> bool:
    if value is None or value is MISSING:
        return False
    if isinstance(value, BooleanChoice):
        return value is not BooleanChoice.UNSET
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, SEQUENCE_TYPES):
        return len(value) > 0

    bounds = range_bounds(value)
    if bounds is not None:
        return any(not is_blank(bound) for bound in bounds)
    if isinstance(value, Mapping):
        return any(not is_blank(item) for item in value.values())

    if isinstance(value, (bool, Number)):
        # False and 0 double as "unset" sentinels; use BooleanChoice for a real tri-state
        return bool(value)
    return True


def active_filter_count(filter_state: Mapping[str, Any]) -> int:
    """Number of active entries in a filter state."""
    return sum(1 for value in filter_state.values() if is_active(value))


def has_active_filters(filter_state: Mapping[str, Any]) -> bool:
    return any(is_active(value) for value in filter_state.values())
