from collections.abc import Callable
from typing import Any

from caseview.filters.descriptor import BooleanChoice
from caseview.filters.emptiness import SEQUENCE_TYPES, is_active, is_blank, range_bounds
from caseview.records import get_field, is_missing, to_timestamp

Predicate = Callable[[Any, Any], bool]


def same_value(left: Any, right: Any) -> bool:
    """Equality without cross-type coercion ("1" != 1, True != 1)."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    if isinstance(left, str) != isinstance(right, str):
        return False
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return False


def in_range(field_value: Any, start: Any, end: Any) -> bool:
    """
    Inclusive date range test.

    A blank bound is unbounded on that side. A field value or bound that does
    not parse as a date never matches.
    """
    when = to_timestamp(field_value)
    if when is None:
        return False

    if not is_blank(start):
        lower = to_timestamp(start)
        if lower is None or when < lower:
            return False
    if not is_blank(end):
        upper = to_timestamp(end)
        if upper is None or when > upper:
            return False
    return True


def matches_filter(
    record: Any,
    key: str,
    value: Any,
    predicate: Predicate | None = None,
) -> bool:
    """
    Evaluate one record against one filter value.

    A caller-supplied predicate is authoritative for its key. Otherwise the
    rule is picked from the shape of the value: membership for sequences,
    inclusive date range for start/end values, truth value for BooleanChoice
    and strict equality for scalars. Inactive values always match.
    """
    if not is_active(value):
        return True
    if predicate is not None:
        return bool(predicate(record, value))

    field_value = get_field(record, key)

    if isinstance(value, BooleanChoice):
        if is_missing(field_value):
            return False
        return bool(field_value) is value.expected

    if isinstance(value, SEQUENCE_TYPES):
        if is_missing(field_value):
            return any(allowed is None for allowed in value)
        return any(same_value(field_value, allowed) for allowed in value)

    bounds = range_bounds(value)
    if bounds is not None:
        return in_range(field_value, *bounds)

    return same_value(field_value, value)
