from collections.abc import Iterable
from decimal import Decimal
from numbers import Integral, Real
from typing import Any

from caseview.records import get_field


def searchable_text(value: Any) -> str | None:
    """
    Text a field contributes to free-text search.

    Strings are used as-is and numbers through their decimal rendering
    (25.0 renders as "25"). Booleans and every other type are not searchable.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Decimal):
        return str(value) if value.is_finite() else None
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    if isinstance(value, Integral):
        return str(int(value))
    number = float(value)
    if number != number:
        return None
    if number.is_integer():
        return str(int(number))
    return repr(number)


def matches_search(record: Any, fields: Iterable[str], query: str) -> bool:
    """True when any of the fields contains the query, ignoring case."""
    if not (query or "").strip():
        return True
    needle = query.lower()

    for field in fields:
        text = searchable_text(get_field(record, field))
        if text is not None and needle in text.lower():
            return True
    return False
