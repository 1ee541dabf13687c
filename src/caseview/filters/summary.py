"""
Active filter chips.

Turns the current filter state into short "Label: value" descriptions for the
row of removable chips shown above a list, and knows which value a removed
chip leaves behind.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from caseview.filters.descriptor import BooleanChoice, FilterDescriptor
from caseview.filters.emptiness import SEQUENCE_TYPES, is_active, is_blank, range_bounds


@dataclass(frozen=True)
class FilterChip:
    key: str
    label: str
    display: str

    def __str__(self) -> str:
        return f"{self.label}: {self.display}"


def display_value(descriptor: FilterDescriptor, value: Any) -> str:
    if isinstance(value, BooleanChoice):
        return "Yes" if value is BooleanChoice.TRUE else "No"

    if isinstance(value, SEQUENCE_TYPES):
        values = list(value)
        if len(values) == 1:
            return descriptor.option_label(values[0])
        return f"{len(values)} selected"

    bounds = range_bounds(value)
    if bounds is not None:
        start, end = bounds
        if not is_blank(start) and not is_blank(end):
            return f"{start} to {end}"
        if not is_blank(start):
            return f"from {start}"
        return f"until {end}"
    if isinstance(value, Mapping):
        return ", ".join(f"{name} {item}" for name, item in value.items() if not is_blank(item))

    if isinstance(value, bool):
        return "Yes" if value else "No"
    return descriptor.option_label(value)


def filter_chips(
    descriptors: Sequence[FilterDescriptor], filter_state: Mapping[str, Any]
) -> list[FilterChip]:
    """Chips for every active filter that has a descriptor, in descriptor order."""
    chips = []
    for descriptor in descriptors:
        value = filter_state.get(descriptor.key)
        if not is_active(value):
            continue
        chips.append(
            FilterChip(
                key=descriptor.key,
                label=descriptor.title,
                display=display_value(descriptor, value),
            )
        )
    return chips


def cleared_value(value: Any) -> Any:
    """The inactive value stored when a chip is removed."""
    if isinstance(value, SEQUENCE_TYPES):
        return ()
    if isinstance(value, BooleanChoice):
        return BooleanChoice.UNSET
    if range_bounds(value) is not None:
        return None
    return ""
