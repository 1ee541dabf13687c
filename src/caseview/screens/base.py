from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from caseview.config import config
from caseview.filters.descriptor import FilterDescriptor, FilterOption
from caseview.filters.matcher import Predicate
from caseview.records import get_field, is_missing
from caseview.sorting.sort import SortState
from caseview.table.column import Column
from caseview.table.engine import TableEngine


@dataclass(frozen=True)
class ScreenConfig:
    """Static configuration of one list screen."""

    name: str
    title: str
    columns: tuple[Column, ...]
    search_fields: tuple[str, ...] = ()
    filters: tuple[FilterDescriptor, ...] = ()
    custom_predicates: Mapping[str, Predicate] = field(default_factory=dict)
    page_size: int | None = None
    page_size_options: tuple[int, ...] = ()
    default_sort: SortState | None = None
    option_fields: tuple[str, ...] = ()

    def descriptors_for(self, records: Iterable[Any]) -> tuple[FilterDescriptor, ...]:
        """
        Filter descriptors with options filled in from the records.

        Only filters named in option_fields and declared without options get
        derived options; every other descriptor is returned unchanged.
        """
        records = list(records)
        descriptors = []
        for descriptor in self.filters:
            if descriptor.key in self.option_fields and not descriptor.options:
                descriptor = FilterDescriptor(
                    key=descriptor.key,
                    kind=descriptor.kind,
                    label=descriptor.label,
                    options=options_from_records(records, descriptor.key),
                    clearable=descriptor.clearable,
                )
            descriptors.append(descriptor)
        return tuple(descriptors)

    def build_engine(self, records: Iterable[Any] = (), **overrides) -> TableEngine:
        """Create a TableEngine for this screen over a record snapshot."""
        records = list(records)
        options = {
            "columns": self.columns,
            "search_fields": self.search_fields or None,
            "filters": self.descriptors_for(records),
            "custom_predicates": self.custom_predicates,
            "page_size": self.page_size or config.default_page_size,
            "default_sort": self.default_sort,
        }
        options.update(overrides)
        return TableEngine(records, **options)


def options_from_records(records: Iterable[Any], field_name: str) -> tuple[FilterOption, ...]:
    """
    Distinct non-empty values of a field as filter options with counts.

    List-valued fields contribute each of their elements. Options keep the
    order in which values first appear.
    """
    counts: Counter = Counter()
    for record in records:
        value = get_field(record, field_name)
        values = value if isinstance(value, (list, tuple, set, frozenset)) else [value]
        for item in values:
            if is_missing(item) or item == "":
                continue
            counts[item] += 1
    return tuple(FilterOption(value=value, label=str(value), count=count) for value, count in counts.items())
