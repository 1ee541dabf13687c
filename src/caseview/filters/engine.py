from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from caseview.filters.descriptor import FilterDescriptor
from caseview.filters.emptiness import is_active
from caseview.filters.matcher import Predicate, matches_filter
from caseview.search.matcher import matches_search


def build_predicate(
    search_fields: Sequence[str],
    search_query: str,
    filter_state: Mapping[str, Any],
    custom_predicates: Mapping[str, Predicate] | None = None,
) -> Callable[[Any], bool]:
    """Combine search and every active filter into one record predicate (logical AND)."""
    custom_predicates = custom_predicates or {}
    active = [(key, value) for key, value in filter_state.items() if is_active(value)]
    fields = tuple(search_fields)

    def predicate(record: Any) -> bool:
        if not matches_search(record, fields, search_query):
            return False
        return all(
            matches_filter(record, key, value, custom_predicates.get(key))
            for key, value in active
        )

    return predicate


def filter_records(
    records: Iterable[Any],
    search_fields: Sequence[str],
    search_query: str,
    filter_state: Mapping[str, Any],
    custom_predicates: Mapping[str, Predicate] | None = None,
) -> list:
    """Return the records passing search and filters, in their original order."""
    predicate = build_predicate(search_fields, search_query, filter_state, custom_predicates)
    return [record for record in records if predicate(record)]


class FilterEngine:
    """Per-screen filter configuration: search fields, descriptors and predicate overrides."""

    def __init__(
        self,
        search_fields: Sequence[str] = (),
        descriptors: Sequence[FilterDescriptor] = (),
        custom_predicates: Mapping[str, Predicate] | None = None,
    ):
        self.search_fields = tuple(search_fields)
        self.descriptors = tuple(descriptors)
        self.custom_predicates = dict(custom_predicates or {})

    def descriptor(self, key: str) -> FilterDescriptor | None:
        for descriptor in self.descriptors:
            if descriptor.key == key:
                return descriptor
        return None

    def predicate(self, search_query: str, filter_state: Mapping[str, Any]) -> Callable[[Any], bool]:
        return build_predicate(
            self.search_fields, search_query, filter_state, self.custom_predicates
        )

    def filter(self, records: Iterable[Any], search_query: str, filter_state: Mapping[str, Any]) -> list:
        return filter_records(
            records, self.search_fields, search_query, filter_state, self.custom_predicates
        )
