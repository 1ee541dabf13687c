"""
Filters

Filter descriptors and values, the emptiness predicate, per-record matching
and the combined search-and-filter engine.
"""

from caseview.filters.descriptor import (
    BooleanChoice,
    DateRange,
    FilterDescriptor,
    FilterKind,
    FilterOption,
)
from caseview.filters.emptiness import active_filter_count, has_active_filters, is_active
from caseview.filters.engine import FilterEngine, build_predicate, filter_records
from caseview.filters.matcher import matches_filter
from caseview.filters.summary import FilterChip, cleared_value, filter_chips

__all__ = [
    "BooleanChoice",
    "DateRange",
    "FilterChip",
    "FilterDescriptor",
    "FilterEngine",
    "FilterKind",
    "FilterOption",
    "active_filter_count",
    "build_predicate",
    "cleared_value",
    "filter_chips",
    "filter_records",
    "has_active_filters",
    "is_active",
    "matches_filter",
]
