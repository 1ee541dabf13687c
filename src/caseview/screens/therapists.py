from collections.abc import Mapping
from typing import Any

from caseview.filters.descriptor import FilterDescriptor, FilterKind, FilterOption
from caseview.records import get_field, is_missing
from caseview.screens.base import ScreenConfig
from caseview.table.column import Column

THERAPIST_STATUSES = (
    FilterOption("active", "Active"),
    FilterOption("inactive", "Inactive"),
    FilterOption("on_leave", "On leave"),
)


def match_specializations(therapist: Any, wanted) -> bool:
    """A therapist matches when they offer at least one of the wanted specializations."""
    offered = get_field(therapist, "specializations")
    if is_missing(offered):
        return False
    if isinstance(offered, str):
        offered = [part.strip() for part in offered.split(",")]
    return any(specialization in offered for specialization in wanted)


def match_client_count(therapist: Any, bounds: Mapping) -> bool:
    """Inclusive {min, max} caseload bounds; either bound may be left empty."""
    count = get_field(therapist, "client_count")
    if is_missing(count) or isinstance(count, bool):
        return False
    try:
        count = int(count)
        low = bounds.get("min")
        high = bounds.get("max")
        if low not in (None, "") and count < int(low):
            return False
        if high not in (None, "") and count > int(high):
            return False
    except (TypeError, ValueError):
        return False
    return True


THERAPISTS = ScreenConfig(
    name="therapists",
    title="Therapists",
    columns=(
        Column("first_name", "First name", sortable=True, searchable=True),
        Column("last_name", "Last name", sortable=True, searchable=True),
        Column("email", "Email", searchable=True),
        Column("status", "Status", sortable=True),
        Column(
            "specializations",
            "Specializations",
            render=lambda value, _: ", ".join(value) if isinstance(value, (list, tuple)) else (value or ""),
        ),
        Column("accepting_clients", "Accepting", sortable=True),
        Column("client_count", "Clients", sortable=True),
    ),
    filters=(
        FilterDescriptor("status", FilterKind.STATUS_SET, "Status", THERAPIST_STATUSES),
        FilterDescriptor("specializations", FilterKind.MULTI_SELECT, "Specializations"),
        FilterDescriptor("accepting_clients", FilterKind.BOOLEAN, "Accepting new clients"),
        FilterDescriptor("client_count", FilterKind.FREE_TEXT, "Client count"),
    ),
    custom_predicates={
        "specializations": match_specializations,
        "client_count": match_client_count,
    },
    page_size=10,
    page_size_options=(5, 10, 25),
    option_fields=("specializations",),
)
