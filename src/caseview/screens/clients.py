from typing import Any

from caseview.filters.descriptor import FilterDescriptor, FilterKind, FilterOption
from caseview.records import get_field, is_missing
from caseview.screens.base import ScreenConfig
from caseview.sorting.sort import SortDirection, SortState
from caseview.table.column import Column

UNASSIGNED = "unassigned"

CLIENT_STATUSES = (
    FilterOption("new", "New"),
    FilterOption("active", "Active"),
    FilterOption("on_hold", "On hold"),
    FilterOption("inactive", "Inactive"),
    FilterOption("discharged", "Discharged"),
)


def match_therapist(client: Any, value: str) -> bool:
    """"unassigned" selects clients without a therapist, anything else an exact therapist id."""
    therapist_id = get_field(client, "assigned_therapist_id")
    if value == UNASSIGNED:
        return is_missing(therapist_id) or therapist_id == ""
    return not is_missing(therapist_id) and str(therapist_id) == str(value)


def match_listed_or_blank(field_name: str):
    """Membership test that treats a missing field as the empty string."""

    def predicate(client: Any, values) -> bool:
        value = get_field(client, field_name)
        return ("" if is_missing(value) else value) in values

    return predicate


CLIENTS = ScreenConfig(
    name="clients",
    title="Clients",
    columns=(
        Column("first_name", "First name", sortable=True, searchable=True),
        Column("last_name", "Last name", sortable=True, searchable=True),
        Column("email", "Email", searchable=True),
        Column("phone", "Phone", searchable=True),
        Column("status", "Status", sortable=True),
        Column("therapist_name", "Therapist", sortable=True),
        Column("insurance_company", "Insurance"),
        Column("total_sessions", "Sessions", sortable=True),
        Column("last_appointment", "Last appointment", sortable=True),
        Column("registration_date", "Registered", sortable=True),
    ),
    filters=(
        FilterDescriptor("status", FilterKind.STATUS_SET, "Client status", CLIENT_STATUSES),
        FilterDescriptor("assigned_therapist_id", FilterKind.SINGLE_SELECT, "Assigned therapist"),
        FilterDescriptor("insurance_company", FilterKind.MULTI_SELECT, "Insurance company"),
        FilterDescriptor("therapy_type", FilterKind.MULTI_SELECT, "Therapy type"),
        FilterDescriptor("registration_date", FilterKind.DATE_RANGE, "Registration date"),
        FilterDescriptor("intake_completed", FilterKind.BOOLEAN, "Intake completed"),
    ),
    custom_predicates={
        "assigned_therapist_id": match_therapist,
        "insurance_company": match_listed_or_blank("insurance_company"),
        "therapy_type": match_listed_or_blank("therapy_type"),
    },
    page_size=25,
    page_size_options=(10, 25, 50),
    default_sort=SortState("registration_date", SortDirection.DESCENDING),
    option_fields=("insurance_company", "therapy_type"),
)
