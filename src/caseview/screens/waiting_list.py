from caseview.filters.descriptor import FilterDescriptor, FilterKind, FilterOption
from caseview.screens.base import ScreenConfig
from caseview.sorting.sort import SortDirection, SortState
from caseview.table.column import Column

WAITING_STATUSES = (
    FilterOption("new", "New"),
    FilterOption("viewed", "Viewed"),
    FilterOption("contacted", "Contacted"),
    FilterOption("scheduled", "Scheduled"),
)

URGENCY_LEVELS = (
    FilterOption("low", "Low"),
    FilterOption("normal", "Normal"),
    FilterOption("high", "High"),
    FilterOption("urgent", "Urgent"),
)


WAITING_LIST = ScreenConfig(
    name="waiting_list",
    title="Waiting list",
    columns=(
        Column("client_name", "Client", sortable=True, searchable=True),
        Column("email", "Email", searchable=True),
        Column("therapy_type", "Therapy type", sortable=True, searchable=True),
        Column("urgency", "Urgency", sortable=True),
        Column("status", "Status", sortable=True),
        Column("registration_date", "Registered", sortable=True),
        Column("days_waiting", "Days waiting", sortable=True),
    ),
    filters=(
        FilterDescriptor("status", FilterKind.SINGLE_SELECT, "Status", WAITING_STATUSES),
        FilterDescriptor("urgency", FilterKind.SINGLE_SELECT, "Urgency", URGENCY_LEVELS),
        FilterDescriptor("therapy_type", FilterKind.SINGLE_SELECT, "Therapy type"),
        FilterDescriptor("registration_date", FilterKind.DATE_RANGE, "Registration date"),
        FilterDescriptor("intake_completed", FilterKind.BOOLEAN, "Intake completed"),
    ),
    page_size=10,
    page_size_options=(10, 25, 50),
    default_sort=SortState("registration_date", SortDirection.ASCENDING),
    option_fields=("therapy_type",),
)
