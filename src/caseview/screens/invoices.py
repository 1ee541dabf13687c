from datetime import date
from typing import Any

from caseview.filters.descriptor import BooleanChoice, FilterDescriptor, FilterKind, FilterOption
from caseview.records import get_field, to_timestamp
from caseview.screens.base import ScreenConfig
from caseview.sorting.sort import SortDirection, SortState
from caseview.table.column import Column

INVOICE_STATUSES = (
    FilterOption("draft", "Draft"),
    FilterOption("sent", "Sent"),
    FilterOption("paid", "Paid"),
    FilterOption("overdue", "Overdue"),
    FilterOption("cancelled", "Cancelled"),
)

SETTLED_STATUSES = {"paid", "cancelled"}


def today() -> date:
    return date.today()


def is_overdue(invoice: Any) -> bool:
    """Past its due date and neither paid nor cancelled."""
    if get_field(invoice, "status") in SETTLED_STATUSES:
        return False
    due = to_timestamp(get_field(invoice, "due_date"))
    if due is None:
        return False
    return due.date() < today()


def match_overdue(invoice: Any, choice: BooleanChoice) -> bool:
    return is_overdue(invoice) is choice.expected


def format_amount(value: Any, _invoice: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    try:
        return f"€ {float(value):,.2f}"
    except (TypeError, ValueError):
        return str(value)


INVOICES = ScreenConfig(
    name="invoices",
    title="Invoices",
    columns=(
        Column("invoice_number", "Invoice", sortable=True, searchable=True),
        Column("client_name", "Client", sortable=True, searchable=True),
        Column("status", "Status", sortable=True),
        Column("issue_date", "Issued", sortable=True),
        Column("due_date", "Due", sortable=True),
        Column("amount", "Amount", sortable=True, searchable=True, render=format_amount),
    ),
    filters=(
        FilterDescriptor("status", FilterKind.STATUS_SET, "Status", INVOICE_STATUSES),
        FilterDescriptor("issue_date", FilterKind.DATE_RANGE, "Issue date"),
        FilterDescriptor("overdue", FilterKind.BOOLEAN, "Overdue"),
    ),
    custom_predicates={"overdue": match_overdue},
    page_size=25,
    page_size_options=(10, 25, 50),
    default_sort=SortState("issue_date", SortDirection.DESCENDING),
)
