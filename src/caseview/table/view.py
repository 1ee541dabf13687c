from dataclasses import dataclass, field

from caseview.filters.summary import FilterChip
from caseview.pagination.paginator import Page
from caseview.selection.tracker import SelectionSnapshot
from caseview.sorting.sort import SortState


@dataclass(frozen=True)
class TableView:
    """Everything a list screen needs to render after a state change."""

    page: Page
    total_count: int
    filtered_count: int
    active_filter_count: int
    sort: SortState
    search_query: str
    debounced_query: str
    selection: SelectionSnapshot
    chips: tuple[FilterChip, ...] = field(default=())
    page_window: tuple[int, ...] = field(default=())

    @property
    def total_pages(self) -> int:
        return self.page.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.page.items
