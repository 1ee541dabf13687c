"""
The list-screen engine.

TableEngine owns the interaction state of one list screen (search text,
filter values, sort column, page and selection) and derives the visible page
from a snapshot of records:

    records -> search AND filters -> sort -> paginate -> TableView

Derived views are always recomputed from the full record snapshot. The last
result is reused while nothing it depends on has changed; every mutation that
could change the result set bumps a revision counter instead of patching the
cached lists.
"""

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from caseview.config import config
from caseview.filters.descriptor import FilterDescriptor
from caseview.filters.emptiness import active_filter_count, has_active_filters
from caseview.filters.engine import FilterEngine
from caseview.filters.matcher import Predicate
from caseview.filters.summary import FilterChip, cleared_value, filter_chips
from caseview.pagination.paginator import Page, clamp_page, page_window, paginate, total_pages_for
from caseview.records import get_field, is_missing
from caseview.search.state import Clock, SearchState
from caseview.selection.tracker import SelectionSnapshot, SelectionTracker
from caseview.sorting.sort import UNSORTED, SortDirection, SortState, next_sort_state, sort_records
from caseview.table.column import Column
from caseview.table.view import TableView

logger = logging.getLogger(__name__)

Identity = Callable[[Any], Hashable]
Listener = Callable[[TableView], None]


def default_identity(record: Any) -> Hashable:
    """The record's "id" field, or the object itself when it has none."""
    record_id = get_field(record, "id")
    if is_missing(record_id) or not isinstance(record_id, Hashable):
        return id(record)
    return record_id


class TableEngine:
    def __init__(
        self,
        records: Iterable[Any] = (),
        *,
        columns: Sequence[Column] = (),
        search_fields: Sequence[str] | None = None,
        filters: Sequence[FilterDescriptor] = (),
        custom_predicates: Mapping[str, Predicate] | None = None,
        page_size: int | None = None,
        paginated: bool = True,
        default_sort: SortState | None = None,
        identity: Identity | None = None,
        debounce_ms: int | None = None,
        clock: Clock | None = None,
        window_size: int | None = None,
        on_selection_change: Callable[[list], None] | None = None,
    ):
        self.columns = tuple(columns)
        if search_fields is None:
            search_fields = [column.key for column in self.columns if column.searchable]
        self.filter_engine = FilterEngine(search_fields, filters, custom_predicates)
        self.identity = identity or default_identity
        self.paginated = paginated
        self.window_size = window_size or config.page_window

        page_size = config.default_page_size if page_size is None else page_size
        if page_size < 1:
            raise ValueError(f"Page size must be >= 1, got {page_size}")
        self._page_size = page_size
        self._page_number = 1

        window_ms = config.search_debounce_ms if debounce_ms is None else debounce_ms
        self._search = SearchState(window_ms=window_ms, clock=clock)
        self._filter_state: dict[str, Any] = {}
        self._sort = default_sort or UNSORTED
        self._selection = SelectionTracker()

        self._records: list = list(records)
        self._revision = 0
        self._cache_key: tuple | None = None
        self._ordered: list = []
        self._filtered_count = 0
        # set when a read settles the search before tick() gets to announce it
        self._settled_unannounced = False

        self._listeners: list[Listener] = []
        if on_selection_change is not None:
            self._selection.subscribe(lambda _ids: on_selection_change(self.selected_records))

    # =========================================================================
    # Source collection
    # =========================================================================

    @property
    def records(self) -> list:
        return list(self._records)

    def set_records(self, records: Iterable[Any]) -> None:
        """Replace the record snapshot; stale selections are dropped and the page clamped."""
        self._records = list(records)
        self._revision += 1
        self._selection.retain(self.identity(record) for record in self._records)
        self._changed()

    # =========================================================================
    # Search
    # =========================================================================

    @property
    def search_query(self) -> str:
        return self._search.raw_query

    @property
    def debounced_query(self) -> str:
        self._sync()
        return self._search.debounced_query

    @property
    def search_pending(self) -> bool:
        return self._search.pending

    def set_search(self, text: str) -> None:
        self._search.set_raw(text)
        self._page_number = 1
        self._changed()

    def flush_search(self) -> None:
        """Apply a pending search query without waiting for the debounce window."""
        if self._search.flush():
            self._page_number = 1
            self._settled_unannounced = True
        if self._settled_unannounced:
            self._changed()

    def tick(self) -> bool:
        """
        Let a pending search settle; call this from the consumer's event loop.

        A query that already settled while a derived property was being read
        is announced here as well.

        Returns:
            True if the debounced query changed and subscribers were notified
        """
        self._sync()
        if not self._settled_unannounced:
            return False
        self._changed()
        return True

    # =========================================================================
    # Filters
    # =========================================================================

    @property
    def filter_state(self) -> Mapping[str, Any]:
        return MappingProxyType(self._filter_state)

    @property
    def filters(self) -> tuple[FilterDescriptor, ...]:
        return self.filter_engine.descriptors

    def set_filter(self, key: str, value: Any) -> None:
        self._filter_state[key] = value
        self._filters_changed()

    def clear_filter(self, key: str) -> None:
        """Reset one filter to its inactive value, as removing its chip does."""
        if key not in self._filter_state:
            return
        self._filter_state[key] = cleared_value(self._filter_state[key])
        self._filters_changed()

    def clear_filters(self) -> None:
        self._filter_state = {}
        self._filters_changed()

    def clear_all(self) -> None:
        """Clear filters and search, applying the empty search immediately."""
        self._search.reset()
        self.clear_filters()

    @property
    def active_filter_count(self) -> int:
        return active_filter_count(self._filter_state)

    @property
    def has_active_filters(self) -> bool:
        return has_active_filters(self._filter_state)

    @property
    def filter_chips(self) -> list[FilterChip]:
        return filter_chips(self.filter_engine.descriptors, self._filter_state)

    # =========================================================================
    # Sorting
    # =========================================================================

    @property
    def sort_state(self) -> SortState:
        return self._sort

    def is_sortable(self, field: str) -> bool:
        if not self.columns:
            return True
        return any(column.key == field and column.sortable for column in self.columns)

    def set_sort(self, field: str) -> None:
        """Column header click: cycles the column through ascending, descending, unsorted."""
        if not self.is_sortable(field):
            logger.debug("Ignoring sort request for non-sortable column %r", field)
            return
        self._sort = next_sort_state(self._sort, field)
        self._changed()

    def set_sort_state(self, field: str | None, direction: SortDirection) -> None:
        if field is None or direction is SortDirection.NONE:
            self._sort = UNSORTED
        elif not self.is_sortable(field):
            logger.debug("Ignoring sort request for non-sortable column %r", field)
            return
        else:
            self._sort = SortState(field, direction)
        self._changed()

    # =========================================================================
    # Pagination
    # =========================================================================

    @property
    def page_number(self) -> int:
        self._derive()
        return self._page_number

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        self._derive()
        return self._total_pages()

    def set_page(self, page_number: int) -> None:
        self._derive()
        target = clamp_page(page_number, self._total_pages())
        if target != page_number:
            logger.debug("Clamped page %d to %d", page_number, target)
        self._page_number = target
        self._changed()

    def next_page(self) -> None:
        self.set_page(self.page_number + 1)

    def previous_page(self) -> None:
        self.set_page(self.page_number - 1)

    def set_page_size(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"Page size must be >= 1, got {page_size}")
        self._page_size = page_size
        self._page_number = 1
        self._changed()

    @property
    def page_window(self) -> list[int]:
        return page_window(self.page_number, self.total_pages, self.window_size)

    # =========================================================================
    # Derived views
    # =========================================================================

    @property
    def filtered_count(self) -> int:
        self._derive()
        return self._filtered_count

    @property
    def filtered_records(self) -> list:
        """All records passing search and filters, in display order."""
        self._derive()
        return list(self._ordered)

    @property
    def visible_page(self) -> Page:
        self._derive()
        if not self.paginated:
            return paginate(self._ordered, 1, max(1, len(self._ordered)))
        return paginate(self._ordered, self._page_number, self._page_size)

    def page_ids(self) -> list:
        return [self.identity(record) for record in self.visible_page.items]

    # =========================================================================
    # Selection
    # =========================================================================

    def is_selected(self, record_id: Hashable) -> bool:
        return self._selection.is_selected(record_id)

    def toggle(self, record_id: Hashable) -> None:
        """Toggle one row; ids that match no record in the snapshot are ignored."""
        if not any(self.identity(record) == record_id for record in self._records):
            logger.debug("Ignoring toggle of unknown record id %r", record_id)
            return
        self._selection.toggle(record_id)
        self._changed()

    def toggle_all(self) -> None:
        """Select or deselect every row on the visible page."""
        self._selection.toggle_all(self.page_ids())
        self._changed()

    def clear_selection(self) -> None:
        self._selection.clear()
        self._changed()

    @property
    def selection(self) -> SelectionSnapshot:
        return self._selection.snapshot(self.page_ids())

    @property
    def selected_records(self) -> list:
        """Selected records from the source snapshot, in selection order."""
        by_id = {self.identity(record): record for record in self._records}
        return [by_id[record_id] for record_id in self._selection.selected_ids if record_id in by_id]

    # =========================================================================
    # Consumer interface
    # =========================================================================

    def view(self) -> TableView:
        page = self.visible_page
        page_ids = [self.identity(record) for record in page.items]
        return TableView(
            page=page,
            total_count=len(self._records),
            filtered_count=self._filtered_count,
            active_filter_count=self.active_filter_count,
            sort=self._sort,
            search_query=self._search.raw_query,
            debounced_query=self._search.debounced_query,
            selection=self._selection.snapshot(page_ids),
            chips=tuple(self.filter_chips),
            page_window=tuple(page_window(page.page_number, page.total_pages, self.window_size)),
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Deliver a fresh TableView after every state change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # =========================================================================
    # Internals
    # =========================================================================

    def _total_pages(self) -> int:
        if not self.paginated:
            return 1
        return total_pages_for(self._filtered_count, self._page_size)

    def _sync(self) -> bool:
        if self._search.poll():
            self._page_number = 1
            self._settled_unannounced = True
            return True
        return False

    def _derive(self) -> None:
        self._sync()
        key = (self._revision, self._search.debounced_query, self._sort)
        if key != self._cache_key:
            filtered = self.filter_engine.filter(
                self._records, self._search.debounced_query, self._filter_state
            )
            self._ordered = sort_records(filtered, self._sort)
            self._filtered_count = len(filtered)
            self._cache_key = key
            logger.debug(
                "Recomputed view: %d of %d records match", self._filtered_count, len(self._records)
            )

        total_pages = self._total_pages()
        if self._page_number > total_pages:
            logger.debug("Page %d out of range, clamping to %d", self._page_number, total_pages)
            self._page_number = total_pages

    def _filters_changed(self) -> None:
        self._revision += 1
        self._page_number = 1
        self._changed()

    def _changed(self) -> None:
        self._derive()
        self._settled_unannounced = False
        if not self._listeners:
            return
        snapshot = self.view()
        for listener in list(self._listeners):
            listener(snapshot)
