"""
Row selection that survives paging, filtering and sorting.

Selection is held by record identity, not by row position. "Select all" is
scoped to the ids of the page on screen and never touches selections made on
other pages.
"""

import logging
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Listener = Callable[[tuple], None]


@dataclass(frozen=True)
class SelectionSnapshot:
    selected_ids: tuple
    all_selected_on_page: bool
    indeterminate: bool

    @property
    def count(self) -> int:
        return len(self.selected_ids)


class SelectionTracker:
    def __init__(self):
        # dict keeps selection order for bulk actions
        self._selected: dict[Hashable, None] = {}
        self._listeners: list[Listener] = []

    @property
    def selected_ids(self) -> tuple:
        return tuple(self._selected)

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, record_id: Hashable) -> bool:
        return record_id in self._selected

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with the selected ids after every change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def is_selected(self, record_id: Hashable) -> bool:
        return record_id in self._selected

    def select(self, record_id: Hashable) -> None:
        if record_id not in self._selected:
            self._selected[record_id] = None
            self._notify()

    def deselect(self, record_id: Hashable) -> None:
        if record_id in self._selected:
            del self._selected[record_id]
            self._notify()

    def toggle(self, record_id: Hashable) -> None:
        if record_id in self._selected:
            del self._selected[record_id]
        else:
            self._selected[record_id] = None
        self._notify()

    def toggle_all(self, page_ids: Iterable[Hashable]) -> None:
        """Deselect the page if it is fully selected, otherwise select all of it."""
        page_ids = list(page_ids)
        if not page_ids:
            return
        if self.all_selected(page_ids):
            for record_id in page_ids:
                self._selected.pop(record_id, None)
        else:
            for record_id in page_ids:
                self._selected.setdefault(record_id, None)
        self._notify()

    def clear(self) -> None:
        if self._selected:
            self._selected.clear()
            self._notify()

    def retain(self, existing_ids: Iterable[Hashable]) -> list:
        """
        Drop selected ids that are no longer in the source collection.

        Returns:
            The ids that were dropped
        """
        existing = set(existing_ids)
        dropped = [record_id for record_id in self._selected if record_id not in existing]
        if dropped:
            for record_id in dropped:
                del self._selected[record_id]
            logger.debug("Dropped %d stale selected id(s)", len(dropped))
            self._notify()
        return dropped

    def all_selected(self, page_ids: Iterable[Hashable]) -> bool:
        page_ids = list(page_ids)
        return bool(page_ids) and all(record_id in self._selected for record_id in page_ids)

    def indeterminate(self, page_ids: Iterable[Hashable]) -> bool:
        page_ids = list(page_ids)
        selected = sum(1 for record_id in page_ids if record_id in self._selected)
        return 0 < selected < len(page_ids)

    def snapshot(self, page_ids: Iterable[Hashable]) -> SelectionSnapshot:
        page_ids = list(page_ids)
        return SelectionSnapshot(
            selected_ids=self.selected_ids,
            all_selected_on_page=self.all_selected(page_ids),
            indeterminate=self.indeterminate(page_ids),
        )

    def _notify(self) -> None:
        selected = self.selected_ids
        for listener in list(self._listeners):
            listener(selected)
