import math
from dataclasses import dataclass, field
from typing import Any, Sequence


@dataclass(frozen=True)
class Page:
    items: list = field(default_factory=list)
    page_number: int = 1
    page_size: int = 10
    total_items: int = 0
    total_pages: int = 1
    start_index: int = 0
    end_index: int = 0

    @property
    def first_item(self) -> int:
        """1-based position of the first row shown, 0 when the page is empty."""
        return self.start_index + 1 if self.items else 0

    @property
    def last_item(self) -> int:
        return self.end_index if self.items else 0

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    def summary(self) -> str:
        return f"Showing {self.first_item} to {self.last_item} of {self.total_items} results"


def total_pages_for(total_items: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"Page size must be >= 1, got {page_size}")
    return max(1, math.ceil(total_items / page_size))


def clamp_page(page_number: int, total_pages: int) -> int:
    """Pull a page number back into [1, max(1, total_pages)]."""
    return min(max(1, page_number), max(1, total_pages))


def paginate(records: Sequence[Any], page_number: int, page_size: int) -> Page:
    """
    Slice one page out of an already filtered and sorted sequence.

    The page number is not clamped: a page past the end is returned empty.
    Keeping the page in range is the caller's job.

    Raises:
        ValueError: If page_number or page_size is below 1
    """
    if page_number < 1:
        raise ValueError(f"Page number must be >= 1, got {page_number}")
    total_pages = total_pages_for(len(records), page_size)

    start_index = (page_number - 1) * page_size
    items = list(records[start_index : start_index + page_size])

    return Page(
        items=items,
        page_number=page_number,
        page_size=page_size,
        total_items=len(records),
        total_pages=total_pages,
        start_index=start_index,
        end_index=start_index + len(items),
    )


def page_window(current: int, total_pages: int, size: int = 5) -> list[int]:
    """
    Page numbers for the numbered buttons of a pager.

    Starts at 1 while the current page is within the first half of the window,
    then keeps the current page centred; never runs past the last page.
    """
    size = max(1, size)
    half = size // 2
    first = 1 if current <= half + 1 else current - half
    return [page for page in range(first, first + min(size, total_pages)) if page <= total_pages]
