"""
Pagination

Fixed-size page slicing and the page metadata a pager needs.
"""

from caseview.pagination.paginator import Page, clamp_page, page_window, paginate, total_pages_for

__all__ = ["Page", "clamp_page", "page_window", "paginate", "total_pages_for"]
