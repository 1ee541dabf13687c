"""
Search

Free-text matching over a configured field set and the debounced query state
that feeds it.
"""

from caseview.search.matcher import matches_search, searchable_text
from caseview.search.state import SearchState

__all__ = ["SearchState", "matches_search", "searchable_text"]
