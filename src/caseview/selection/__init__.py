"""
Selection

Identity-based row selection with page-scoped select-all.
"""

from caseview.selection.tracker import SelectionSnapshot, SelectionTracker

__all__ = ["SelectionSnapshot", "SelectionTracker"]
