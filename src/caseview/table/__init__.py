"""
Table

The per-screen engine facade that wires search, filters, sorting, pagination
and selection together, plus the column and view types it hands to the
presentation layer.
"""

from caseview.table.column import Column
from caseview.table.engine import TableEngine, default_identity
from caseview.table.view import TableView

__all__ = ["Column", "TableEngine", "TableView", "default_identity"]
