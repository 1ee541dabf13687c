from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from caseview.records import get_field, is_missing


@dataclass(frozen=True)
class Column:
    key: str
    title: str = ""
    sortable: bool = False
    searchable: bool = False
    render: Callable[[Any, Any], str] | None = None

    @property
    def heading(self) -> str:
        return self.title or self.key.replace("_", " ").capitalize()

    def cell_text(self, record: Any) -> str:
        """Text for this column's cell; missing values render as an empty string."""
        value = get_field(record, self.key)
        if self.render is not None:
            return self.render(value, record)
        if is_missing(value):
            return ""
        return str(value)
