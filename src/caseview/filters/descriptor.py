from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FilterKind(str, Enum):
    SINGLE_SELECT = "single-select"
    MULTI_SELECT = "multi-select"
    STATUS_SET = "status-set"
    DATE_RANGE = "date-range"
    FREE_TEXT = "free-text"
    BOOLEAN = "boolean"


class BooleanChoice(str, Enum):
    """Tri-state value for boolean filters; UNSET means "show all"."""

    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @property
    def expected(self) -> bool | None:
        if self is BooleanChoice.UNSET:
            return None
        return self is BooleanChoice.TRUE


@dataclass(frozen=True)
class DateRange:
    """Inclusive date range; a missing bound leaves that side open."""

    start: Any = None
    end: Any = None


@dataclass(frozen=True)
class FilterOption:
    value: Any
    label: str
    count: int | None = None


@dataclass(frozen=True)
class FilterDescriptor:
    key: str
    kind: FilterKind
    label: str = ""
    options: tuple[FilterOption, ...] = field(default=())
    clearable: bool = True

    @property
    def title(self) -> str:
        return self.label or self.key.replace("_", " ").capitalize()

    def option_label(self, value: Any) -> str:
        """Label for an option value, falling back to the value itself."""
        for option in self.options:
            if option.value == value:
                return option.label
        return str(value)
