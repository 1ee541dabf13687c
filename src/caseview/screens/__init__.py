"""
Screens

Column, search and filter configuration for the practice's list screens.
"""

from caseview.screens.base import ScreenConfig, options_from_records
from caseview.screens.clients import CLIENTS
from caseview.screens.invoices import INVOICES
from caseview.screens.therapists import THERAPISTS
from caseview.screens.waiting_list import WAITING_LIST

SCREENS = {screen.name: screen for screen in (CLIENTS, THERAPISTS, WAITING_LIST, INVOICES)}


def get_screen(name: str) -> ScreenConfig:
    """Look up a screen by name."""
    try:
        return SCREENS[name.lower().replace("-", "_")]
    except KeyError:
        raise ValueError(f"Unknown screen: {name}. Valid: {list(SCREENS.keys())}") from None


__all__ = [
    "CLIENTS",
    "INVOICES",
    "SCREENS",
    "THERAPISTS",
    "WAITING_LIST",
    "ScreenConfig",
    "get_screen",
    "options_from_records",
]
