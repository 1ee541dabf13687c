#!/usr/bin/env python3
"""caseview CLI: browse list-screen exports from the terminal."""

import argparse
import logging
import sys

import questionary
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from caseview.config import config
from caseview.filters.descriptor import BooleanChoice, DateRange, FilterDescriptor, FilterKind
from caseview.logging_setup import setup_logging
from caseview.records import load_records
from caseview.screens import SCREENS, ScreenConfig, get_screen
from caseview.sorting.sort import SortDirection
from caseview.table.engine import TableEngine

console = Console()
logger = logging.getLogger(__name__)

TRUE_WORDS = {"yes", "y", "true", "1", "on"}
FALSE_WORDS = {"no", "n", "false", "0", "off"}


def parse_filter_value(descriptor: FilterDescriptor | None, raw: str):
    """
    Turn command-line text into a filter value for the descriptor's kind.

    Multi-value kinds take comma-separated values, date ranges take
    "start..end" with either side optional, booleans take yes/no.
    """
    raw = raw.strip()
    kind = descriptor.kind if descriptor else FilterKind.FREE_TEXT

    if kind in (FilterKind.MULTI_SELECT, FilterKind.STATUS_SET):
        return tuple(part.strip() for part in raw.split(",") if part.strip())
    if kind is FilterKind.DATE_RANGE:
        start, _, end = raw.partition("..")
        return DateRange(start.strip() or None, end.strip() or None)
    if kind is FilterKind.BOOLEAN:
        word = raw.lower()
        if word in TRUE_WORDS:
            return BooleanChoice.TRUE
        if word in FALSE_WORDS:
            return BooleanChoice.FALSE
        return BooleanChoice.UNSET
    return raw


def parse_sort(raw: str) -> tuple[str, SortDirection]:
    """"field" sorts ascending, "field:desc" descending."""
    field, _, direction = raw.partition(":")
    if direction.lower() in ("desc", "descending"):
        return field, SortDirection.DESCENDING
    return field, SortDirection.ASCENDING


def render_table(engine: TableEngine, screen: ScreenConfig) -> Table:
    """Render the visible page as a rich Table."""
    view = engine.view()
    table = Table(title=screen.title, show_lines=False)

    table.add_column("", width=1)
    for column in engine.columns:
        marker = ""
        if view.sort.field == column.key:
            marker = " ▲" if view.sort.direction is SortDirection.ASCENDING else " ▼"
        table.add_column(column.heading + marker)

    for record in view.page.items:
        checked = "✔" if engine.is_selected(engine.identity(record)) else ""
        table.add_row(checked, *(escape(column.cell_text(record)) for column in engine.columns))
    return table


def print_view(engine: TableEngine, screen: ScreenConfig) -> None:
    """Print the table followed by the paging, filter and selection summary."""
    view = engine.view()
    console.print(render_table(engine, screen))

    pages = " ".join(
        f"[bold]{n}[/]" if n == view.page.page_number else str(n) for n in view.page_window
    )
    console.print(f"{view.page.summary()}  [dim]pages:[/] {pages}")
    if view.active_filter_count:
        chips = escape("; ".join(str(chip) for chip in view.chips))
        console.print(f"[cyan]{view.active_filter_count} filter(s):[/] {chips}")
    if view.selection.count:
        console.print(f"[green]{view.selection.count} selected[/]")


def build_engine(args) -> tuple[ScreenConfig, TableEngine]:
    screen = get_screen(args.screen)
    records = load_records(args.records)
    logger.debug("Loaded %d records from %s", len(records), args.records)
    engine = screen.build_engine(records, debounce_ms=0)
    if args.page_size:
        engine.set_page_size(args.page_size)
    return screen, engine


def show(args) -> None:
    """Print one page of a screen with the given search, filters and sort."""
    screen, engine = build_engine(args)
    descriptors = {descriptor.key: descriptor for descriptor in engine.filters}

    if args.search:
        engine.set_search(args.search)
    for item in args.filter or []:
        key, sep, raw = item.partition("=")
        if not sep:
            raise ValueError(f"Filters take the form key=value, got {item!r}")
        engine.set_filter(key, parse_filter_value(descriptors.get(key), raw))
    if args.sort:
        engine.set_sort_state(*parse_sort(args.sort))
    if args.page:
        engine.set_page(args.page)

    view = engine.view()
    if view.is_empty:
        console.print("[yellow]No records found. Try adjusting your search or filter criteria.[/]")
        return
    print_view(engine, screen)


def choose_filter(engine: TableEngine) -> None:
    if not engine.filters:
        console.print("[dim]This screen has no filters.[/]")
        return
    descriptor = questionary.select(
        "Filter on:",
        choices=[questionary.Choice(title=d.title, value=d) for d in engine.filters],
    ).ask()
    if descriptor is None:
        return

    if descriptor.kind in (FilterKind.MULTI_SELECT, FilterKind.STATUS_SET) and descriptor.options:
        current = engine.filter_state.get(descriptor.key) or ()
        values = questionary.checkbox(
            f"{descriptor.title}:",
            choices=[
                questionary.Choice(
                    title=option.label if option.count is None else f"{option.label} ({option.count})",
                    value=option.value,
                    checked=option.value in current,
                )
                for option in descriptor.options
            ],
        ).ask()
        if values is not None:
            engine.set_filter(descriptor.key, tuple(values))
        return

    if descriptor.kind is FilterKind.SINGLE_SELECT and descriptor.options:
        value = questionary.select(
            f"{descriptor.title}:",
            choices=[questionary.Choice(title=f"All {descriptor.title}", value="")]
            + [questionary.Choice(title=o.label, value=o.value) for o in descriptor.options],
        ).ask()
        if value is not None:
            engine.set_filter(descriptor.key, value)
        return

    hint = {
        FilterKind.DATE_RANGE: " (start..end)",
        FilterKind.BOOLEAN: " (yes/no, empty for all)",
        FilterKind.MULTI_SELECT: " (comma separated)",
        FilterKind.STATUS_SET: " (comma separated)",
    }.get(descriptor.kind, "")
    raw = questionary.text(f"{descriptor.title}{hint}:").ask()
    if raw is not None:
        engine.set_filter(descriptor.key, parse_filter_value(descriptor, raw))


def choose_sort(engine: TableEngine) -> None:
    sortable = [column for column in engine.columns if column.sortable]
    column = questionary.select(
        "Sort by (repeat to cycle ascending, descending, off):",
        choices=[questionary.Choice(title=c.heading, value=c) for c in sortable],
    ).ask()
    if column is not None:
        engine.set_sort(column.key)


def choose_row(engine: TableEngine) -> None:
    page = engine.visible_page
    if not page.items:
        return
    record = questionary.select(
        "Toggle selection of:",
        choices=[
            questionary.Choice(
                title=" ".join(column.cell_text(record) for column in engine.columns[:3]),
                value=record,
            )
            for record in page.items
        ],
    ).ask()
    if record is not None:
        engine.toggle(engine.identity(record))


def browse(args) -> None:
    """Interactive list screen."""
    screen, engine = build_engine(args)

    while True:
        print_view(engine, screen)
        action = questionary.select(
            "Action:",
            choices=[
                "Search",
                "Filter",
                "Clear filters",
                "Sort",
                "Next page",
                "Previous page",
                "Go to page",
                "Page size",
                "Toggle row",
                "Toggle page",
                "Show selection",
                "Quit",
            ],
        ).ask()

        # User pressed Ctrl+C or Escape
        if action is None or action == "Quit":
            console.print("[dim]Bye.[/]")
            return

        if action == "Search":
            text = questionary.text("Search:", default=engine.search_query).ask()
            if text is not None:
                engine.set_search(text)
                engine.flush_search()
        elif action == "Filter":
            choose_filter(engine)
        elif action == "Clear filters":
            engine.clear_all()
        elif action == "Sort":
            choose_sort(engine)
        elif action == "Next page":
            engine.next_page()
        elif action == "Previous page":
            engine.previous_page()
        elif action == "Go to page":
            raw = questionary.text(f"Page (1-{engine.total_pages}):").ask()
            if raw and raw.strip().isdigit():
                engine.set_page(int(raw))
        elif action == "Page size":
            options = screen.page_size_options or config.page_size_options
            size = questionary.select(
                "Rows per page:",
                choices=[questionary.Choice(title=f"{n} per page", value=n) for n in options],
            ).ask()
            if size is not None:
                engine.set_page_size(size)
        elif action == "Toggle row":
            choose_row(engine)
        elif action == "Toggle page":
            engine.toggle_all()
        elif action == "Show selection":
            selected = engine.selected_records
            if not selected:
                console.print("[dim]Nothing selected.[/]")
            for record in selected:
                console.print(escape(" ".join(column.cell_text(record) for column in engine.columns[:3])))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="caseview CLI")
    parser.add_argument("--log-level", default=config.log_level, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (("browse", "Browse a screen interactively"), ("show", "Print one page")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("records", help="CSV, JSON or JSONL export of the records")
        sub.add_argument("--screen", default="clients", choices=sorted(SCREENS), help="Screen layout")
        sub.add_argument("--page-size", type=int, help="Rows per page")

    show_parser = subparsers.choices["show"]
    show_parser.add_argument("--search", help="Free-text search")
    show_parser.add_argument("--filter", action="append", metavar="KEY=VALUE", help="Filter (repeatable)")
    show_parser.add_argument("--sort", metavar="FIELD[:desc]", help="Sort column")
    show_parser.add_argument("--page", type=int, help="Page number")

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.command == "browse":
            browse(args)
        elif args.command == "show":
            show(args)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]{e}[/]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
