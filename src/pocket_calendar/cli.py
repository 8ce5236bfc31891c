from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from datetime import date
from typing import Iterable, List, Optional

from .bootstrap import configure_logging
from .config import get_settings
from .domain import CalendarError, Event, EventCategory
from .services import WEEKDAY_HEADERS, MonthGrid, MonthRef, ServiceContext, build_month_grid

_CATEGORY_CHOICES = [member.value for member in EventCategory]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pocket Calendar command line interface.")
    parser.add_argument("--log-level", default=None, help="Override the configured log level.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List events, optionally filtered by category.")
    list_parser.add_argument("--category", choices=["All", *_CATEGORY_CHOICES], default="All")

    add_parser = subparsers.add_parser("add", help="Add a new event.")
    add_parser.add_argument("title")
    add_parser.add_argument("--date", required=True, help="Event day as YYYY-MM-DD.")
    add_parser.add_argument("--category", choices=_CATEGORY_CHOICES, default=EventCategory.WORK.value)

    edit_parser = subparsers.add_parser("edit", help="Change fields of an existing event.")
    edit_parser.add_argument("event_id", type=int)
    edit_parser.add_argument("--title")
    edit_parser.add_argument("--date", help="New day as YYYY-MM-DD.")
    edit_parser.add_argument("--category", choices=_CATEGORY_CHOICES)

    delete_parser = subparsers.add_parser("delete", help="Delete an event.")
    delete_parser.add_argument("event_id", type=int)
    delete_parser.add_argument("--missing-ok", action="store_true", help="Do not fail when the event is absent.")

    month_parser = subparsers.add_parser("month", help="Show a month grid with its events.")
    month_parser.add_argument("--year", type=int)
    month_parser.add_argument("--month", type=int)
    month_parser.add_argument("--offset", type=int, default=0, help="Months to move forward (or back when negative).")

    return parser


def format_event(event: Event) -> str:
    return f"{event.id}  {event.date.isoformat()}  {event.category.value:<8}  {event.title}"


def format_events(events: Iterable[Event]) -> str:
    lines = [format_event(event) for event in events]
    return "\n".join(lines) if lines else "No events."


def render_month(grid: MonthGrid) -> str:
    lines = [grid.month.label, " ".join(f"{header:>4}" for header in WEEKDAY_HEADERS)]
    for week in grid.weeks():
        row = []
        for cell in week:
            if cell.is_empty:
                row.append("    ")
            else:
                label = f"{'*' if cell.events else ''}{cell.day}"
                row.append(f"{label:>4}")
        lines.append(" ".join(row).rstrip())
    for cell in grid.cells:
        for event in cell.events:
            lines.append(f"{cell.day:>2}: {event.title} ({event.category.value})")
    return "\n".join(lines)


def _resolve_month(args: argparse.Namespace) -> MonthRef:
    today = MonthRef.containing(date.today())
    year = today.year if args.year is None else args.year
    month = today.month if args.month is None else args.month
    target = MonthRef(year, month)
    return target.shift(args.offset)


def run(args: argparse.Namespace, context: ServiceContext) -> str:
    store = context.events
    if args.command == "list":
        return format_events(store.filter(args.category))
    if args.command == "add":
        event = store.add({"title": args.title, "date": args.date, "category": args.category})
        return f"Added {format_event(event)}"
    if args.command == "edit":
        patch = {
            name: value
            for name, value in (("title", args.title), ("date", args.date), ("category", args.category))
            if value is not None
        }
        event = store.update(args.event_id, patch)
        return f"Updated {format_event(event)}"
    if args.command == "delete":
        store.remove(args.event_id, missing_ok=args.missing_ok)
        return f"Deleted {args.event_id}"
    if args.command == "month":
        return render_month(build_month_grid(_resolve_month(args), store.list()))
    raise ValueError(f"Unknown command {args.command!r}")  # pragma: no cover - argparse enforces choices


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    logging_settings = settings.logging
    if args.log_level:
        logging_settings = replace(logging_settings, level=args.log_level.upper())
    configure_logging(logging_settings)
    logger = logging.getLogger(__name__)
    logger.info("Pocket Calendar CLI running %s", args.command)

    try:
        context = ServiceContext(settings=settings)
        output = run(args, context)
    except (CalendarError, ValueError) as exc:
        logger.warning("Command %s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
