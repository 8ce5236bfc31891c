"""Event store and calendar grid services."""

from __future__ import annotations

from .calendar_grid import WEEKDAY_HEADERS, DayCell, MonthGrid, MonthRef, build_month_grid
from .context import ServiceContext
from .event_store import EventStore, StoreChange

__all__ = [
    "WEEKDAY_HEADERS",
    "DayCell",
    "EventStore",
    "MonthGrid",
    "MonthRef",
    "ServiceContext",
    "StoreChange",
    "build_month_grid",
]
