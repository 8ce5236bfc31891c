from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from ..domain import Event

WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass(frozen=True, slots=True)
class MonthRef:
    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be within 1..12, got {self.month}")
        if not 1 <= self.year <= 9999:
            raise ValueError(f"year must be within 1..9999, got {self.year}")

    @classmethod
    def containing(cls, day: date) -> "MonthRef":
        return cls(day.year, day.month)

    def shift(self, months: int) -> "MonthRef":
        year, index = divmod(self.year * 12 + (self.month - 1) + months, 12)
        return MonthRef(year, index + 1)

    def previous(self) -> "MonthRef":
        return self.shift(-1)

    def next(self) -> "MonthRef":
        return self.shift(1)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def first_weekday(self) -> int:
        """Weekday of the 1st, counted from Sunday (0) to Saturday (6)."""

        return (self.first_day.weekday() + 1) % 7

    @property
    def label(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"


@dataclass(frozen=True, slots=True)
class DayCell:
    day: Optional[int] = None
    date: Optional[date] = None
    events: Tuple[Event, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.day is None


@dataclass(frozen=True, slots=True)
class MonthGrid:
    month: MonthRef
    cells: Tuple[DayCell, ...]

    @property
    def leading_blanks(self) -> int:
        return self.month.first_weekday

    def weeks(self) -> List[Tuple[DayCell, ...]]:
        """Cells chunked into Sunday-first rows; the final row is not padded."""

        return [self.cells[start : start + 7] for start in range(0, len(self.cells), 7)]

    def cell_for(self, day: int) -> DayCell:
        if not 1 <= day <= self.month.days_in_month:
            raise ValueError(f"{self.month.label} has no day {day}")
        return self.cells[self.leading_blanks + day - 1]


def build_month_grid(month: MonthRef, events: Iterable[Event]) -> MonthGrid:
    """Lay out ``month`` as leading blanks plus one cell per day with its events."""

    by_day: Dict[int, List[Event]] = {}
    for event in events:
        if event.date.year == month.year and event.date.month == month.month:
            by_day.setdefault(event.date.day, []).append(event)

    cells: List[DayCell] = [DayCell() for _ in range(month.first_weekday)]
    for day in range(1, month.days_in_month + 1):
        cells.append(
            DayCell(
                day=day,
                date=date(month.year, month.month, day),
                events=tuple(by_day.get(day, ())),
            )
        )
    return MonthGrid(month=month, cells=tuple(cells))
