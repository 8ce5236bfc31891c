from __future__ import annotations

from typing import Any


class CalendarError(Exception):
    """Base class for errors raised by the event store."""


class NotFoundError(CalendarError, KeyError):
    def __init__(self, event_id: Any) -> None:
        super().__init__(event_id)
        self.event_id = event_id

    def __str__(self) -> str:
        return f"Event {self.event_id} not found."


class ValidationError(CalendarError, ValueError):
    def __init__(self, field: str, reason: str) -> None:
        super().__init__(field, reason)
        self.field = field
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid {self.field}: {self.reason}"
