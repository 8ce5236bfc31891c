"""Domain models for the event calendar."""

from __future__ import annotations

from .enums import EventCategory
from .errors import CalendarError, NotFoundError, ValidationError
from .models import Event, EventDraft

__all__ = [
    "CalendarError",
    "Event",
    "EventCategory",
    "EventDraft",
    "NotFoundError",
    "ValidationError",
]
