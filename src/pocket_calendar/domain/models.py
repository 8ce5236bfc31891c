from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from .enums import EventCategory
from .errors import ValidationError

EDITABLE_FIELDS = ("title", "date", "category")


def coerce_title(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("title", "must be text")
    if not value.strip():
        raise ValidationError("title", "must not be empty")
    return value


def coerce_date(value: Any) -> date:
    """Accept a ``date`` or ``YYYY-MM-DD`` text; anything carrying a time is rejected."""

    if isinstance(value, datetime):
        raise ValidationError("date", "must not carry a time of day")
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValidationError("date", f"{value!r} is not a YYYY-MM-DD date") from exc
    raise ValidationError("date", f"unsupported value {value!r}")


def coerce_category(value: Any) -> EventCategory:
    if value is None:
        return EventCategory.WORK
    try:
        return EventCategory(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in EventCategory)
        raise ValidationError("category", f"{value!r} is not one of {allowed}") from exc


@dataclass(frozen=True, slots=True)
class EventDraft:
    title: str
    date: date
    category: EventCategory = EventCategory.WORK

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EventDraft":
        unknown = set(data) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(sorted(unknown)[0], "is not an event field")
        if "title" not in data:
            raise ValidationError("title", "is required")
        if "date" not in data:
            raise ValidationError("date", "is required")
        return cls(
            title=coerce_title(data["title"]),
            date=coerce_date(data["date"]),
            category=coerce_category(data.get("category")),
        )

    def validated(self) -> "EventDraft":
        return EventDraft(
            title=coerce_title(self.title),
            date=coerce_date(self.date),
            category=coerce_category(self.category),
        )


@dataclass(frozen=True, slots=True)
class Event:
    id: int
    title: str
    date: date
    category: EventCategory = EventCategory.WORK

    @classmethod
    def from_draft(cls, event_id: int, draft: EventDraft) -> "Event":
        return cls(id=event_id, title=draft.title, date=draft.date, category=draft.category)

    def merged(self, patch: Mapping[str, Any]) -> "Event":
        """Return a copy with ``patch`` applied; the id never changes."""

        if "id" in patch:
            raise ValidationError("id", "is assigned by the store and can not be changed")
        unknown = set(patch) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(sorted(unknown)[0], "is not an event field")
        return Event(
            id=self.id,
            title=coerce_title(patch["title"]) if "title" in patch else self.title,
            date=coerce_date(patch["date"]) if "date" in patch else self.date,
            category=coerce_category(patch["category"]) if "category" in patch else self.category,
        )


def category_filter(value: Optional[str]) -> Optional[EventCategory]:
    """Translate a filter choice into a category; ``None`` and ``"All"`` mean no filter."""

    if value is None or value == "All":
        return None
    return coerce_category(value)
