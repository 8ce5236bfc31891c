from __future__ import annotations

import datetime as dt
from typing import Iterable, List

import orjson
from pydantic import BaseModel, Field, TypeAdapter, field_validator

from ..domain import Event, EventCategory
from ..domain.models import coerce_title


class EventRecord(BaseModel):
    """Shape of one event inside the persisted list."""

    id: int
    title: str
    date: dt.date
    category: EventCategory = Field(default=EventCategory.WORK)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        return coerce_title(value)

    @classmethod
    def from_domain(cls, event: Event) -> "EventRecord":
        return cls(id=event.id, title=event.title, date=event.date, category=event.category)

    def to_domain(self) -> Event:
        return Event(id=self.id, title=self.title, date=self.date, category=self.category)


_RECORDS = TypeAdapter(List[EventRecord])


def dump_events(events: Iterable[Event]) -> str:
    payload = [EventRecord.from_domain(event).model_dump(mode="json") for event in events]
    return orjson.dumps(payload).decode("utf-8")


def load_events(text: str) -> List[Event]:
    """Parse a serialized event list.

    Raises ``orjson.JSONDecodeError`` or ``pydantic.ValidationError`` (both
    ``ValueError`` subclasses) when the text is not a valid event list, including
    any record with a blank title.
    """

    records = _RECORDS.validate_python(orjson.loads(text))
    return [record.to_domain() for record in records]
