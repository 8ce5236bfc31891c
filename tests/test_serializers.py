from datetime import date

import orjson
import pydantic
import pytest

from pocket_calendar.data import dump_events, load_events
from pocket_calendar.domain import Event, EventCategory


def test_dump_uses_plain_records():
    event = Event(id=1707955200000, title="Standup", date=date(2024, 2, 15), category=EventCategory.WORK)
    assert orjson.loads(dump_events([event])) == [
        {"id": 1707955200000, "title": "Standup", "date": "2024-02-15", "category": "Work"}
    ]


def test_load_restores_order_and_values():
    events = [
        Event(id=2, title="b", date=date(2024, 1, 31), category=EventCategory.PERSONAL),
        Event(id=1, title="a", date=date(2023, 12, 1)),
    ]
    assert load_events(dump_events(events)) == events


def test_load_accepts_records_written_without_category():
    restored = load_events('[{"id": 7, "title": "Gym", "date": "2024-02-01"}]')
    assert restored == [Event(id=7, title="Gym", date=date(2024, 2, 1), category=EventCategory.WORK)]


def test_load_rejects_malformed_text():
    with pytest.raises(orjson.JSONDecodeError):
        load_events("{")
    with pytest.raises(pydantic.ValidationError):
        load_events('[{"id": 1, "title": "x", "date": "2024-02-01", "category": "Hobby"}]')
