from datetime import date

import pytest

from pocket_calendar.config import get_settings
from pocket_calendar.data import MemoryStorage
from pocket_calendar.services import EventStore


class FixedClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start=1_700_000_000_000):
        self.now = start

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage, clock):
    return EventStore(storage, clock=clock)


@pytest.fixture
def seeded(store):
    store.add({"title": "Standup", "date": date(2024, 2, 15), "category": "Work"})
    store.add({"title": "Dentist", "date": date(2024, 2, 15), "category": "Personal"})
    store.add({"title": "Review", "date": date(2024, 3, 1)})
    store.add({"title": "Birthday", "date": date(2024, 2, 29), "category": "Personal"})
    return store


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("POCKET_CALENDAR_STORAGE_PATH", str(tmp_path / "local_storage.json"))
    monkeypatch.setenv("POCKET_CALENDAR_LOG_PATH", str(tmp_path / "pocket_calendar.log"))
    monkeypatch.delenv("POCKET_CALENDAR_STORAGE_KEY", raising=False)
    monkeypatch.delenv("POCKET_CALENDAR_PERSIST", raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()
