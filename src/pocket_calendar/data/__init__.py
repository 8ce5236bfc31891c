"""Local storage backends and the persisted event format."""

from __future__ import annotations

from .serializers import EventRecord, dump_events, load_events
from .storage import JsonFileStorage, KeyValueStorage, MemoryStorage

__all__ = [
    "EventRecord",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "dump_events",
    "load_events",
]
