from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..data import JsonFileStorage, KeyValueStorage
from .event_store import EventStore


@dataclass(slots=True)
class ServiceContext:
    """Owns the settings, the storage slot and the loaded event store."""

    settings: AppSettings = field(default_factory=get_settings)
    storage: Optional[KeyValueStorage] = field(init=False)
    events: EventStore = field(init=False)

    def __post_init__(self) -> None:
        storage_settings = self.settings.storage
        self.storage = JsonFileStorage(storage_settings.path) if storage_settings.enabled else None
        self.events = EventStore(self.storage, key=storage_settings.key)
        self.events.load()
