from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Union

import orjson
import pydantic

from ..data import KeyValueStorage, dump_events, load_events
from ..domain import Event, EventCategory, EventDraft, NotFoundError
from ..domain.models import category_filter

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "events"


@dataclass(frozen=True, slots=True)
class StoreChange:
    action: str
    event: Optional[Event] = None


Listener = Callable[[StoreChange], None]
DraftLike = Union[EventDraft, Mapping[str, Any]]


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class EventStore:
    """Authoritative, ordered collection of events.

    Every mutation is written to the storage slot first (when one is attached).
    Memory changes only after that write succeeds; subscribers hear about it last.
    Records handed out are immutable, so callers only ever see snapshots.
    """

    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Callable[[], int] = _epoch_millis,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock = clock
        self._events: List[Event] = []
        self._last_id = 0
        self._listeners: List[Listener] = []

    @property
    def persistent(self) -> bool:
        return self._storage is not None

    def __len__(self) -> int:
        return len(self._events)

    # -- lifecycle ---------------------------------------------------------

    def load(self) -> List[Event]:
        """Replace in-memory state with the storage slot's content."""

        events: List[Event] = []
        if self._storage is not None:
            raw = self._storage.get_item(self._key)
            if raw is None:
                logger.debug("Storage slot %r is empty; starting with no events", self._key)
            else:
                try:
                    events = load_events(raw)
                except (orjson.JSONDecodeError, pydantic.ValidationError):
                    logger.warning("Storage slot %r is unreadable; starting with no events", self._key, exc_info=True)
                    events = []
        self._events = self._dedupe(events)
        self._last_id = max([self._last_id, *(event.id for event in self._events)])
        logger.debug("Loaded %d events", len(self._events))
        self._notify(StoreChange("loaded"))
        return self.list()

    def save(self) -> None:
        self._write(self._events)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # -- queries -----------------------------------------------------------

    def list(self) -> List[Event]:
        return list(self._events)

    def get(self, event_id: int) -> Event:
        return self._events[self._index_of(event_id)]

    def filter(self, category: Union[EventCategory, str, None] = None) -> List[Event]:
        """Events of ``category`` in store order; ``None`` or ``"All"`` returns everything."""

        wanted = category_filter(category)
        if wanted is None:
            return self.list()
        return [event for event in self._events if event.category is wanted]

    # -- mutations ---------------------------------------------------------

    def add(self, draft: DraftLike) -> Event:
        checked = draft.validated() if isinstance(draft, EventDraft) else EventDraft.from_mapping(draft)
        event = Event.from_draft(self._next_id(), checked)
        self._commit([*self._events, event], StoreChange("added", event))
        logger.debug("Added event %s on %s", event.id, event.date.isoformat())
        return event

    def update(self, event_id: int, patch: Mapping[str, Any]) -> Event:
        index = self._index_of(event_id)
        updated = self._events[index].merged(patch)
        events = self.list()
        events[index] = updated
        self._commit(events, StoreChange("updated", updated))
        logger.debug("Updated event %s fields=%s", event_id, sorted(patch))
        return updated

    def remove(self, event_id: int, *, missing_ok: bool = False) -> None:
        try:
            index = self._index_of(event_id)
        except NotFoundError:
            if missing_ok:
                logger.debug("Event %s already absent", event_id)
                return
            raise
        events = self.list()
        removed = events.pop(index)
        self._commit(events, StoreChange("removed", removed))
        logger.debug("Removed event %s", event_id)

    # -- internals ---------------------------------------------------------

    def _index_of(self, event_id: int) -> int:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        raise NotFoundError(event_id)

    def _next_id(self) -> int:
        # Monotonic even when the clock stalls or steps backwards.
        candidate = max(self._clock(), self._last_id + 1)
        self._last_id = candidate
        return candidate

    def _write(self, events: List[Event]) -> None:
        if self._storage is None:
            return
        self._storage.set_item(self._key, dump_events(events))

    def _commit(self, events: List[Event], change: StoreChange) -> None:
        # In-memory state only moves once the slot write has succeeded.
        self._write(events)
        self._events = events
        self._notify(change)

    def _notify(self, change: StoreChange) -> None:
        for listener in list(self._listeners):
            listener(change)

    @staticmethod
    def _dedupe(events: List[Event]) -> List[Event]:
        seen: set[int] = set()
        unique: List[Event] = []
        for event in events:
            if event.id in seen:
                logger.warning("Dropping duplicate event id %s from storage", event.id)
                continue
            seen.add(event.id)
            unique.append(event)
        return unique
