from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Protocol

import orjson

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Local string key-value storage holding serialized application state."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class MemoryStorage:
    def __init__(self, items: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage:
    """Key-value storage persisted as a single JSON object on disk.

    Every key maps to a string value. A missing, empty or corrupt file reads as
    an empty storage; writes replace the file atomically.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _read_items(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        raw = self._path.read_bytes()
        if not raw.strip():
            return {}
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError:
            logger.warning("Storage file %s is not valid JSON; treating it as empty", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold a JSON object; treating it as empty", self._path)
            return {}
        return {str(key): value for key, value in data.items() if isinstance(value, str)}

    def _write_items(self, items: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = orjson.dumps(items, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_bytes(payload + b"\n")
        os.replace(tmp, self._path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_items().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_items()
        items[key] = value
        self._write_items(items)

    def remove_item(self, key: str) -> None:
        items = self._read_items()
        if items.pop(key, None) is not None:
            self._write_items(items)
