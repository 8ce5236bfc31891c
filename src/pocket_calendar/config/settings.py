from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from ..core import LOG_FILE, STORAGE_FILE

load_dotenv()

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class StorageSettings:
    path: Path
    key: str
    enabled: bool


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    path: Path


@dataclass(frozen=True)
class AppSettings:
    storage: StorageSettings
    logging: LoggingSettings


def _flag_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def _path_from_env(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    return Path(raw).expanduser() if raw else default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    storage = StorageSettings(
        path=_path_from_env("POCKET_CALENDAR_STORAGE_PATH", STORAGE_FILE),
        key=os.getenv("POCKET_CALENDAR_STORAGE_KEY", "events"),
        enabled=_flag_from_env("POCKET_CALENDAR_PERSIST", True),
    )

    logging = LoggingSettings(
        level=os.getenv("POCKET_CALENDAR_LOG_LEVEL", "INFO").upper(),
        path=_path_from_env("POCKET_CALENDAR_LOG_PATH", LOG_FILE),
    )

    return AppSettings(storage=storage, logging=logging)
