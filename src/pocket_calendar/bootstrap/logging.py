from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import List

from ..config import LoggingSettings

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_installed: List[logging.Handler] = []


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: LoggingSettings) -> None:
    """Route records to the rotating log file at ``settings.level``.

    The console handler is capped at WARNING.
    Calling again swaps the previously installed handlers for new ones.
    """

    root = logging.getLogger()
    for handler in _installed:
        root.removeHandler(handler)
        handler.close()
    _installed.clear()

    settings.path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(str(settings.path), maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    file_handler.setFormatter(_FORMATTER)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_FORMATTER)
    console_handler.setLevel(logging.WARNING)

    root.setLevel(resolve_level(settings.level))
    for handler in (file_handler, console_handler):
        root.addHandler(handler)
        _installed.append(handler)

    logging.getLogger(__name__).debug("Logging configured at %s. Output file: %s", settings.level, settings.path)
