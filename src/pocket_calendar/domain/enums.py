from __future__ import annotations

from enum import Enum


class EventCategory(str, Enum):
    WORK = "Work"
    PERSONAL = "Personal"
