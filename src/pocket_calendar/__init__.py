"""Pocket Calendar: a single-user event store and month grid builder."""

from __future__ import annotations

from .cli import main as main

__all__ = ["main"]
