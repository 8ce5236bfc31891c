"""Application data locations."""

from .config import DATA_DIR, LOG_FILE, STORAGE_FILE

__all__ = ["DATA_DIR", "LOG_FILE", "STORAGE_FILE"]
