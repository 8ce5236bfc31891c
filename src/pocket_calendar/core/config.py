from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "Pocket Calendar"
APP_AUTHOR = "PocketCalendar"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))
STORAGE_FILE = DATA_DIR / "local_storage.json"
LOG_FILE = DATA_DIR / "pocket_calendar.log"
