"""
Train-collect log: append-only JSON file of recorded events.

Lives at DATA_DIR/pipeline.json. Each entry is the incoming event with a
millisecond timestamp `t` merged in. Only the newest TRAIN_LOG_MAX_ENTRIES
are kept.
"""

import json
import logging
import time
from pathlib import Path

from .config import settings

logger = logging.getLogger(__name__)


class TrainLog:

    def __init__(self, path, max_entries: int = 200):
        self.path = Path(path)
        self.max_entries = max_entries

    def ensure_exists(self):
        """Create the data directory and an empty log file if missing."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text("[]", encoding="utf-8")

    def entries(self) -> list:
        """Stored entries, oldest first. A corrupt file reads as empty."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (ValueError, OSError) as e:
            logger.warning("Train log %s unreadable, starting fresh: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.warning("Train log %s is not a list, starting fresh", self.path)
            return []
        return data

    def append(self, entry: dict) -> dict:
        """Stamp and append an entry, trimming to the newest max_entries."""
        self.ensure_exists()
        stamped = {"t": int(time.time() * 1000), **entry}
        kept = (self.entries() + [stamped])[-self.max_entries:]
        self.path.write_text(json.dumps(kept, indent=2), encoding="utf-8")
        return stamped


def get_train_log() -> TrainLog:
    """FastAPI dependency: the configured train log."""
    return TrainLog(
        Path(settings.DATA_DIR) / settings.TRAIN_LOG_FILENAME,
        max_entries=settings.TRAIN_LOG_MAX_ENTRIES,
    )
