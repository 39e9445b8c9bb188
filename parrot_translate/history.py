"""
Last-seen timestamps of queried text.

Used to avoid looking up the same clipboard text automatically over and
over: a text recorded less than the configured window ago is skipped.
"""

import json
import logging
import time
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class QueryHistory:
    """Timestamp store, JSON-file backed when a path is given."""

    def __init__(self, path: Optional[Union[str, Path]] = None, window_ms: int = 5000):
        self.path = Path(path) if path else None
        self.window_ms = window_ms
        self._records: dict[str, int] = {}
        self._load()

    def _load(self) -> None:
        if self.path is None or not self.path.exists():
            return
        try:
            self._records = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable query history %s: %s", self.path, e)
            self._records = {}

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._records, ensure_ascii=False), encoding="utf-8")

    def last_seen(self, text: str) -> Optional[int]:
        """Millisecond timestamp of the last lookup of ``text``."""
        return self._records.get(text)

    def should_auto_query(self, text: str, now_ms: Optional[int] = None) -> bool:
        timestamp = self.last_seen(text)
        if timestamp is None:
            return True
        now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
        return now_ms - timestamp > self.window_ms

    def record(self, text: str, now_ms: Optional[int] = None) -> None:
        """Record a lookup of ``text`` and drop entries outside the window."""
        now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
        self._records = {
            seen: timestamp
            for seen, timestamp in self._records.items()
            if now_ms - timestamp <= self.window_ms
        }
        self._records[text] = now_ms
        self._save()
