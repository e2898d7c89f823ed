"""
src/data/feed.py
────────────────
Bounded alert feed.

Entries are kept most-recent-first; once the capacity is exceeded the oldest
entry is evicted. Entries are never mutated and never expire by age.

Thread safety: a lock guards the deque (Dash request threads read while the
observation thread writes).
"""
from __future__ import annotations

import logging
import threading
from collections import deque
from datetime import UTC, datetime

from config.alerts import AlertKind
from config.settings import settings
from src.data.models import AlertEntry

LOG = logging.getLogger(__name__)


class AlertFeed:
    def __init__(self, capacity: int = settings.ALERT_FEED_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._entries: deque[AlertEntry] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def push(
        self,
        message: str,
        kind: AlertKind = AlertKind.SYSTEM,
        muted: bool = False,
        timestamp: datetime | None = None,
    ) -> AlertEntry:
        entry = AlertEntry(
            timestamp=timestamp or datetime.now(tz=UTC),
            kind=kind,
            message=message,
            muted=muted,
        )
        with self._lock:
            # deque(maxlen) drops from the right end on appendleft
            self._entries.appendleft(entry)
        LOG.info("alert: %s", message)
        return entry

    def entries(self) -> list[AlertEntry]:
        """Snapshot of the feed, most recent first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
