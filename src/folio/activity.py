"""Activity feed: deduplicated, bounded history of change descriptions.

Entries are stored most-recent first in the ``activities`` collection. An
entry whose text repeats an existing one replaces it at the head instead of
growing the feed.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from folio.defaults import DEFAULT_ACTIVITIES

if TYPE_CHECKING:
    from folio.store.records import RecordStore

logger = logging.getLogger(__name__)

COLLECTION = "activities"
DEFAULT_LIMIT = 50


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ActivityLog:
    """Shared audit sink written by every collection service."""

    def __init__(self, store: RecordStore, limit: int = DEFAULT_LIMIT) -> None:
        self._store = store
        self.limit = limit

    def list(self) -> list[dict]:
        return self._store.read(COLLECTION, DEFAULT_ACTIVITIES)

    def append(self, type: str, action: str, text: str) -> dict:
        """Record one activity and return it.

        Ids and timestamps come from the wall clock, so two appends in the
        same millisecond share an id.
        """
        activity = {
            "id": int(time.time() * 1000),
            "type": type,
            "action": action,
            "text": text,
            "timestamp": _utc_timestamp(),
        }

        activities = [
            a for a in self.list() if not (isinstance(a, dict) and a.get("text") == text)
        ]
        activities.insert(0, activity)
        del activities[self.limit :]

        if not self._store.write(COLLECTION, activities):
            logger.error("Activity not persisted: %s", text)
        return activity

    def replace(self, activities: list[dict]) -> bool:
        return self._store.write(COLLECTION, activities)
