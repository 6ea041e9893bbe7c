"""Visitor statistics: unique visitors per calendar month.

Visitors are kept as the ``visitors`` collection; entries from a previous
month are dropped on the next tracked visit.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from folio.defaults import DEFAULT_PROJECTS

if TYPE_CHECKING:
    from folio.store.records import RecordStore

logger = logging.getLogger(__name__)

COLLECTION = "visitors"


class VisitorStats:
    def __init__(self, store: RecordStore, projects_default: list[dict] = DEFAULT_PROJECTS) -> None:
        self._store = store
        self._projects_default = projects_default

    def track(self, address: str, now: datetime | None = None) -> int:
        """Count ``address`` once for the current month. Returns the visitor count."""
        now = now or datetime.now(timezone.utc)
        month = now.strftime("%Y-%m")

        stored = self._store.read(COLLECTION, [])
        visitors = [v for v in stored if isinstance(v, dict) and v.get("month") == month]
        changed = len(visitors) != len(stored)
        if changed:
            logger.info("New month %s, resetting visitor stats", month)

        if not any(v.get("id") == address for v in visitors):
            visitors.append(
                {
                    "id": address,
                    "month": month,
                    "firstSeen": now.isoformat(timespec="seconds"),
                }
            )
            changed = True

        if changed:
            self._store.write(COLLECTION, visitors)
        return len(visitors)

    def project_count(self) -> int:
        """Number of projects on disk, or in the seed if the file doesn't exist yet."""
        if not self._store.exists("projects"):
            return len(self._projects_default)
        projects = self._store.read("projects", self._projects_default)
        return len(projects)

    def snapshot(self, address: str) -> dict:
        visitor_count = self.track(address)
        return {"projectCount": self.project_count(), "visitorCount": visitor_count}
