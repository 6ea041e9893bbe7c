"""Folio hub: wires the record store, activity feed and services together.

Every service shares one RecordStore rooted at ``config.data_dir`` and one
ActivityLog, so changes from any collection land in the same feed.
"""

from __future__ import annotations

import logging

from folio.activity import ActivityLog
from folio.config import FolioConfig
from folio.services import ActivityService, CollectionService, ProjectService, TeamService
from folio.stats import VisitorStats
from folio.store.records import RecordStore

logger = logging.getLogger(__name__)


class Folio:
    """Holds the per-process components built from a FolioConfig."""

    def __init__(self, config: FolioConfig) -> None:
        self.config = config
        self.store = RecordStore(config.data_dir)
        self.activities = ActivityLog(self.store, limit=config.activity.limit)
        self.projects = ProjectService(self.store, self.activities)
        self.team = TeamService(self.store, self.activities)
        self.activity_feed = ActivityService(self.activities)
        self.stats = VisitorStats(self.store, self.projects.default)
        logger.info("Data directory: %s", self.store.root)

    def service(self, name: str) -> CollectionService | ActivityService:
        services = {
            self.projects.name: self.projects,
            self.team.name: self.team,
            self.activity_feed.name: self.activity_feed,
        }
        try:
            return services[name]
        except KeyError:
            raise KeyError(f"Unknown collection: {name}. Available: {list(services)}") from None
