"""Tests for visitor statistics."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pathlib import Path

from folio.stats import VisitorStats
from folio.store import RecordStore

OCT = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
NOV = datetime(2026, 11, 1, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(tmp_path: Path) -> RecordStore:
    return RecordStore(tmp_path / "data")


@pytest.fixture
def stats(store: RecordStore) -> VisitorStats:
    return VisitorStats(store, [{"id": 1}, {"id": 2}])


class TestTrack:
    def test_counts_unique_addresses(self, stats: VisitorStats):
        assert stats.track("10.0.0.1", OCT) == 1
        assert stats.track("10.0.0.1", OCT) == 1
        assert stats.track("10.0.0.2", OCT) == 2

    def test_monthly_reset(self, stats: VisitorStats, store: RecordStore):
        stats.track("10.0.0.1", OCT)
        stats.track("10.0.0.2", OCT)
        assert stats.track("10.0.0.3", NOV) == 1
        visitors = store.read("visitors", [])
        assert [v["id"] for v in visitors] == ["10.0.0.3"]
        assert visitors[0]["month"] == "2026-11"

    def test_stored_as_array(self, stats: VisitorStats, store: RecordStore):
        stats.track("unknown", OCT)
        assert store.read("visitors", None) == [
            {"id": "unknown", "month": "2026-10", "firstSeen": "2026-10-19T12:00:00+00:00"}
        ]


class TestSnapshot:
    def test_project_count_from_seed_without_writing(self, stats: VisitorStats, store: RecordStore):
        assert stats.project_count() == 2
        assert not store.exists("projects")

    def test_project_count_from_file(self, stats: VisitorStats, store: RecordStore):
        store.write("projects", [{"id": 1}, {"id": 2}, {"id": 3}])
        assert stats.project_count() == 3

    def test_snapshot(self, stats: VisitorStats):
        assert stats.snapshot("10.0.0.1") == {"projectCount": 2, "visitorCount": 1}
