"""Tests for the JSON record store and id allocation."""

from __future__ import annotations

import json

import pytest
from pathlib import Path

from folio.store import RecordStore, new_id


@pytest.fixture
def store(tmp_path: Path) -> RecordStore:
    return RecordStore(tmp_path / "data")


class TestRead:
    def test_missing_file_returns_default(self, store: RecordStore):
        default = [{"id": 1, "title": "A"}]
        assert store.read("projects", default) == default

    def test_missing_file_is_seeded(self, store: RecordStore):
        default = [{"id": 1, "title": "A"}]
        store.read("projects", default)
        assert store.exists("projects")
        assert json.loads(store.path_for("projects").read_text(encoding="utf-8")) == default

    def test_second_read_is_idempotent(self, store: RecordStore):
        default = [{"id": 1}, {"id": 2}]
        first = store.read("projects", default)
        second = store.read("projects", [{"id": 99}])
        assert first == second == default

    def test_creates_directory_lazily(self, store: RecordStore):
        assert not store.root.exists()
        store.read("team", [])
        assert store.root.is_dir()

    def test_seed_is_copied(self, store: RecordStore):
        default = [{"id": 1, "tags": ["a"]}]
        records = store.read("projects", default)
        records[0]["tags"].append("b")
        assert default == [{"id": 1, "tags": ["a"]}]

    def test_corrupt_file_is_reseeded(self, store: RecordStore):
        store.root.mkdir(parents=True)
        store.path_for("projects").write_text("{not json", encoding="utf-8")
        default = [{"id": 1}]
        assert store.read("projects", default) == default
        assert json.loads(store.path_for("projects").read_text(encoding="utf-8")) == default

    def test_non_array_file_is_reseeded(self, store: RecordStore):
        store.root.mkdir(parents=True)
        store.path_for("projects").write_text('{"id": 1}', encoding="utf-8")
        assert store.read("projects", []) == []


class TestLoad:
    def test_reports_seeded_then_loaded(self, store: RecordStore):
        assert store.load("projects", [{"id": 1}]).seeded
        result = store.load("projects", [])
        assert result.source == "loaded"
        assert result.records == [{"id": 1}]

    def test_corrupt_reports_seeded(self, store: RecordStore):
        store.root.mkdir(parents=True)
        store.path_for("team").write_text("", encoding="utf-8")
        assert store.load("team", []).source == "seeded"


class TestWrite:
    def test_round_trip(self, store: RecordStore):
        records = [
            {"id": 1, "title": "Ümlaut", "technologies": ["Blender"], "completed": True},
            {"id": 2, "title": "B", "github": None, "score": 1.5},
        ]
        assert store.write("projects", records) is True
        assert store.read("projects", []) == records

    def test_pretty_printed(self, store: RecordStore):
        store.write("projects", [{"id": 1}])
        text = store.path_for("projects").read_text(encoding="utf-8")
        assert text == '[\n  {\n    "id": 1\n  }\n]'

    def test_io_failure_returns_false(self, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        store = RecordStore(blocker / "data")
        assert store.write("projects", []) is False

    def test_unserializable_returns_false(self, store: RecordStore):
        assert store.write("projects", [{"id": object()}]) is False

    def test_read_failure_falls_back_to_default(self, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        store = RecordStore(blocker / "data")
        assert store.read("projects", [{"id": 1}]) == [{"id": 1}]


class TestCollectionNames:
    @pytest.mark.parametrize("name", ["../etc", "a/b", "", "with space"])
    def test_invalid_names(self, store: RecordStore, name: str):
        with pytest.raises(ValueError, match="Invalid collection name"):
            store.path_for(name)

    def test_path_layout(self, store: RecordStore):
        assert store.path_for("activities") == store.root / "activities.json"


class TestNewId:
    def test_empty(self):
        assert new_id([]) == 1

    def test_numeric_max_plus_one(self):
        assert new_id([{"id": 1}, {"id": 3}]) == 4

    def test_numeric_unordered(self):
        assert new_id([{"id": 7}, {"id": 2}]) == 8

    def test_string_ids_use_timestamp(self, monkeypatch):
        monkeypatch.setattr("folio.store.ids.time.time", lambda: 1700000000.5)
        assert new_id([{"id": "1"}, {"id": "2"}]) == "1700000000500"

    def test_mixed_follows_first_element(self, monkeypatch):
        monkeypatch.setattr("folio.store.ids.time.time", lambda: 1700000000.0)
        assert new_id([{"id": 5}, {"id": "x"}]) == 6
        assert new_id([{"id": "x"}, {"id": 5}]) == "1700000000000"

    def test_bool_is_not_numeric(self, monkeypatch):
        monkeypatch.setattr("folio.store.ids.time.time", lambda: 1.0)
        assert new_id([{"id": True}]) == "1000"
