"""Collection services: whole-collection replace with change auditing.

Each service owns one collection file. A replace loads the previous array,
writes the new one verbatim, diffs the two by id and records one activity per
added, edited and deleted record (in that order). Activity failures are logged
and never undo the write.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from folio.defaults import DEFAULT_PROJECTS, DEFAULT_TEAM
from folio.errors import PersistenceError, ValidationError
from folio.store.ids import new_id

if TYPE_CHECKING:
    from folio.activity import ActivityLog
    from folio.store.records import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class ChangeSet:
    """Records detected by diffing two versions of a collection."""

    added: list[dict] = field(default_factory=list)
    edited: list[dict] = field(default_factory=list)
    deleted: list[dict] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.added or self.edited or self.deleted)

    def events(self) -> list[tuple[str, dict]]:
        """(action, record) pairs in emission order: add, edit, delete."""
        return (
            [("add", r) for r in self.added]
            + [("edit", r) for r in self.edited]
            + [("delete", r) for r in self.deleted]
        )


def _id_key(record: dict) -> Any:
    """Hashable form of a record id; stored files may hold object or array ids."""
    rid = record.get("id")
    if isinstance(rid, (dict, list)):
        return json.dumps(rid, sort_keys=True)
    return rid


def diff_collections(previous: list[dict], current: list[dict]) -> ChangeSet:
    """Compare two versions of a collection by record id.

    A record present in both is edited when any field differs (deep value
    equality of the whole record). With duplicate ids, the first previous
    record carrying the id is the one compared against.
    """
    old_by_id: dict[Any, dict] = {}
    for record in previous:
        old_by_id.setdefault(_id_key(record), record)
    new_ids = {_id_key(record) for record in current}

    changes = ChangeSet()
    for record in current:
        rid = _id_key(record)
        if rid not in old_by_id:
            changes.added.append(record)
        elif record != old_by_id[rid]:
            changes.edited.append(record)
    changes.deleted = [r for r in previous if _id_key(r) not in new_ids]
    return changes


class CollectionService:
    """Replace-and-diff operations over one collection."""

    name: str = ""
    activity_type: str = ""
    default: list[dict] = []

    def __init__(self, store: RecordStore, activities: ActivityLog) -> None:
        self._store = store
        self._activities = activities

    # ── Reads ────────────────────────────────────────────────

    def list(self) -> list[dict]:
        return self._store.read(self.name, self.default)

    def next_id(self) -> int | float | str:
        return new_id(self.list())

    # ── Validation ───────────────────────────────────────────

    def validate(self, records: Any) -> list[dict]:
        """Reject anything that is not an array of objects with scalar ids."""
        if not isinstance(records, list):
            raise ValidationError(f"Invalid data format. Expected an array of {self.name}.")
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise ValidationError(f"Item {index} of {self.name} is not an object.")
            rid = record.get("id")
            scalar = isinstance(rid, (str, int, float)) and not isinstance(rid, bool)
            if rid is not None and not scalar:
                raise ValidationError(f"Item {index} of {self.name} has an invalid id: {rid!r}")
        return records

    def prepare(self, records: list[dict]) -> list[dict]:
        """Hook for filling defaults before the collection is written."""
        return records

    # ── Replace ──────────────────────────────────────────────

    def replace(self, records: Any) -> ChangeSet:
        """Overwrite the whole collection and record what changed."""
        records = self.prepare(self.validate(records))
        previous = [r for r in self.list() if isinstance(r, dict)]

        if not self._store.write(self.name, records):
            raise PersistenceError(f"Failed to save {self.name}")
        logger.info("Saved %d %s", len(records), self.name)

        changes = diff_collections(previous, records)
        for action, record in changes.events():
            self._record(action, record)
        return changes

    def _record(self, action: str, record: dict) -> None:
        try:
            self._activities.append(self.activity_type, action, self.describe(action, record))
        except Exception as e:
            logger.error("Error recording %s activity: %s", self.activity_type, e)

    def describe(self, action: str, record: dict) -> str:
        raise NotImplementedError


class ProjectService(CollectionService):
    name = "projects"
    activity_type = "project"
    default = DEFAULT_PROJECTS

    def describe(self, action: str, record: dict) -> str:
        title = record.get("title")
        if action == "add":
            return f"New project '{title}' created"
        if action == "edit":
            return f"Project '{title}' edited"
        if action == "delete":
            return f"Project '{title}' deleted"
        return f"Project '{title}' updated"


class TeamService(CollectionService):
    name = "team"
    activity_type = "team"
    default = DEFAULT_TEAM

    def list(self) -> list[dict]:
        """Team members with ``projectId`` and ``specializations`` always present."""
        return [
            {
                **member,
                "projectId": member.get("projectId") or "",
                "specializations": member.get("specializations") or [],
            }
            for member in super().list()
            if isinstance(member, dict)
        ]

    def validate(self, records: Any) -> list[dict]:
        records = super().validate(records)
        for member in records:
            if not member.get("id") or not member.get("name") or not member.get("surname"):
                raise ValidationError("Each team member must have id, name, and surname fields.")
        return records

    def prepare(self, records: list[dict]) -> list[dict]:
        for member in records:
            member.setdefault("projectId", "")
        return records

    def describe(self, action: str, record: dict) -> str:
        full_name = f"{record.get('name')} {record.get('surname')}"
        if action == "add":
            return f"New team member '{full_name}' added"
        if action == "edit":
            return f"Team member '{full_name}' edited"
        if action == "delete":
            return f"Team member '{full_name}' removed"
        return f"Team member '{full_name}' updated"


class ActivityService:
    """Client-facing access to the activity feed."""

    name = "activities"

    def __init__(self, activities: ActivityLog) -> None:
        self._activities = activities

    def list(self) -> list[dict]:
        return self._activities.list()

    def next_id(self) -> int | float | str:
        return new_id(self.list())

    def record(self, payload: Any) -> dict:
        """Append one activity from a ``{type, action, text}`` object."""
        if not isinstance(payload, dict) or not all(
            payload.get(key) for key in ("type", "action", "text")
        ):
            raise ValidationError("Invalid data. Required fields: type, action, text")
        return self._activities.append(payload["type"], payload["action"], payload["text"])

    def replace(self, records: Any) -> None:
        """Overwrite the feed verbatim; no activities are derived from this."""
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise ValidationError("Invalid data format. Expected an array of activities.")
        if not self._activities.replace(records):
            raise PersistenceError("Failed to save activities")
        logger.info("Replaced activity feed (%d entries)", len(records))
