"""File-backed record store.

Layout:
    <data_dir>/
    ├── projects.json      # Project records (numeric ids)
    ├── team.json          # Team members (string ids)
    ├── activities.json    # Activity feed, most recent first, capped
    └── visitors.json      # Unique visitors of the current month

Every file holds exactly one pretty-printed JSON array. A missing or corrupt
file is replaced by the collection's default seed on first read.
"""

from folio.store.ids import new_id
from folio.store.records import ReadResult, RecordStore

__all__ = ["ReadResult", "RecordStore", "new_id"]
