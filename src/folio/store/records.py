"""Read/write named collections as JSON arrays on disk.

No locking: concurrent writers race and the last one wins. Read errors are
never raised to the caller; a missing or unreadable file is replaced by the
caller's default and the problem is logged.
"""

from __future__ import annotations

import copy
import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass
class ReadResult:
    """Records returned by a read, and where they came from."""

    records: list[Any]
    source: Literal["loaded", "seeded"]

    @property
    def seeded(self) -> bool:
        return self.source == "seeded"


class RecordStore:
    """One JSON file per collection under ``root``."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        if not _NAME_RE.match(name):
            raise ValueError(f"Invalid collection name: {name!r}")
        return self.root / f"{name}.json"

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def _ensure_dir(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def load(self, name: str, default: list[Any]) -> ReadResult:
        """Read a collection, seeding it with ``default`` if absent or corrupt."""
        path = self.path_for(name)
        try:
            self._ensure_dir()
            if path.exists():
                data = json.loads(path.read_text(encoding="utf-8"))
                if isinstance(data, list):
                    return ReadResult(records=data, source="loaded")
                logger.warning(
                    "Collection %s holds %s instead of an array, reseeding",
                    name,
                    type(data).__name__,
                )
            else:
                logger.info("Collection %s not found, seeding %d records", name, len(default))
        except (OSError, ValueError) as e:
            logger.warning("Error reading %s, reseeding: %s", path, e)

        # Seeds are module-level constants; never hand them out directly.
        seed = copy.deepcopy(default)
        self.write(name, seed)
        return ReadResult(records=seed, source="seeded")

    def read(self, name: str, default: list[Any]) -> list[Any]:
        return self.load(name, default).records

    def write(self, name: str, records: list[Any]) -> bool:
        """Overwrite a collection. Returns False (and logs) on IO failure."""
        path = self.path_for(name)
        try:
            self._ensure_dir()
            path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error saving %s: %s", path, e)
            return False
        return True
