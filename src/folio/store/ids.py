"""Id allocation for new records."""

from __future__ import annotations

import logging
import time
from typing import Any

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def new_id(records: list[dict]) -> int | float | str:
    """Return an id that does not collide with the ids in ``records``.

    The id type follows the first record: numeric ids continue from the
    maximum, anything else gets the current epoch milliseconds as a string.
    """
    if not records:
        return 1

    if _is_number(records[0].get("id")):
        numeric = [r.get("id") for r in records if _is_number(r.get("id"))]
        if len(numeric) != len(records):
            # Mixed id types are not normalized; non-numeric ids are ignored here.
            logger.warning(
                "Collection mixes id types (%d of %d numeric)", len(numeric), len(records)
            )
        return max(numeric) + 1

    return str(int(time.time() * 1000))
