"""JSON-file key/value storage standing in for per-browser local storage."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from screenaware.io_utils import dump_json_atomic, load_json

LOGGER = logging.getLogger("screenaware.storage")

SCHEMA_VERSION = 1

ACTIVITIES_KEY = "screenTimeActivities"
GOAL_KEY = "dailyScreenTimeGoal"
QUIZ_KEY = "quizProgress"


class LocalStorage:
    """Whole-document key/value store; every mutation rewrites the file atomically.

    A missing file is an empty storage. An unreadable or malformed file is also
    treated as empty (logged at WARNING) and is replaced on the next write.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._items: Dict[str, Any] = self._read()

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            LOGGER.debug("Storage %s does not exist yet; starting empty", self.path)
            return {}
        try:
            payload = load_json(self.path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            LOGGER.warning("Storage %s is unreadable (%s); falling back to empty storage", self.path, exc)
            return {}
        if not isinstance(payload, dict) or not isinstance(payload.get("items"), dict):
            LOGGER.warning("Storage %s has an unexpected layout; falling back to empty storage", self.path)
            return {}
        version = payload.get("schemaVersion")
        if version != SCHEMA_VERSION:
            LOGGER.warning(
                "Storage %s has schemaVersion=%r (expected %d); falling back to empty storage",
                self.path,
                version,
                SCHEMA_VERSION,
            )
            return {}
        items = payload["items"]
        LOGGER.debug("Loaded storage %s -> keys=%s", self.path, sorted(items))
        return items

    def _commit(self, items: Dict[str, Any]) -> None:
        # in-memory state only changes once the document is on disk
        dump_json_atomic(self.path, {"schemaVersion": SCHEMA_VERSION, "items": items})
        self._items = items

    def get_item(self, key: str, default: Optional[Any] = None) -> Any:
        return self._items.get(key, default)

    def set_item(self, key: str, value: Any) -> None:
        self._commit({**self._items, key: value})

    def remove_item(self, key: str) -> None:
        if key in self._items:
            self._commit({k: v for k, v in self._items.items() if k != key})

    def clear(self) -> None:
        self._commit({})

    def keys(self) -> List[str]:
        return sorted(self._items)
