"""Activity record store: the DailyLog plus the daily-goal preference."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

from screenaware.storage.local_storage import ACTIVITIES_KEY, GOAL_KEY, LocalStorage
from screenaware.types import (
    ActivityRecord,
    DailyLog,
    InvalidGoalError,
    ValidationError,
    ZeroDurationError,
)

LOGGER = logging.getLogger("screenaware.store")

DEFAULT_GOAL_HOURS = 3
MIN_GOAL_HOURS = 1
MAX_GOAL_HOURS = 24


def today_key(today: Optional[date] = None) -> str:
    """Return the day key (ISO calendar date) for ``today`` or the current local date."""
    return (today or date.today()).isoformat()


def parse_day_key(day_key: str) -> date:
    try:
        return date.fromisoformat(day_key)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid day key {day_key!r}; expected YYYY-MM-DD") from exc


def duration_from_parts(hours: int = 0, minutes: int = 0) -> int:
    """Combine the hours/minutes inputs of the logging form into total minutes."""
    if hours < 0 or minutes < 0:
        raise ZeroDurationError(hours * 60 + minutes)
    return hours * 60 + minutes


def serialize_log(log: DailyLog) -> Dict[str, List[Dict]]:
    return {day: [record.to_dict() for record in records] for day, records in log.items()}


def deserialize_log(raw: object) -> DailyLog:
    """Rebuild a DailyLog from its persisted form, skipping entries that fail validation."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        LOGGER.warning("Stored %s is not a mapping (%s); treating as empty", ACTIVITIES_KEY, type(raw).__name__)
        return {}
    log: DailyLog = {}
    for day, entries in raw.items():
        try:
            parse_day_key(day)
        except ValidationError as exc:
            LOGGER.warning("Skipping stored day %r: %s", day, exc)
            continue
        if not isinstance(entries, list):
            LOGGER.warning("Skipping stored day %s: entries are not a list", day)
            continue
        records: List[ActivityRecord] = []
        for idx, entry in enumerate(entries):
            try:
                records.append(ActivityRecord.from_dict(entry))
            except ValidationError as exc:
                LOGGER.warning("Skipping stored activity %s[%d]: %s", day, idx, exc)
        log[day] = records
    return log


class ActivityStore:
    """Injectable handle over the persisted DailyLog.

    Records are append-only: there is no edit or delete of individual
    activities, only ``clear()`` of the whole log.
    """

    def __init__(self, storage: LocalStorage, default_goal_hours: int = DEFAULT_GOAL_HOURS) -> None:
        self.storage = storage
        self._log: DailyLog = deserialize_log(storage.get_item(ACTIVITIES_KEY))
        self._goal_hours = self._load_goal(default_goal_hours)
        self._closed = False
        LOGGER.debug(
            "Opened activity store %s: %d days, goal=%dh",
            storage.path,
            len(self._log),
            self._goal_hours,
        )

    @classmethod
    def open(cls, path: Path, default_goal_hours: int = DEFAULT_GOAL_HOURS) -> "ActivityStore":
        return cls(LocalStorage(path), default_goal_hours=default_goal_hours)

    def close(self) -> None:
        self._closed = True
        LOGGER.debug("Closed activity store %s", self.storage.path)

    def __enter__(self) -> "ActivityStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _load_goal(self, default_goal_hours: int) -> int:
        raw = self.storage.get_item(GOAL_KEY)
        if raw is None:
            return default_goal_hours
        try:
            hours = int(raw)
        except (TypeError, ValueError):
            LOGGER.warning("Stored %s=%r is not a number; using %dh", GOAL_KEY, raw, default_goal_hours)
            return default_goal_hours
        if not MIN_GOAL_HOURS <= hours <= MAX_GOAL_HOURS:
            LOGGER.warning("Stored %s=%r is outside 1..24 hours; using %dh", GOAL_KEY, raw, default_goal_hours)
            return default_goal_hours
        return hours

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError(f"Activity store {self.storage.path} is closed")

    def _persist(self, log: DailyLog) -> None:
        self.storage.set_item(ACTIVITIES_KEY, serialize_log(log))
        self._log = log

    def add_activity(
        self,
        day_key: str,
        category: str,
        duration_minutes: int,
        description: Optional[str] = None,
        recorded_at: Optional[str] = None,
    ) -> ActivityRecord:
        """Validate and append an activity to ``day_key``, then persist the whole log."""
        self._check_open()
        parse_day_key(day_key)
        record = ActivityRecord.create(category, duration_minutes, description, recorded_at)
        updated = self.all_days()
        updated[day_key] = updated.get(day_key, []) + [record]
        self._persist(updated)
        LOGGER.info(
            "Logged %s activity on %s: %d min (%s)",
            record.category,
            day_key,
            record.duration_minutes,
            record.description,
        )
        return record

    def get_day(self, day_key: str) -> List[ActivityRecord]:
        return list(self._log.get(day_key, []))

    def all_days(self) -> DailyLog:
        return {day: list(records) for day, records in self._log.items()}

    @property
    def daily_goal_hours(self) -> int:
        return self._goal_hours

    def set_daily_goal_hours(self, hours: int) -> None:
        self._check_open()
        if isinstance(hours, bool) or not isinstance(hours, int):
            raise InvalidGoalError(hours)
        if not MIN_GOAL_HOURS <= hours <= MAX_GOAL_HOURS:
            raise InvalidGoalError(hours)
        self.storage.set_item(GOAL_KEY, hours)
        self._goal_hours = hours
        LOGGER.info("Daily goal set to %dh", hours)

    def clear(self) -> None:
        """Remove every stored activity (the goal preference is kept)."""
        self._check_open()
        self.storage.remove_item(ACTIVITIES_KEY)
        self._log = {}
        LOGGER.info("Cleared all stored activities")

    def export(self, path: Path) -> Path:
        from screenaware.export import export_daily_log

        return export_daily_log(self._log, path)
