"""Export of the DailyLog to the downloadable ``screen-time-data.json`` document."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from screenaware.io_utils import ensure_dir
from screenaware.storage.activity_store import serialize_log
from screenaware.types import DailyLog

LOGGER = logging.getLogger("screenaware.export")

EXPORT_FILENAME = "screen-time-data.json"


def dumps_daily_log(log: DailyLog) -> str:
    """Indented JSON text mirroring the persisted form of ``log``."""
    return json.dumps(serialize_log(log), indent=2, ensure_ascii=False)


def export_daily_log(log: DailyLog, path: Path) -> Path:
    """Write ``log`` as an export document.

    A directory ``path`` receives the default ``screen-time-data.json`` filename.
    """
    path = Path(path)
    if path.is_dir():
        path = path / EXPORT_FILENAME
    ensure_dir(path.parent)
    path.write_text(dumps_daily_log(log), encoding="utf-8")
    LOGGER.info(
        "Exported %d days / %d activities to %s",
        len(log),
        sum(len(records) for records in log.values()),
        path,
    )
    return path
