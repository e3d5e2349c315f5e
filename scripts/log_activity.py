#!/usr/bin/env python3
"""CLI for logging one activity into the local screen-time store."""

from __future__ import annotations

import argparse
import logging
from datetime import date
from typing import Optional, Sequence

from screenaware.config import add_settings_args, settings_or_exit
from screenaware.io_utils import setup_logging
from screenaware.storage import ActivityStore, duration_from_parts, today_key
from screenaware.types import CATEGORIES, ValidationError, format_duration


LOGGER = logging.getLogger("scripts.log_activity")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Log a screen-time activity")
    parser.add_argument("category", help=f"Activity category ({', '.join(CATEGORIES)})")
    parser.add_argument("--hours", type=int, default=0, help="Whole hours spent")
    parser.add_argument("--minutes", type=int, default=0, help="Additional minutes spent")
    parser.add_argument(
        "--description",
        type=str,
        default=None,
        help="Optional label (defaults to the category name)",
    )
    parser.add_argument(
        "--day",
        type=str,
        default=None,
        help="Day to log against as YYYY-MM-DD (defaults to today)",
    )
    add_settings_args(parser)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    settings = settings_or_exit(args)
    setup_logging(settings.logging_level)

    day = args.day or today_key(date.today())
    with ActivityStore.open(settings.storage_path, settings.default_goal_hours) as store:
        try:
            minutes = duration_from_parts(args.hours, args.minutes)
            record = store.add_activity(day, args.category, minutes, args.description)
        except ValidationError as exc:
            LOGGER.error("Activity rejected: %s", exc)
            raise SystemExit(1) from exc
        LOGGER.info(
            "Today's total for %s: %s",
            day,
            format_duration(sum(r.duration_minutes for r in store.get_day(day))),
        )
    print(f"Logged {format_duration(record.duration_minutes)} of {record.label} on {day}")


if __name__ == "__main__":
    main()
