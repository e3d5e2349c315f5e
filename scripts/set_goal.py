#!/usr/bin/env python3
"""CLI for updating the daily screen-time goal."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from screenaware.config import add_settings_args, settings_or_exit
from screenaware.io_utils import setup_logging
from screenaware.storage import ActivityStore
from screenaware.types import ValidationError


LOGGER = logging.getLogger("scripts.set_goal")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Set the daily screen-time goal")
    parser.add_argument("hours", type=int, help="Daily goal in whole hours")
    add_settings_args(parser)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    settings = settings_or_exit(args)
    setup_logging(settings.logging_level)

    with ActivityStore.open(settings.storage_path, settings.default_goal_hours) as store:
        try:
            store.set_daily_goal_hours(args.hours)
        except ValidationError as exc:
            LOGGER.error("Goal rejected: %s", exc)
            raise SystemExit(1) from exc
    print(f"Daily goal set to {args.hours}h")


if __name__ == "__main__":
    main()
