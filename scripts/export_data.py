#!/usr/bin/env python3
"""CLI for exporting the stored activity log to screen-time-data.json."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from screenaware.config import add_settings_args, settings_or_exit
from screenaware.io_utils import setup_logging
from screenaware.storage import ActivityStore


LOGGER = logging.getLogger("scripts.export_data")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export the activity log as JSON")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output file or directory (defaults to export_filename in the current directory)",
    )
    add_settings_args(parser)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    settings = settings_or_exit(args)
    setup_logging(settings.logging_level)

    output_path = args.output or Path(settings.export_filename)
    with ActivityStore.open(settings.storage_path, settings.default_goal_hours) as store:
        written = store.export(output_path)
    LOGGER.info("Exported activity log to %s", written)
    print(written)


if __name__ == "__main__":
    main()
