"""Settings loaded from YAML, merged over built-in defaults."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from screenaware.io_utils import load_yaml

LOGGER = logging.getLogger("screenaware.config")

DEFAULT_CONFIG_PATH = Path("configs/settings.yaml")


@dataclass(frozen=True)
class Settings:
    storage_path: Path = Path("data/screenaware.json")
    default_goal_hours: int = 3
    trend_days: int = 7
    export_filename: str = "screen-time-data.json"
    log_level: str = "INFO"

    @property
    def logging_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            LOGGER.warning("Unknown log_level %r; defaulting to INFO", self.log_level)
            return logging.INFO
        return level


def _coerce(name: str, value: Any) -> Any:
    if name == "storage_path":
        return Path(value)
    if name in {"default_goal_hours", "trend_days"}:
        coerced = int(value)
        if coerced < 1:
            raise ValueError(f"{name} must be >= 1, got {value!r}")
        if name == "default_goal_hours" and coerced > 24:
            raise ValueError(f"default_goal_hours must be <= 24, got {value!r}")
        return coerced
    return str(value)


def settings_from_dict(raw: Dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    overrides: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            LOGGER.warning("Ignoring unknown config key %r", key)
            continue
        if value is None:
            continue
        overrides[key] = _coerce(key, value)
    return replace(Settings(), **overrides)


def apply_overrides(settings: Settings, **overrides: Any) -> Settings:
    """Return ``settings`` with every non-None override applied (CLI flags win over config)."""
    updates = {key: _coerce(key, value) for key, value in overrides.items() if value is not None}
    return replace(settings, **updates) if updates else settings


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from ``path`` (or the default location); missing files yield defaults."""
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        if path is not None:
            LOGGER.warning("Config file %s not found; using defaults", config_path)
        else:
            LOGGER.debug("No config at %s; using defaults", config_path)
        return Settings()
    settings = settings_from_dict(load_yaml(config_path))
    LOGGER.debug("Loaded settings from %s: %s", config_path, settings)
    return settings


def add_settings_args(parser: argparse.ArgumentParser) -> None:
    """Register the ``--config``/``--storage`` flags shared by every CLI."""
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Settings YAML (defaults to {DEFAULT_CONFIG_PATH} when present)",
    )
    parser.add_argument(
        "--storage",
        type=Path,
        default=None,
        help="Storage JSON file (overrides storage_path from the config)",
    )


def settings_from_args(args: argparse.Namespace) -> Settings:
    return apply_overrides(load_settings(args.config), storage_path=args.storage)


def settings_or_exit(args: argparse.Namespace, **overrides: Any) -> Settings:
    """CLI entry point variant of ``settings_from_args``: a bad config value exits with status 1."""
    try:
        return apply_overrides(settings_from_args(args), **overrides)
    except ValueError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        raise SystemExit(1) from exc
