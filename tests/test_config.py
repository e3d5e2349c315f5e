import logging
from argparse import Namespace
from pathlib import Path

import pytest

from screenaware.config import Settings, apply_overrides, load_settings, settings_from_args


def test_missing_explicit_config_uses_defaults(tmp_path):
    settings = load_settings(tmp_path / "absent.yaml")
    assert settings == Settings()


def test_yaml_values_override_defaults(tmp_path):
    cfg = tmp_path / "settings.yaml"
    cfg.write_text("storage_path: /tmp/x.json\ntrend_days: 14\nlog_level: debug\n", encoding="utf-8")

    settings = load_settings(cfg)

    assert settings.storage_path == Path("/tmp/x.json")
    assert settings.trend_days == 14
    assert settings.default_goal_hours == 3
    assert settings.logging_level == logging.DEBUG


def test_unknown_keys_are_ignored_with_warning(tmp_path, caplog):
    cfg = tmp_path / "settings.yaml"
    cfg.write_text("colour: blue\n", encoding="utf-8")
    caplog.set_level(logging.WARNING, logger="screenaware.config")

    assert load_settings(cfg) == Settings()
    assert any("colour" in rec.getMessage() for rec in caplog.records)


def test_invalid_numeric_value_rejected(tmp_path):
    cfg = tmp_path / "settings.yaml"
    cfg.write_text("trend_days: 0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(cfg)
    cfg.write_text("default_goal_hours: 30\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(cfg)


def test_cli_overrides_config(tmp_path):
    cfg = tmp_path / "settings.yaml"
    cfg.write_text("storage_path: from-config.json\n", encoding="utf-8")

    settings = settings_from_args(Namespace(config=cfg, storage=tmp_path / "cli.json"))
    assert settings.storage_path == tmp_path / "cli.json"

    settings = settings_from_args(Namespace(config=cfg, storage=None))
    assert settings.storage_path == Path("from-config.json")


def test_apply_overrides_skips_none():
    base = Settings()
    assert apply_overrides(base, trend_days=None) is base
    assert apply_overrides(base, trend_days="30").trend_days == 30
