import json
import logging

import pytest

from screenaware.storage import ActivityStore, LocalStorage, duration_from_parts, today_key
from screenaware.storage.local_storage import ACTIVITIES_KEY, GOAL_KEY, SCHEMA_VERSION
from screenaware.types import (
    InvalidCategoryError,
    InvalidGoalError,
    ValidationError,
    ZeroDurationError,
)

DAY = "2026-10-19"


def day_total(store: ActivityStore, day: str) -> int:
    return sum(record.duration_minutes for record in store.get_day(day))


def test_add_activity_increases_day_total_and_persists(tmp_path):
    path = tmp_path / "store.json"
    with ActivityStore.open(path) as store:
        store.add_activity(DAY, "work", 120, "Report")
        before = day_total(store, DAY)
        store.add_activity(DAY, "social", 45)
        assert day_total(store, DAY) == before + 45

    reopened = ActivityStore.open(path)
    records = reopened.get_day(DAY)
    assert [r.category for r in records] == ["work", "social"]
    assert records[0].description == "Report"
    assert records[1].description == "Social Media"


@pytest.mark.parametrize(
    "category, minutes, error",
    [
        ("work", 0, ZeroDurationError),
        ("work", -5, ZeroDurationError),
        ("reading", 30, InvalidCategoryError),
        ("", 30, InvalidCategoryError),
    ],
)
def test_rejected_activity_never_mutates(tmp_path, category, minutes, error):
    path = tmp_path / "store.json"
    store = ActivityStore.open(path)
    with pytest.raises(error):
        store.add_activity(DAY, category, minutes)
    assert store.get_day(DAY) == []
    assert store.all_days() == {}
    assert not path.exists()


def test_rejection_keeps_existing_records(tmp_path):
    store = ActivityStore.open(tmp_path / "store.json")
    store.add_activity(DAY, "gaming", 30)
    with pytest.raises(ValidationError):
        store.add_activity(DAY, "gaming", 0)
    assert day_total(store, DAY) == 30


def test_invalid_day_key_rejected(tmp_path):
    store = ActivityStore.open(tmp_path / "store.json")
    with pytest.raises(ValidationError):
        store.add_activity("Mon Oct 19 2026", "work", 30)


def test_get_day_and_all_days_return_copies(tmp_path):
    store = ActivityStore.open(tmp_path / "store.json")
    store.add_activity(DAY, "work", 30)
    store.get_day(DAY).clear()
    store.all_days()[DAY].clear()
    assert day_total(store, DAY) == 30
    assert store.get_day("2026-01-01") == []


def test_persisted_records_use_storage_field_names(tmp_path):
    path = tmp_path / "store.json"
    store = ActivityStore.open(path)
    store.add_activity(DAY, "communication", 15, "Email", recorded_at="2026-10-19T08:00:00+00:00")
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["schemaVersion"] == SCHEMA_VERSION
    assert payload["items"][ACTIVITIES_KEY] == {
        DAY: [
            {
                "type": "communication",
                "duration": 15,
                "description": "Email",
                "timestamp": "2026-10-19T08:00:00+00:00",
            }
        ]
    }


def test_corrupt_records_are_skipped_on_load(tmp_path, caplog):
    path = tmp_path / "store.json"
    storage = LocalStorage(path)
    storage.set_item(
        ACTIVITIES_KEY,
        {
            DAY: [
                {"type": "work", "duration": 60, "description": "ok", "timestamp": "t"},
                {"type": "sleeping", "duration": 60},
                {"type": "work", "duration": 0},
                "garbage",
            ],
            "yesterday": [{"type": "work", "duration": 10}],
        },
    )
    caplog.set_level(logging.WARNING, logger="screenaware.store")

    store = ActivityStore.open(path)

    assert day_total(store, DAY) == 60
    assert list(store.all_days()) == [DAY]
    assert len([r for r in caplog.records if r.name == "screenaware.store"]) == 4


def test_non_text_description_is_skipped_on_load(tmp_path, caplog):
    path = tmp_path / "store.json"
    LocalStorage(path).set_item(
        ACTIVITIES_KEY,
        {
            DAY: [
                {"type": "work", "duration": 60, "description": 123, "timestamp": "t"},
                {"type": "social", "duration": 15, "description": "Feed", "timestamp": "t"},
            ]
        },
    )
    caplog.set_level(logging.WARNING, logger="screenaware.store")

    store = ActivityStore.open(path)

    assert [(r.category, r.description) for r in store.get_day(DAY)] == [("social", "Feed")]
    assert any(f"{DAY}[0]" in r.getMessage() for r in caplog.records if r.name == "screenaware.store")


def test_non_text_description_rejected(tmp_path):
    path = tmp_path / "store.json"
    store = ActivityStore.open(path)
    with pytest.raises(ValidationError):
        store.add_activity(DAY, "work", 30, 5)
    assert store.get_day(DAY) == []
    assert not path.exists()


def test_failed_write_leaves_store_unchanged(tmp_path, monkeypatch):
    path = tmp_path / "store.json"
    store = ActivityStore.open(path)
    store.set_daily_goal_hours(5)

    def fail(*_args, **_kwargs):
        raise OSError("disk full")

    monkeypatch.setattr("screenaware.storage.local_storage.dump_json_atomic", fail)
    with pytest.raises(OSError):
        store.add_activity(DAY, "work", 30)
    with pytest.raises(OSError):
        store.set_daily_goal_hours(8)

    assert store.get_day(DAY) == []
    assert store.storage.get_item(ACTIVITIES_KEY) is None
    assert store.daily_goal_hours == 5


def test_daily_goal_default_update_and_validation(tmp_path):
    path = tmp_path / "store.json"
    store = ActivityStore.open(path)
    assert store.daily_goal_hours == 3
    store.set_daily_goal_hours(5)
    with pytest.raises(InvalidGoalError):
        store.set_daily_goal_hours(0)
    with pytest.raises(InvalidGoalError):
        store.set_daily_goal_hours(25)
    assert store.daily_goal_hours == 5
    assert ActivityStore.open(path).daily_goal_hours == 5
    assert ActivityStore.open(tmp_path / "other.json", default_goal_hours=2).daily_goal_hours == 2


@pytest.mark.parametrize("stored", [0, 30, "many"])
def test_out_of_range_stored_goal_falls_back_to_default(tmp_path, caplog, stored):
    path = tmp_path / "store.json"
    LocalStorage(path).set_item(GOAL_KEY, stored)
    caplog.set_level(logging.WARNING, logger="screenaware.store")

    assert ActivityStore.open(path, default_goal_hours=4).daily_goal_hours == 4
    assert any(GOAL_KEY in r.getMessage() for r in caplog.records)

def test_clear_removes_activities_but_keeps_goal(tmp_path):
    path = tmp_path / "store.json"
    store = ActivityStore.open(path)
    store.set_daily_goal_hours(4)
    store.add_activity(DAY, "work", 30)
    store.clear()
    reopened = ActivityStore.open(path)
    assert reopened.all_days() == {}
    assert reopened.daily_goal_hours == 4


def test_closed_store_rejects_mutation(tmp_path):
    store = ActivityStore.open(tmp_path / "store.json")
    store.close()
    with pytest.raises(RuntimeError):
        store.add_activity(DAY, "work", 30)


def test_duration_from_parts():
    assert duration_from_parts(1, 30) == 90
    assert duration_from_parts(0, 0) == 0
    with pytest.raises(ZeroDurationError):
        duration_from_parts(-1, 30)


def test_today_key_is_iso_date():
    from datetime import date

    assert today_key(date(2026, 10, 18)) == "2026-10-18"
