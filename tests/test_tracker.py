from datetime import date

from screenaware.analytics.tracker import day_overview, goal_progress_percent, week_chart
from screenaware.types import ActivityRecord, format_duration

MONDAY = "2026-10-19"


def log():
    return {
        MONDAY: [
            ActivityRecord.create("work", 120, recorded_at=""),
            ActivityRecord.create("social", 60, recorded_at=""),
        ]
    }


def test_format_duration():
    assert format_duration(45) == "45m"
    assert format_duration(65) == "1h 5m"
    assert format_duration(120) == "2h 0m"


def test_goal_progress_percent_is_capped():
    assert goal_progress_percent(90, 3) == 50
    assert goal_progress_percent(600, 3) == 100
    assert goal_progress_percent(0, 3) == 0


def test_day_overview():
    overview = day_overview(log(), MONDAY, goal_hours=4)
    assert overview.total_minutes == 180
    assert overview.total_text == "3h 0m"
    assert overview.goal_progress_percent == 75
    assert overview.goal_text == "75% of daily goal (4h)"
    assert overview.category_minutes["work"] == 120
    assert overview.category_minutes["gaming"] == 0
    assert len(overview.activities) == 2


def test_day_overview_for_empty_day():
    overview = day_overview({}, MONDAY, goal_hours=3)
    assert overview.total_text == "0h 0m"
    assert overview.activities == []


def test_week_chart_ends_today():
    chart = week_chart(log(), today=date(2026, 10, 19))
    assert len(chart) == 7
    last = chart.iloc[-1]
    assert last["label"] == "Mon"
    assert last["total"] == "3h 0m"
    assert last["percentage"] == 12.5
    assert chart["minutes"].tolist()[:6] == [0] * 6
