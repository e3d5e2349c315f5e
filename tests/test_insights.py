from screenaware.analytics.aggregate import ProductivitySplit, SummaryStats
from screenaware.analytics.insights import dashboard_insights, generate_insights
from screenaware.types import ActivityRecord


def record(category: str, minutes: int) -> ActivityRecord:
    return ActivityRecord.create(category, minutes, recorded_at="")


def stats(days: int, avg_hours: float) -> SummaryStats:
    return SummaryStats(
        days_tracked=days,
        total_minutes=int(days * avg_hours * 60),
        productive_minutes=0,
        avg_daily_hours=avg_hours,
        goal_achievement_percent=0,
        productivity_score_percent=0,
    )


def test_example_log_reports_great_balance():
    log = {"2026-10-19": [record("work", 120), record("social", 60)]}
    insights = dashboard_insights(log, daily_goal_hours=3)
    assert [i.title for i in insights] == ["Great Productivity Balance", "Track More Days"]
    assert insights[0].severity == "success"
    assert insights[0].message.startswith("67% of your screen time is productive")


def test_empty_log_skips_productivity_rules():
    insights = dashboard_insights({})
    assert [i.title for i in insights] == ["Moderate Usage", "Track More Days"]
    assert insights[0].message == "Your average of 0.0 hours daily shows good digital balance."


def test_low_productivity_and_high_usage():
    log = {
        "2026-10-19": [record("social", 360)],
        "2026-10-20": [record("gaming", 360)],
        "2026-10-21": [record("entertainment", 300), record("work", 60)],
    }
    insights = dashboard_insights(log)
    assert [i.title for i in insights] == ["Low Productivity Ratio", "High Daily Usage"]
    assert insights[0].severity == "warning"
    assert insights[0].message.startswith("Only 6% of your screen time is productive.")
    assert "averaging 6.0 hours daily" in insights[1].message


def test_usage_rules_are_mutually_exclusive():
    split = ProductivitySplit(productive_minutes=50, leisure_minutes=50)
    for avg in (0.5, 1.9, 2.0, 5.0, 5.1, 12.0):
        titles = [i.title for i in generate_insights(stats(5, avg), split)]
        assert not ("High Daily Usage" in titles and "Moderate Usage" in titles)
    assert generate_insights(stats(5, 3.5), split) == []


def test_thresholds_are_strict():
    assert generate_insights(stats(3, 2.0), ProductivitySplit(30, 70)) == []
    assert generate_insights(stats(3, 5.0), ProductivitySplit(60, 40)) == []
    titles = [i.title for i in generate_insights(stats(2, 3.0), ProductivitySplit(29, 71))]
    assert titles == ["Low Productivity Ratio", "Track More Days"]
