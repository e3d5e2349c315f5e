#!/usr/bin/env python3
"""CLI printing the screen-time dashboard: stats, charts as tables, insights."""

from __future__ import annotations

import argparse
import logging
from datetime import date
from typing import List, Optional, Sequence

from screenaware.analytics import aggregate
from screenaware.analytics.insights import generate_insights
from screenaware.analytics.tracker import day_overview
from screenaware.config import add_settings_args, settings_or_exit
from screenaware.io_utils import setup_logging
from screenaware.quiz import load_result
from screenaware.storage import ActivityStore, today_key
from screenaware.types import DailyLog, format_duration


LOGGER = logging.getLogger("scripts.show_dashboard")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show screen-time statistics and insights")
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Trend window in days (defaults to trend_days from the config)",
    )
    add_settings_args(parser)
    return parser.parse_args(argv)


def render_dashboard(log: DailyLog, goal_hours: int, trend_days: int, today: date) -> str:
    """Render every dashboard section as plain text."""
    overview = day_overview(log, today_key(today), goal_hours)
    stats = aggregate.summary_stats(log, goal_hours)
    split = aggregate.productivity_split(log)
    lines: List[str] = [
        f"Today ({overview.day_key}): {overview.total_text} - {overview.goal_text}",
        "",
        "Summary",
        f"  Average daily time: {stats.avg_daily_hours}h",
        f"  Goal achievement:   {stats.goal_achievement_percent}%",
        f"  Productivity score: {stats.productivity_score_percent}%",
        f"  Days tracked:       {stats.days_tracked}",
        "",
        f"Productive {format_duration(split.productive_minutes)} / Leisure {format_duration(split.leisure_minutes)}",
        "",
        f"Screen time over the last {trend_days} days",
        aggregate.trend(log, trend_days, today)[["label", "hours"]].to_string(index=False),
        "",
        "Activity distribution",
        aggregate.category_distribution(log)[["label", "hours"]].to_string(index=False),
        "",
        "Average daily usage by weekday",
        aggregate.weekly_pattern(log)[["label", "days", "avg_hours"]].to_string(index=False),
        "",
        "Insights",
    ]
    insights = generate_insights(stats, split)
    if not insights:
        lines.append("  (none)")
    for insight in insights:
        lines.append(f"  {insight.icon} {insight.title}: {insight.message}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    settings = settings_or_exit(args, trend_days=args.days)
    setup_logging(settings.logging_level)

    with ActivityStore.open(settings.storage_path, settings.default_goal_hours) as store:
        text = render_dashboard(store.all_days(), store.daily_goal_hours, settings.trend_days, date.today())
        quiz_result = load_result(store.storage)
    print(text)
    if quiz_result is not None:
        print(f"\nLast quiz: {quiz_result.score}/{quiz_result.total} ({quiz_result.percentage:.0f}%)")


if __name__ == "__main__":
    main()
