"""Today-centric numbers shown on the activity logging page."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional

import pandas as pd

from screenaware.analytics.aggregate import daily_total_minutes, round_half_up
from screenaware.types import CATEGORIES, ActivityRecord, DailyLog, format_duration

MINUTES_PER_DAY = 24 * 60


def goal_progress_percent(total_minutes: int, goal_hours: int) -> int:
    """Share of the daily goal used, capped at 100."""
    goal_minutes = goal_hours * 60
    if goal_minutes <= 0:
        return 0
    return int(min(round_half_up(total_minutes / goal_minutes * 100.0, 0), 100))


def day_category_minutes(log: DailyLog, day_key: str) -> Dict[str, int]:
    totals = {category: 0 for category in CATEGORIES}
    for record in log.get(day_key, []):
        totals[record.category] += record.duration_minutes
    return totals


@dataclass(frozen=True)
class DayOverview:
    day_key: str
    total_minutes: int
    goal_hours: int
    goal_progress_percent: int
    category_minutes: Dict[str, int] = field(default_factory=dict)
    activities: List[ActivityRecord] = field(default_factory=list)

    @property
    def total_text(self) -> str:
        hours, minutes = divmod(self.total_minutes, 60)
        return f"{hours}h {minutes}m"

    @property
    def goal_text(self) -> str:
        return f"{self.goal_progress_percent}% of daily goal ({self.goal_hours}h)"


def day_overview(log: DailyLog, day_key: str, goal_hours: int) -> DayOverview:
    total = daily_total_minutes(log, day_key)
    return DayOverview(
        day_key=day_key,
        total_minutes=total,
        goal_hours=goal_hours,
        goal_progress_percent=goal_progress_percent(total, goal_hours),
        category_minutes=day_category_minutes(log, day_key),
        activities=list(log.get(day_key, [])),
    )


def week_chart(log: DailyLog, today: Optional[date] = None) -> pd.DataFrame:
    """Seven bars ending today; bar height is the share of a 24h day."""
    today = today or date.today()
    rows = []
    for offset in range(6, -1, -1):
        day = today - timedelta(days=offset)
        minutes = daily_total_minutes(log, day.isoformat())
        rows.append(
            {
                "day_key": day.isoformat(),
                "label": f"{day:%a}",
                "minutes": minutes,
                "total": format_duration(minutes),
                "percentage": round_half_up(min(minutes / MINUTES_PER_DAY * 100.0, 100.0), 1),
            }
        )
    return pd.DataFrame(rows, columns=["day_key", "label", "minutes", "total", "percentage"])
