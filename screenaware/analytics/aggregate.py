"""Aggregation utilities folding a DailyLog snapshot into dashboard metrics.

Every function here is pure: the input log is never mutated, and repeated
calls over the same log return equal results. Hour values are minutes / 60
rounded to one decimal, half away from zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional

import pandas as pd

from screenaware.types import CATEGORIES, PRODUCTIVE_CATEGORY, DailyLog, category_label

RECORD_COLUMNS = ["day_key", "category", "duration_minutes", "description", "recorded_at"]
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def round_half_up(value: float, digits: int = 1) -> float:
    """Round half away from zero on the decimal representation of ``value``."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def minutes_to_hours(minutes: float) -> float:
    return round_half_up(minutes / 60.0, 1)


def weekday_index(day_key: str) -> int:
    """Sunday=0 ... Saturday=6."""
    return (date.fromisoformat(day_key).weekday() + 1) % 7


def records_frame(log: DailyLog) -> pd.DataFrame:
    """Flatten the DailyLog into one row per activity."""
    rows = [
        {
            "day_key": day,
            "category": record.category,
            "duration_minutes": record.duration_minutes,
            "description": record.description,
            "recorded_at": record.recorded_at,
        }
        for day, records in log.items()
        for record in records
    ]
    if not rows:
        return pd.DataFrame(columns=RECORD_COLUMNS).astype({"duration_minutes": "int64"})
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def day_totals(log: DailyLog) -> pd.Series:
    """Total minutes per tracked day (days without records are absent)."""
    frame = records_frame(log)
    return frame.groupby("day_key")["duration_minutes"].sum().astype("int64")


def daily_total_minutes(log: DailyLog, day_key: str) -> int:
    return int(sum(record.duration_minutes for record in log.get(day_key, [])))


def trend(log: DailyLog, days: int = 7, today: Optional[date] = None) -> pd.DataFrame:
    """Trailing ``days`` calendar days ending ``today``, oldest first, zero-filled."""
    if days < 1:
        raise ValueError(f"days must be >= 1, got {days}")
    today = today or date.today()
    totals = day_totals(log)
    rows = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        key = day.isoformat()
        minutes = int(totals.get(key, 0))
        rows.append(
            {
                "day_key": key,
                "label": f"{day:%b} {day.day}",
                "minutes": minutes,
                "hours": minutes_to_hours(minutes),
            }
        )
    return pd.DataFrame(rows, columns=["day_key", "label", "minutes", "hours"])


def category_distribution(log: DailyLog) -> pd.DataFrame:
    """Minutes/hours per category across all stored days, in fixed category order."""
    frame = records_frame(log)
    sums = frame.groupby("category")["duration_minutes"].sum()
    rows = []
    for category in CATEGORIES:
        minutes = int(sums.get(category, 0))
        rows.append(
            {
                "category": category,
                "label": category_label(category),
                "minutes": minutes,
                "hours": minutes_to_hours(minutes),
            }
        )
    return pd.DataFrame(rows, columns=["category", "label", "minutes", "hours"])


@dataclass(frozen=True)
class ProductivitySplit:
    productive_minutes: int
    leisure_minutes: int

    @property
    def total_minutes(self) -> int:
        return self.productive_minutes + self.leisure_minutes

    @property
    def ratio(self) -> float:
        """Share of logged time in the work category; 0.0 when nothing is logged."""
        if self.total_minutes == 0:
            return 0.0
        return self.productive_minutes / self.total_minutes

    @property
    def productive_hours(self) -> float:
        return minutes_to_hours(self.productive_minutes)

    @property
    def leisure_hours(self) -> float:
        return minutes_to_hours(self.leisure_minutes)


def productivity_split(log: DailyLog) -> ProductivitySplit:
    frame = records_frame(log)
    is_work = frame["category"] == PRODUCTIVE_CATEGORY
    productive = int(frame.loc[is_work, "duration_minutes"].sum())
    leisure = int(frame.loc[~is_work, "duration_minutes"].sum())
    return ProductivitySplit(productive_minutes=productive, leisure_minutes=leisure)


def weekly_pattern(log: DailyLog) -> pd.DataFrame:
    """Average daily usage per weekday (Sunday first).

    ``days`` counts the tracked days that fall on each weekday; a weekday with
    ``days == 0`` has no data and reports 0 hours.
    """
    totals = day_totals(log)
    per_weekday: Dict[int, list] = {idx: [] for idx in range(7)}
    for day_key, minutes in totals.items():
        per_weekday[weekday_index(day_key)].append(int(minutes))

    rows = []
    for idx, label in enumerate(WEEKDAY_LABELS):
        samples = per_weekday[idx]
        avg_minutes = sum(samples) / len(samples) if samples else 0.0
        rows.append(
            {
                "weekday": idx,
                "label": label,
                "days": len(samples),
                "avg_minutes": avg_minutes,
                "avg_hours": minutes_to_hours(avg_minutes),
            }
        )
    return pd.DataFrame(rows, columns=["weekday", "label", "days", "avg_minutes", "avg_hours"])


@dataclass(frozen=True)
class SummaryStats:
    days_tracked: int
    total_minutes: int
    productive_minutes: int
    avg_daily_hours: float
    goal_achievement_percent: int
    productivity_score_percent: int

    def to_dict(self) -> Dict:
        return {
            "days_tracked": self.days_tracked,
            "total_minutes": self.total_minutes,
            "productive_minutes": self.productive_minutes,
            "avg_daily_hours": self.avg_daily_hours,
            "goal_achievement_percent": self.goal_achievement_percent,
            "productivity_score_percent": self.productivity_score_percent,
        }


def summary_stats(log: DailyLog, daily_goal_hours: int = 3) -> SummaryStats:
    totals = day_totals(log)
    days_tracked = int(len(totals))
    total_minutes = int(totals.sum()) if days_tracked else 0
    productive_minutes = productivity_split(log).productive_minutes

    if days_tracked == 0:
        avg_daily_hours = 0.0
    else:
        avg_daily_hours = round_half_up(total_minutes / days_tracked / 60.0, 1)

    goal_minutes = daily_goal_hours * 60 * days_tracked
    if goal_minutes <= 0:
        goal_percent = 0
    else:
        goal_percent = int(round_half_up(total_minutes / goal_minutes * 100.0, 0))
        goal_percent = max(0, min(goal_percent, 100))

    if total_minutes == 0:
        productivity_percent = 0
    else:
        productivity_percent = int(round_half_up(productive_minutes / total_minutes * 100.0, 0))

    return SummaryStats(
        days_tracked=days_tracked,
        total_minutes=total_minutes,
        productive_minutes=productive_minutes,
        avg_daily_hours=avg_daily_hours,
        goal_achievement_percent=goal_percent,
        productivity_score_percent=productivity_percent,
    )
