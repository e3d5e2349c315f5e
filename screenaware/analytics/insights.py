"""Rule-based advisory messages derived from aggregated metrics."""

from __future__ import annotations

import logging
from typing import List

from screenaware.analytics.aggregate import (
    ProductivitySplit,
    SummaryStats,
    productivity_split,
    round_half_up,
    summary_stats,
)
from screenaware.types import DailyLog, Insight

LOGGER = logging.getLogger("screenaware.insights")

LOW_PRODUCTIVITY_RATIO = 0.30
HIGH_PRODUCTIVITY_RATIO = 0.60
HIGH_USAGE_HOURS = 5.0
MODERATE_USAGE_HOURS = 2.0
MIN_DAYS_TRACKED = 3


def _percent(ratio: float) -> int:
    return int(round_half_up(ratio * 100.0, 0))


def generate_insights(summary: SummaryStats, split: ProductivitySplit) -> List[Insight]:
    """Evaluate the rule table in order; the result may be empty."""
    insights: List[Insight] = []

    # Ratio is meaningless until something has been logged.
    if split.total_minutes > 0:
        ratio = split.ratio
        if ratio < LOW_PRODUCTIVITY_RATIO:
            insights.append(
                Insight(
                    severity="warning",
                    icon="⚠️",
                    title="Low Productivity Ratio",
                    message=(
                        f"Only {_percent(ratio)}% of your screen time is productive. "
                        "Consider setting specific work periods."
                    ),
                )
            )
        elif ratio > HIGH_PRODUCTIVITY_RATIO:
            insights.append(
                Insight(
                    severity="success",
                    icon="🎉",
                    title="Great Productivity Balance",
                    message=f"{_percent(ratio)}% of your screen time is productive. Excellent balance!",
                )
            )

    avg_hours = summary.avg_daily_hours
    if avg_hours > HIGH_USAGE_HOURS:
        insights.append(
            Insight(
                severity="warning",
                icon="📱",
                title="High Daily Usage",
                message=f"You're averaging {avg_hours} hours daily. Consider implementing screen-free periods.",
            )
        )
    elif avg_hours < MODERATE_USAGE_HOURS:
        insights.append(
            Insight(
                severity="info",
                icon="ℹ️",
                title="Moderate Usage",
                message=f"Your average of {avg_hours} hours daily shows good digital balance.",
            )
        )

    if summary.days_tracked < MIN_DAYS_TRACKED:
        insights.append(
            Insight(
                severity="info",
                icon="📅",
                title="Track More Days",
                message="Track a few more days to get better insights into your usage patterns.",
            )
        )

    LOGGER.debug("Generated %d insights: %s", len(insights), [i.title for i in insights])
    return insights


def dashboard_insights(log: DailyLog, daily_goal_hours: int = 3) -> List[Insight]:
    return generate_insights(summary_stats(log, daily_goal_hours), productivity_split(log))
