"""Streamlit app for logging activities, viewing the dashboard and taking the quiz."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import List

import streamlit as st

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from screenaware.analytics import aggregate
from screenaware.analytics.insights import generate_insights
from screenaware.analytics.tracker import day_overview, week_chart
from screenaware.config import add_settings_args, settings_from_args
from screenaware.export import dumps_daily_log
from screenaware.io_utils import setup_logging
from screenaware.quiz import QuizSession, QuizState, load_result
from screenaware.quiz.engine import score_message, share_text
from screenaware.storage import ActivityStore, duration_from_parts, today_key
from screenaware.storage.activity_store import MAX_GOAL_HOURS, MIN_GOAL_HOURS
from screenaware.types import CATEGORIES, ValidationError, category_label, format_duration


def parse_cli_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(add_help=False)
    add_settings_args(parser)
    args, _ = parser.parse_known_args(argv)
    return args


SETTINGS = settings_from_args(parse_cli_args(sys.argv[1:]))
setup_logging(SETTINGS.logging_level)

st.set_page_config(page_title="Screen Time Awareness", layout="wide")


def get_store() -> ActivityStore:
    if "store" not in st.session_state:
        st.session_state["store"] = ActivityStore.open(SETTINGS.storage_path, SETTINGS.default_goal_hours)
    return st.session_state["store"]


def get_quiz(store: ActivityStore) -> QuizSession:
    if "quiz" not in st.session_state:
        st.session_state["quiz"] = QuizSession(storage=store.storage)
    return st.session_state["quiz"]


def render_tracker(store: ActivityStore) -> None:
    today = date.today()
    overview = day_overview(store.all_days(), today_key(today), store.daily_goal_hours)

    col_total, col_work, col_social = st.columns(3)
    col_total.metric("Today", overview.total_text)
    col_work.metric("Productive", format_duration(overview.category_minutes["work"]))
    col_social.metric("Social", format_duration(overview.category_minutes["social"]))
    st.progress(overview.goal_progress_percent / 100.0, text=overview.goal_text)

    goal = st.number_input(
        "Daily goal (hours)",
        min_value=MIN_GOAL_HOURS,
        max_value=MAX_GOAL_HOURS,
        value=store.daily_goal_hours,
    )
    if int(goal) != store.daily_goal_hours:
        store.set_daily_goal_hours(int(goal))
        st.rerun()

    with st.form("add_activity", clear_on_submit=True):
        category = st.selectbox("Activity type", CATEGORIES, format_func=category_label)
        col_h, col_m = st.columns(2)
        hours = col_h.number_input("Hours", min_value=0, max_value=23, value=0)
        minutes = col_m.number_input("Minutes", min_value=0, max_value=59, value=30)
        description = st.text_input("Description (optional)")
        if st.form_submit_button("Add Activity"):
            try:
                store.add_activity(
                    today_key(today),
                    category,
                    duration_from_parts(int(hours), int(minutes)),
                    description,
                )
            except ValidationError as exc:
                st.error(f"Please select activity type and enter duration ({exc})")
            else:
                st.rerun()

    st.subheader("Today's activities")
    if not overview.activities:
        st.info('No activities logged today. Click "Add Activity" to start tracking.')
    for record in overview.activities:
        st.write(f"**{record.description}** · {record.label} · {format_duration(record.duration_minutes)}")

    st.subheader("This week")
    st.bar_chart(week_chart(store.all_days(), today), x="label", y="percentage")


def render_dashboard(store: ActivityStore) -> None:
    log = store.all_days()
    stats = aggregate.summary_stats(log, store.daily_goal_hours)
    split = aggregate.productivity_split(log)

    cols = st.columns(4)
    cols[0].metric("Average daily time", f"{stats.avg_daily_hours}h")
    cols[1].metric("Goal achievement", f"{stats.goal_achievement_percent}%")
    cols[2].metric("Productivity score", f"{stats.productivity_score_percent}%")
    cols[3].metric("Days tracked", stats.days_tracked)

    trend_col, pie_col = st.columns(2)
    with trend_col:
        st.caption("Screen Time Over Time (hours)")
        st.line_chart(aggregate.trend(log, SETTINGS.trend_days), x="label", y="hours")
    with pie_col:
        st.caption("Activity distribution (hours)")
        st.bar_chart(aggregate.category_distribution(log), x="label", y="hours")

    prod_col, week_col = st.columns(2)
    with prod_col:
        st.caption("Productive vs leisure (hours)")
        st.bar_chart({"Productive": [split.productive_hours], "Leisure": [split.leisure_hours]})
    with week_col:
        st.caption("Average daily usage by weekday (hours)")
        st.bar_chart(aggregate.weekly_pattern(log), x="label", y="avg_hours")

    st.subheader("Insights")
    for insight in generate_insights(stats, split):
        box = {"warning": st.warning, "success": st.success}.get(insight.severity, st.info)
        box(f"{insight.icon} **{insight.title}** {insight.message}")

    st.download_button(
        "Export data",
        data=dumps_daily_log(log),
        file_name=SETTINGS.export_filename,
        mime="application/json",
    )


def render_quiz(store: ActivityStore) -> None:
    quiz = get_quiz(store)
    if quiz.state is QuizState.COMPLETED and quiz.result is not None:
        result = quiz.result
        st.metric("Score", f"{result.score}/{result.total}")
        st.write(score_message(result.percentage))
        st.code(share_text(result), language=None)
        if st.button("Retake quiz"):
            quiz.retake()
            st.rerun()
        return

    st.progress(quiz.progress_percent / 100.0, text=quiz.progress_text)
    question = quiz.current_question
    current = quiz.answers.get(quiz.current_index)
    choice = st.radio(
        question.prompt,
        list(range(len(question.options))),
        index=current,
        format_func=lambda idx: question.options[idx],
        key=f"quiz_q{quiz.current_index}",
    )
    if choice is not None and choice != current:
        quiz.select_answer(choice)

    prev_col, next_col = st.columns(2)
    if prev_col.button("Previous", disabled=quiz.current_index == 0):
        quiz.retreat()
        st.rerun()
    if quiz.is_last_question:
        if next_col.button("Submit"):
            quiz.submit()
            st.rerun()
    elif next_col.button("Next"):
        quiz.advance()
        st.rerun()

    previous = load_result(store.storage)
    if previous is not None:
        st.caption(f"Last result: {previous.score}/{previous.total} ({previous.percentage:.0f}%)")


def main() -> None:
    store = get_store()
    tracker_tab, dashboard_tab, quiz_tab = st.tabs(["Tracker", "Dashboard", "Quiz"])
    with tracker_tab:
        render_tracker(store)
    with dashboard_tab:
        render_dashboard(store)
    with quiz_tab:
        render_quiz(store)


main()
