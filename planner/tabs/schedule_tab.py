import pandas as pd
import streamlit as st

from planner.dates import add_days, date_key, parse_date_key
from planner.schedule_window import build_schedule_window
from planner.state import session_slices
from planner.tabs.calendar_tab import render_task_row
from planner.visualizations import build_week_overview_rows, format_day_label, week_start

SLICE = "schedule"


def _current_day(today_date):
    raw = session_slices.get_value(SLICE, "current")
    if not raw:
        raw = date_key(today_date)
        session_slices.set_value(SLICE, "current", raw)
    return parse_date_key(raw)


def _step_day(current, delta):
    session_slices.set_value(SLICE, "current", date_key(add_days(current, delta)))


def render_schedule_tab(ctx):
    today_date = ctx.today
    current = _current_day(today_date)

    nav = st.columns([1, 4, 1, 1])
    with nav[0]:
        if st.button("◀", key="schedule.prev_day", help="前の日"):
            _step_day(current, -1)
            st.rerun()
    with nav[1]:
        st.markdown(
            f"<div class='section-title' style='text-align:center;'>{format_day_label(current)}</div>",
            unsafe_allow_html=True,
        )
    with nav[2]:
        if st.button("▶", key="schedule.next_day", help="次の日"):
            _step_day(current, 1)
            st.rerun()
    with nav[3]:
        if current != today_date and st.button("今日", key="schedule.today"):
            session_slices.set_value(SLICE, "current", date_key(today_date))
            st.rerun()

    # The day list follows navigation; the upcoming week stays anchored on today.
    window = build_schedule_window(ctx.tasks, current, upcoming_reference=today_date)

    st.markdown("<div class='section-title'>今日のタスク</div>", unsafe_allow_html=True)
    if window.today_tasks:
        for task in window.today_tasks:
            render_task_row(task, key_prefix="schedule.today")
    else:
        st.caption("今日のタスクはありません。")

    st.divider()
    st.markdown("<div class='section-title'>今後の予定 (一週間)</div>", unsafe_allow_html=True)
    if not window.upcoming_groups:
        st.caption("今後一週間のタスクはありません。")
    for day_key, day_tasks in window.upcoming_groups.items():
        st.markdown(
            f"<div class='upcoming-date'>{format_day_label(day_key, with_year=False)}</div>",
            unsafe_allow_html=True,
        )
        for task in day_tasks:
            render_task_row(task, key_prefix="schedule.upcoming")

    with st.expander("週間サマリー", expanded=False):
        start_day = week_start(current)
        rows = build_week_overview_rows(ctx.date_index, start_day)
        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
