import html
import logging
from datetime import datetime

import streamlit as st
from pydantic import ValidationError

from planner.calendar_grid import WEEK_LENGTH, build_month_grid, weeks
from planner.constants import DEFAULT_TASK_TIME, GOAL_PLACEHOLDER, TAG_LABELS, TAGS
from planner.data import task_store
from planner.dates import date_key, in_calendar_range, parse_date_key, shift_month, year_month_key
from planner.indexing import tasks_on
from planner.schedule_window import sort_by_time
from planner.state import session_slices
from planner.visualizations import (
    day_button_help,
    day_button_label,
    format_day_label,
    tag_badge_html,
    weekday_header_html,
)

logger = logging.getLogger(__name__)

SLICE = "calendar"


def _calendar_state(today_date):
    state = session_slices.get_slice(SLICE)
    if "selected" not in state:
        state["selected"] = date_key(today_date)
    if "month" not in state:
        state["month"] = (today_date.year, today_date.month - 1)
    return state


def _select_day(day_key):
    session_slices.set_value(SLICE, "selected", day_key)


def _shift_month(delta):
    year, month0 = shift_month(*session_slices.get_value(SLICE, "month"), delta)
    if not in_calendar_range(year, month0):
        return
    session_slices.set_value(SLICE, "month", (year, month0))


def _render_monthly_goal(year, month0):
    year_month = year_month_key(year, month0)
    goal = task_store.get_goal(year_month)
    editing_key = f"editing_goal.{year_month}"
    editing = bool(session_slices.get_value(SLICE, editing_key, False))

    head = st.columns([6, 1])
    with head[0]:
        st.markdown("**🏆 今月自分がなりたい姿**")
    with head[1]:
        if not editing and st.button("✏️", key=f"calendar.goal.edit.{year_month}"):
            session_slices.set_value(SLICE, editing_key, True)
            st.rerun()

    if editing:
        with st.form(key=f"calendar.goal.form.{year_month}", clear_on_submit=False):
            text = st.text_input(
                "Goal",
                value=goal,
                placeholder=GOAL_PLACEHOLDER,
                label_visibility="collapsed",
            )
            save = st.form_submit_button("✔ 保存", use_container_width=True)
        if save:
            task_store.set_goal(year_month, text)
            session_slices.set_value(SLICE, editing_key, False)
            st.rerun()
    elif goal:
        st.caption(goal)
    else:
        st.caption(f"_{GOAL_PLACEHOLDER}_")


def _render_month_grid(ctx, state, today_date):
    year, month0 = state["month"]
    nav = st.columns([1, 4, 1])
    with nav[0]:
        if st.button("◀", key="calendar.prev_month", help="前の月"):
            _shift_month(-1)
            st.rerun()
    with nav[1]:
        st.markdown(f"<div class='section-title' style='text-align:center;'>{year}年 {month0 + 1}月</div>", unsafe_allow_html=True)
    with nav[2]:
        if st.button("▶", key="calendar.next_month", help="次の月"):
            _shift_month(1)
            st.rerun()

    cells = build_month_grid(
        year,
        month0,
        state["selected"],
        today_date,
        ctx.date_index,
        task_store.stamped_dates(),
    )
    _render_day_buttons(cells)


def _render_day_buttons(cells):
    header = st.columns(WEEK_LENGTH)
    for idx, col in enumerate(header):
        col.markdown(weekday_header_html(idx), unsafe_allow_html=True)
    for week in weeks(cells):
        for col, cell in zip(st.columns(WEEK_LENGTH), week):
            if cell.is_padding:
                continue
            clicked = col.button(
                day_button_label(cell),
                key=f"calendar.day.{cell.date}",
                help=day_button_help(cell),
                type="primary" if cell.is_selected else "secondary",
                use_container_width=True,
            )
            if clicked:
                _select_day(cell.date)
                st.rerun()


def _render_task_form(selected):
    st.markdown("<div class='section-title'>タスクを追加</div>", unsafe_allow_html=True)
    with st.form(key=f"calendar.add.form.{date_key(selected)}", clear_on_submit=True):
        title = st.text_input("タイトル", placeholder="タスク名")
        cols = st.columns([1.3, 1.0, 1.2])
        with cols[0]:
            due = st.date_input("日付", value=selected)
        with cols[1]:
            start = st.time_input(
                "時間",
                value=datetime.strptime(DEFAULT_TASK_TIME, "%H:%M").time(),
                step=300,
            )
        with cols[2]:
            tag = st.selectbox("タグ", TAGS, format_func=lambda item: TAG_LABELS[item])
        submitted = st.form_submit_button("追加", use_container_width=True)

    if not submitted:
        return
    if not (title or "").strip():
        st.warning("タイトルを入力してください。")
        return
    try:
        task_store.add_task(title, date_key(due), start.strftime("%H:%M"), tag)
    except ValidationError as exc:
        logger.warning("Rejected task input: %s", exc)
        st.warning("日付または時間の形式が正しくありません。")
        return
    st.rerun()


def _render_day_tasks(ctx, selected):
    day_key = date_key(selected)
    head = st.columns([5, 1.4])
    with head[0]:
        st.markdown(f"<div class='section-title'>{format_day_label(selected)}のタスク</div>", unsafe_allow_html=True)
    with head[1]:
        stamped = day_key in task_store.stamped_dates()
        if st.button("★ 解除" if stamped else "☆ スタンプ", key=f"calendar.stamp.{day_key}"):
            task_store.toggle_stamp(day_key)
            st.rerun()

    day_tasks = sort_by_time(tasks_on(ctx.date_index, day_key))
    if not day_tasks:
        st.caption("この日のタスクはありません。")
        return
    for task in day_tasks:
        render_task_row(task, key_prefix="calendar")


def render_task_row(task, key_prefix):
    row = st.columns([0.5, 5.0, 1.0, 1.4, 0.6])
    with row[0]:
        checked = st.checkbox(
            "done",
            value=task.done,
            key=f"{key_prefix}.task.done.{task.id}",
            label_visibility="collapsed",
        )
    with row[1]:
        css = "task-done" if task.done else ""
        title = html.escape(task.title) or "(無題)"
        st.markdown(f"<span class='{css}'>{title}</span>", unsafe_allow_html=True)
    with row[2]:
        st.caption(task.time)
    with row[3]:
        st.markdown(tag_badge_html(task.tag), unsafe_allow_html=True)
    with row[4]:
        delete = st.button("✕", key=f"{key_prefix}.task.delete.{task.id}")

    if checked != task.done:
        task_store.toggle_task(task.id)
        st.rerun()
    if delete:
        task_store.delete_task(task.id)
        st.rerun()


def render_calendar_tab(ctx):
    today_date = ctx.today
    state = _calendar_state(today_date)
    selected = parse_date_key(state["selected"])

    layout = st.columns([1.1, 1.0], gap="large")
    with layout[0]:
        _render_monthly_goal(*state["month"])
        _render_month_grid(ctx, state, today_date)
    with layout[1]:
        _render_task_form(selected)
        st.divider()
        _render_day_tasks(ctx, selected)