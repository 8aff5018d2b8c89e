import streamlit as st

from planner.constants import VIEW_CALENDAR, VIEW_OPTIONS, VIEW_SCHEDULE
from planner.tabs.calendar_tab import render_calendar_tab
from planner.tabs.schedule_tab import render_schedule_tab
from planner.tabs.tennis_tab import render_tennis_tab


def render_router(ctx):
    # segmented_control returns None when the active option is clicked again.
    active = st.session_state.get("ui.view") or VIEW_OPTIONS[0]

    if active == VIEW_CALENDAR:
        return _render_calendar(ctx)

    if active == VIEW_SCHEDULE:
        return _render_schedule(ctx)

    return _render_tennis(ctx)


@st.fragment
def _render_calendar(ctx):
    render_calendar_tab(ctx)


@st.fragment
def _render_schedule(ctx):
    render_schedule_tab(ctx)


@st.fragment
def _render_tennis(ctx):
    render_tennis_tab(ctx)
