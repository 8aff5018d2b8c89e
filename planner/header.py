import streamlit as st

from planner.constants import APP_TITLE, VIEW_LABELS, VIEW_OPTIONS


def render_header(ctx):
    cols = st.columns([2.2, 1.8])
    with cols[0]:
        st.markdown(f"## 📅 {APP_TITLE}")
        st.markdown(
            f"<div class='small-label'>{ctx.today_key} • 今日の未完了タスク {ctx.pending_today} 件</div>",
            unsafe_allow_html=True,
        )
    with cols[1]:
        active = st.session_state.get("ui.view", VIEW_OPTIONS[0])
        st.segmented_control(
            "Main navigation",
            VIEW_OPTIONS,
            format_func=lambda view: VIEW_LABELS[view],
            key="ui.view",
            default=active,
            label_visibility="collapsed",
        )
    st.divider()
