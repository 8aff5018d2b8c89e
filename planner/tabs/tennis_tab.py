import html

import streamlit as st

from planner.services.tennis_results import TennisResultsError, fetch_tennis_results
from planner.state import session_slices

SLICE = "tennis"


def _load_results(settings):
    cached = session_slices.get_slice(SLICE)
    if "results" in cached or "error" in cached:
        return cached.get("results"), cached.get("error")
    with st.spinner("試合結果を取得中..."):
        try:
            results = fetch_tennis_results(
                settings.gemini_api_key,
                model=settings.gemini_model,
                timeout=settings.request_timeout,
            )
        except TennisResultsError as exc:
            session_slices.update_slice(SLICE, {"results": None, "error": str(exc)})
            return None, str(exc)
    session_slices.update_slice(SLICE, {"results": results, "error": None})
    return results, None


def _render_sources(sources):
    if not sources:
        return
    st.markdown("<div class='small-label'>参考資料:</div>", unsafe_allow_html=True)
    items = "".join(
        (
            f"<li><a href='{html.escape(source.uri)}' target='_blank' rel='noopener noreferrer' "
            f"title='{html.escape(source.title)}'>{html.escape(source.title)}</a></li>"
        )
        for source in sources
    )
    st.markdown(f"<ul>{items}</ul>", unsafe_allow_html=True)


def render_tennis_tab(ctx):
    st.markdown("<div class='section-title'>🎾 直近のテニスの試合結果</div>", unsafe_allow_html=True)
    results, error = _load_results(ctx.settings)
    if error:
        st.markdown(f"<div class='fetch-error'>{html.escape(error)}</div>", unsafe_allow_html=True)
        return
    st.text(results.text)
    _render_sources(results.sources)
