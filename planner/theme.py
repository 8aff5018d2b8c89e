import streamlit as st

THEME_PRESETS = {
    "light": {
        "bg_main": "#f9fafb",
        "bg_card": "#ffffff",
        "border": "#e5e7eb",
        "text_main": "#1f2937",
        "text_soft": "#6b7280",
        "accent": "#2563eb",
        "accent_soft": "#dbeafe",
        "accent_text": "#1d4ed8",
        "error": "#ef4444",
    },
    "dark": {
        "bg_main": "#111827",
        "bg_card": "#1f2937",
        "border": "#374151",
        "text_main": "#f3f4f6",
        "text_soft": "#9ca3af",
        "accent": "#3b82f6",
        "accent_soft": "rgba(59, 130, 246, 0.2)",
        "accent_text": "#93c5fd",
        "error": "#f87171",
    },
}


def ensure_theme_state():
    if st.session_state.get("ui.theme") not in THEME_PRESETS:
        st.session_state["ui.theme"] = "light"


def get_active_theme():
    ensure_theme_state()
    name = st.session_state["ui.theme"]
    return name, THEME_PRESETS[name]


def inject_theme_css() -> dict:
    active_name, active_theme = get_active_theme()
    theme_vars_css = "\n".join(
        f"    --{key.replace('_', '-')}: {value};" for key, value in active_theme.items()
    )

    st.markdown(
        "<style>\n:root {\n"
        + theme_vars_css
        + "\n}\n"
        + """
.stApp {
    background: var(--bg-main);
    color: var(--text-main);
}

.section-title {
    font-size: 18px;
    font-weight: 700;
    margin: 0 0 10px 0;
}

.small-label {
    color: var(--text-soft);
    font-size: 12px;
}

.weekday-label {
    text-align: center;
    font-size: 13px;
    font-weight: 600;
    color: var(--text-soft);
}

.tag-badge {
    border-radius: 999px;
    padding: 1px 8px;
    font-size: 11px;
    color: #ffffff;
}

.task-done {
    text-decoration: line-through;
    color: var(--text-soft);
}

.upcoming-date {
    font-weight: 600;
    color: var(--accent-text);
    margin: 10px 0 4px 0;
}

.fetch-error {
    color: var(--error);
    text-align: center;
    padding: 12px 0;
}
"""
        + "</style>",
        unsafe_allow_html=True,
    )

    return {"name": active_name, "theme": active_theme}
