import os

import streamlit as st

from planner.constants import APP_TITLE
from planner.context import PlannerContext
from planner.data import task_store
from planner.dates import today
from planner.header import render_header
from planner.logging_config import configure_logging
from planner.router import render_router
from planner.settings import get_settings
from planner.theme import inject_theme_css

ENV_FALLBACK_KEYS = {
    ("gemini", "api_key"): "GEMINI_API_KEY",
    ("app", "tasks_file"): "PLANNER_TASKS_FILE",
}

logger = configure_logging().getChild("app")


def get_secret(path, default=None):
    env_key = ENV_FALLBACK_KEYS.get(tuple(path))
    if env_key:
        env_value = os.getenv(env_key)
        if env_value:
            return env_value
    current = st.secrets
    for key in path:
        try:
            if key not in current:
                return default
            current = current[key]
        except Exception:
            return default
    return current


def load_settings():
    settings = get_settings()
    overrides = {}
    if not settings.gemini_api_key:
        overrides["gemini_api_key"] = get_secret(("gemini", "api_key"))
    if not settings.tasks_file:
        overrides["tasks_file"] = get_secret(("app", "tasks_file"))
    overrides = {key: value for key, value in overrides.items() if value}
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


def seed_tasks(settings):
    if not settings.tasks_file:
        return
    try:
        task_store.seed_from_file(settings.tasks_file)
    except (OSError, ValueError) as exc:
        logger.warning("Could not load tasks from %s: %s", settings.tasks_file, exc)
        st.warning(f"タスクファイルを読み込めませんでした: {exc}")


st.set_page_config(page_title=APP_TITLE, page_icon="📅", layout="wide")
inject_theme_css()

settings = load_settings()
seed_tasks(settings)

context = PlannerContext.build(settings, today(settings.timezone), task_store.list_tasks())

render_header(context)
render_router(context)
