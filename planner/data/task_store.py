import json
import logging

from pydantic import ValidationError

from planner.models import load_tasks, new_task
from planner.state import session_slices

logger = logging.getLogger(__name__)

STORE_SLICE = "store"


def _tasks():
    return session_slices.setdefault(STORE_SLICE, "tasks", list)


def _replace_tasks(items):
    # A new list object on every change marks derived views as stale.
    session_slices.set_value(STORE_SLICE, "tasks", list(items))


def list_tasks():
    return list(_tasks())


def add_task(title, due_date, time, tag="other"):
    task = new_task(title, due_date, time, tag)
    _replace_tasks(_tasks() + [task])
    logger.info("Added task %s due %s %s", task.id, task.due_date, task.time)
    return task


def toggle_task(task_id):
    items = _tasks()
    updated = []
    found = None
    for task in items:
        if task.id == task_id:
            task = task.model_copy(update={"done": not task.done})
            found = task
        updated.append(task)
    if found is None:
        logger.debug("toggle_task ignored unknown id %s", task_id)
        return None
    _replace_tasks(updated)
    return found


def delete_task(task_id):
    items = _tasks()
    remaining = [task for task in items if task.id != task_id]
    if len(remaining) == len(items):
        logger.debug("delete_task ignored unknown id %s", task_id)
        return False
    _replace_tasks(remaining)
    return True


def get_goal(year_month):
    goals = session_slices.setdefault(STORE_SLICE, "goals", dict)
    return goals.get(year_month, "")


def set_goal(year_month, text):
    goals = dict(session_slices.setdefault(STORE_SLICE, "goals", dict))
    clean = (text or "").strip()
    if clean:
        goals[year_month] = clean
    else:
        goals.pop(year_month, None)
    session_slices.set_value(STORE_SLICE, "goals", goals)


def stamped_dates():
    return frozenset(session_slices.setdefault(STORE_SLICE, "stamps", frozenset))


def toggle_stamp(day_key):
    stamps = set(stamped_dates())
    if day_key in stamps:
        stamps.discard(day_key)
    else:
        stamps.add(day_key)
    session_slices.set_value(STORE_SLICE, "stamps", frozenset(stamps))
    return day_key in stamps


def seed_from_file(path):
    """Load tasks from a JSON list of task records, once per session.

    Returns the number of tasks loaded. An unreadable or invalid file leaves
    the store untouched and the error propagates to the caller.
    """
    if session_slices.get_value(STORE_SLICE, "seeded_from") == path:
        return 0
    with open(path, "r", encoding="utf-8") as file_handle:
        payload = json.load(file_handle)
    if isinstance(payload, dict):
        payload = payload.get("tasks", [])
    try:
        tasks = load_tasks(payload)
    except ValidationError:
        logger.exception("Invalid task records in %s", path)
        raise
    _replace_tasks(_tasks() + tasks)
    session_slices.set_value(STORE_SLICE, "seeded_from", path)
    logger.info("Seeded %d tasks from %s", len(tasks), path)
    return len(tasks)
