from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence

from planner.models import Task

DateIndex = Dict[str, List[Task]]


def index_tasks(tasks: Iterable[Task]) -> DateIndex:
    """Group tasks by due date, keeping input order inside each group.

    Keys are taken literally from ``due_date``; dates without tasks have no
    entry. The input is never mutated.
    """
    index: DateIndex = {}
    for task in tasks:
        index.setdefault(task.due_date, []).append(task)
    return index


def tasks_on(index: Mapping[str, Sequence[Task]], key: str) -> List[Task]:
    return list(index.get(key, ()))
