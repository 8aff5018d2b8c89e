from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List

from planner.dates import date_key
from planner.indexing import DateIndex, index_tasks
from planner.models import Task
from planner.settings import Settings


@dataclass(frozen=True)
class PlannerContext:
    """Everything a tab needs for one run of the script."""

    settings: Settings
    today: date
    tasks: List[Task] = field(default_factory=list)
    date_index: DateIndex = field(default_factory=dict)

    @classmethod
    def build(cls, settings, today, tasks):
        items = list(tasks)
        return cls(settings=settings, today=today, tasks=items, date_index=index_tasks(items))

    @property
    def today_key(self) -> str:
        return date_key(self.today)

    @property
    def pending_today(self) -> int:
        return sum(1 for task in self.date_index.get(self.today_key, ()) if not task.done)
