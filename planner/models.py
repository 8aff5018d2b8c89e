from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable, List, Mapping
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from planner.dates import parse_date_key

TIME_PATTERN = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")


class TaskTag(str, Enum):
    WORK = "work"
    PRIVATE = "private"
    STUDY = "study"
    OTHER = "other"


class Task(BaseModel):
    """A task as supplied by the host. Read-only to the planner core."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )

    id: str
    title: str = ""
    due_date: str = Field(..., alias="dueDate")
    time: str
    tag: TaskTag = TaskTag.OTHER
    done: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value)

    @field_validator("due_date")
    @classmethod
    def _check_due_date(cls, value: str) -> str:
        parse_date_key(value)
        return value

    @field_validator("time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        if not TIME_PATTERN.match(value):
            raise ValueError(f"Time must be zero-padded HH:MM: {value!r}")
        return value

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def load_tasks(records: Iterable[Mapping[str, Any]]) -> List[Task]:
    return [Task.model_validate(dict(record)) for record in records]


def new_task(title: str, due_date: str, time: str, tag: str = "other") -> Task:
    return Task(
        id=uuid4().hex,
        title=(title or "").strip(),
        due_date=due_date,
        time=time,
        tag=tag,
    )
