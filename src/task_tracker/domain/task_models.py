from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum
from datetime import date
from typing import Any, Optional
import uuid

# Offered to the UI as suggestions; any other type text is accepted.
SUGGESTED_TYPES = ("General", "School", "Work", "Personal", "Other")


class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


def new_task_id() -> str:
    return str(uuid.uuid4())


class Task(BaseModel):
    """
    One trackable item of work.

    Mutable in place: edits overwrite fields, `id` is the handle the store
    matches on. Assignments are validated so `priority` never leaves the enum.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_task_id)
    title: str = Field(min_length=1)
    assignee: str = ""
    due_date: Optional[date] = None
    type: str = ""
    priority: TaskPriority = TaskPriority.medium
    completed: bool = False

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v

    @field_validator("assignee", "type", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("priority", mode="before")
    @classmethod
    def _default_priority(cls, v: Any) -> Any:
        return TaskPriority.medium if v is None else v


class TaskDraft(BaseModel):
    """Raw form input, before the editor has validated it."""
    title: Optional[str] = None
    assignee: Optional[str] = None
    no_due_date: bool = False
    day: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None
    type: Optional[str] = None
    priority: Optional[TaskPriority] = None


class TaskStats(BaseModel):
    total: int = 0
    completed: int = 0
    remaining: int = 0
    percent: float = 0.0


def suggested_years(today: date) -> list[int]:
    # last year through five years ahead
    return list(range(today.year - 1, today.year + 6))
