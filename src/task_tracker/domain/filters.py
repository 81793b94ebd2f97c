from __future__ import annotations
from enum import Enum
from typing import Iterable, List

from task_tracker.domain.task_models import Task


class TaskFilter(str, Enum):
    all = "all"
    completed = "completed"
    pending = "pending"


def matches(task: Task, mode: TaskFilter) -> bool:
    if mode == TaskFilter.completed:
        return task.completed
    if mode == TaskFilter.pending:
        return not task.completed
    return True


def apply_filter(tasks: Iterable[Task], mode: TaskFilter) -> List[Task]:
    # Works on a snapshot; never touches the store.
    return [t for t in tasks if matches(t, mode)]
