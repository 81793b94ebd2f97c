"""
Pure display helpers for any front-end: labels, tooltip text and the
overdue/upcoming/done classification. No styling decisions are made here.
"""
from __future__ import annotations
from datetime import date
from enum import Enum

from pydantic import BaseModel

from task_tracker.domain.task_models import Task, TaskStats


class TaskUrgency(str, Enum):
    overdue = "overdue"
    upcoming = "upcoming"
    done = "done"


class TaskView(BaseModel):
    task: Task
    label: str
    tooltip: str
    due_label: str
    urgency: TaskUrgency


def due_date_label(task: Task) -> str:
    if task.due_date is None:
        return ""
    return task.due_date.isoformat()


def classify(task: Task, today: date) -> TaskUrgency:
    if task.completed:
        return TaskUrgency.done
    if task.due_date is not None and task.due_date < today:
        return TaskUrgency.overdue
    return TaskUrgency.upcoming


def task_label(task: Task) -> str:
    """e.g. `✘ [HIGH] Finish Project (Due: 2025-02-14) - For: John [School]`"""
    parts = ["✔ " if task.completed else "✘ ", f"[{task.priority.value.upper()}] ", task.title]
    if task.due_date is not None:
        parts.append(f" (Due: {due_date_label(task)})")
    if task.assignee.strip():
        parts.append(f" - For: {task.assignee}")
    if task.type.strip():
        parts.append(f" [{task.type}]")
    return "".join(parts)


def task_tooltip(task: Task) -> str:
    lines = [task.title, f"Priority: {task.priority.value.upper()}"]
    if task.assignee.strip():
        lines.append(f"For: {task.assignee}")
    if task.due_date is not None:
        lines.append(f"Due: {due_date_label(task)}")
    if task.type.strip():
        lines.append(f"Type: {task.type}")
    lines.append("Status: " + ("Completed" if task.completed else "Pending"))
    return "\n".join(lines)


def to_view(task: Task, today: date) -> TaskView:
    return TaskView(
        task=task,
        label=task_label(task),
        tooltip=task_tooltip(task),
        due_label=due_date_label(task),
        urgency=classify(task, today),
    )


def stats_line(stats: TaskStats) -> str:
    if stats.total == 0:
        return "No tasks yet."
    return f"Total: {stats.total} | Completed: {stats.completed} | Remaining: {stats.remaining}"


def percent_label(stats: TaskStats) -> str:
    return f"{stats.percent:.1f}%"
