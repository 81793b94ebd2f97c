"""
Turns raw form input into a Task, or applies it to an existing one.

All domain rules live here. Validation finishes before any field is
written, so a rejected edit leaves the existing task untouched.
"""
from __future__ import annotations
from datetime import date
from typing import Optional

from task_tracker.domain.errors import TaskValidationError, ValidationErrorKind
from task_tracker.domain.task_models import Task, TaskDraft, TaskPriority


def build_task(draft: TaskDraft, existing: Optional[Task] = None) -> Task:
    title = (draft.title or "").strip()
    if not title:
        raise TaskValidationError(ValidationErrorKind.missing_title, "Please enter a task title.")

    due_date = _resolve_due_date(draft)
    assignee = (draft.assignee or "").strip()
    task_type = draft.type or ""
    priority = draft.priority or TaskPriority.medium

    if existing is None:
        return Task(
            title=title,
            assignee=assignee,
            due_date=due_date,
            type=task_type,
            priority=priority,
        )

    # edits never touch `completed`
    existing.title = title
    existing.assignee = assignee
    existing.due_date = due_date
    existing.type = task_type
    existing.priority = priority
    return existing


def _resolve_due_date(draft: TaskDraft) -> Optional[date]:
    if draft.no_due_date:
        return None

    if draft.day is None or draft.month is None or draft.year is None:
        raise TaskValidationError(
            ValidationErrorKind.invalid_date,
            "Please select a valid day, month, and year.",
        )

    try:
        return date(draft.year, draft.month, draft.day)
    except (ValueError, OverflowError):
        raise TaskValidationError(ValidationErrorKind.invalid_date, "That date is not valid.") from None


def draft_from_task(task: Task) -> TaskDraft:
    """Prefill values for editing an existing task."""
    if task.due_date is None:
        return TaskDraft(
            title=task.title,
            assignee=task.assignee,
            no_due_date=True,
            type=task.type,
            priority=task.priority,
        )
    return TaskDraft(
        title=task.title,
        assignee=task.assignee,
        day=task.due_date.day,
        month=task.due_date.month,
        year=task.due_date.year,
        type=task.type,
        priority=task.priority,
    )
