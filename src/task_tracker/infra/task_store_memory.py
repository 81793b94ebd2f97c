from __future__ import annotations
import threading
from typing import List, Optional

from task_tracker.domain.editor import build_task
from task_tracker.domain.task_models import Task, TaskDraft, TaskStats


class InMemoryTaskStore:
    """
    Ordered in-memory task store. Nothing is persisted.

    Null/blank input to add/remove/mark_complete is absorbed as a no-op and
    reported through the return value, never raised. Every operation holds
    the lock, so request handlers on worker threads cannot see a half-applied
    change.
    """
    def __init__(self):
        self._tasks: List[Task] = []
        self._lock = threading.RLock()

    def add(self, task: Optional[Task]) -> bool:
        if task is None:
            return False
        with self._lock:
            self._tasks.append(task)
        return True

    def add_title(self, title: Optional[str]) -> Optional[Task]:
        """Add a default MEDIUM task by title; returns None for a blank title."""
        if title is None or not title.strip():
            return None
        task = Task(title=title.strip())
        self.add(task)
        return task

    def remove(self, task: Optional[Task]) -> bool:
        if task is None:
            return False
        with self._lock:
            for i, t in enumerate(self._tasks):
                if t.id == task.id:
                    del self._tasks[i]
                    return True
        return False

    def mark_complete(self, task: Optional[Task]) -> bool:
        if task is None:
            return False
        with self._lock:
            task.completed = True
        return True

    def edit(self, task: Task, draft: TaskDraft) -> Task:
        # Raises TaskValidationError with the task left as it was.
        with self._lock:
            return build_task(draft, existing=task)

    def get(self, task_id: str) -> Optional[Task]:
        with self._lock:
            for t in self._tasks:
                if t.id == task_id:
                    return t
        return None

    def snapshot(self) -> List[Task]:
        with self._lock:
            return list(self._tasks)

    def total_count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def completed_count(self) -> int:
        with self._lock:
            return sum(1 for t in self._tasks if t.completed)

    def completion_percent(self) -> float:
        with self._lock:
            total = self.total_count()
            if total == 0:
                return 0.0
            return self.completed_count() * 100.0 / total

    def stats(self) -> TaskStats:
        with self._lock:
            total = self.total_count()
            completed = self.completed_count()
            return TaskStats(
                total=total,
                completed=completed,
                remaining=total - completed,
                percent=self.completion_percent(),
            )
