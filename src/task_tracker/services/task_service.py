import logging
from typing import List, Optional
from task_tracker.domain.editor import build_task
from task_tracker.domain.errors import TaskValidationError
from task_tracker.domain.filters import TaskFilter, apply_filter
from task_tracker.domain.task_models import Task, TaskDraft, TaskStats
from task_tracker.infra.task_store_memory import InMemoryTaskStore

logger = logging.getLogger("tasktracker.tasks")


class TaskService:
    def __init__(self, store: InMemoryTaskStore):
        self.store = store

    async def create_task(self, draft: TaskDraft) -> Task:
        try:
            task = build_task(draft)
        except TaskValidationError as e:
            self._log_rejected("task.create", e)
            raise
        self.store.add(task)
        logger.info("task.create", extra={"category": "tasks", "event": "task.create", "task_id": task.id, "title": task.title})
        return task

    async def quick_add(self, title: Optional[str]) -> Optional[Task]:
        task = self.store.add_title(title)
        if task is None:
            logger.debug("task.quick_add.ignored", extra={"category": "tasks", "event": "task.quick_add.ignored"})
            return None
        logger.info("task.create", extra={"category": "tasks", "event": "task.create", "task_id": task.id, "title": task.title})
        return task

    async def get_task(self, task_id: str) -> Optional[Task]:
        return self.store.get(task_id)

    async def list_tasks(self, mode: TaskFilter = TaskFilter.all) -> List[Task]:
        return apply_filter(self.store.snapshot(), mode)

    async def edit_task(self, task_id: str, draft: TaskDraft) -> Optional[Task]:
        task = self.store.get(task_id)
        if task is None:
            return None
        try:
            self.store.edit(task, draft)
        except TaskValidationError as e:
            self._log_rejected("task.edit", e, task_id=task_id)
            raise
        logger.info("task.edit", extra={"category": "tasks", "event": "task.edit", "task_id": task.id, "title": task.title})
        return task

    async def complete_task(self, task_id: str) -> Optional[Task]:
        task = self.store.get(task_id)
        if task is None:
            return None
        self.store.mark_complete(task)
        logger.info("task.complete", extra={"category": "tasks", "event": "task.complete", "task_id": task.id})
        return task

    async def delete_task(self, task_id: str) -> bool:
        removed = self.store.remove(self.store.get(task_id))
        if removed:
            logger.info("task.delete", extra={"category": "tasks", "event": "task.delete", "task_id": task_id})
        return removed

    async def stats(self) -> TaskStats:
        return self.store.stats()

    def _log_rejected(self, event: str, e: TaskValidationError, task_id: Optional[str] = None) -> None:
        logger.warning(
            f"{event}.rejected",
            extra={"category": "tasks", "event": f"{event}.rejected", "kind": e.kind.value, "task_id": task_id},
        )
