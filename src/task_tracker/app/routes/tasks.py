from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from task_tracker.domain.display import TaskView, to_view
from task_tracker.domain.editor import draft_from_task
from task_tracker.domain.filters import TaskFilter
from task_tracker.domain.task_models import SUGGESTED_TYPES, Task, TaskDraft, TaskStats, suggested_years
from task_tracker.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


class QuickAdd(BaseModel):
    title: Optional[str] = None


class QuickAddResult(BaseModel):
    added: bool
    task: Optional[Task] = None


class Suggestions(BaseModel):
    types: list[str]
    years: list[int]


def get_service(request: Request) -> TaskService:
    # Wired in main.create_app
    return request.app.state.task_service


async def _get_or_404(svc: TaskService, task_id: str) -> Task:
    task = await svc.get_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.post("", response_model=Task, status_code=201)
async def create_task(payload: TaskDraft, svc: TaskService = Depends(get_service)):
    return await svc.create_task(payload)


@router.post("/quick", response_model=QuickAddResult)
async def quick_add(payload: QuickAdd, svc: TaskService = Depends(get_service)):
    task = await svc.quick_add(payload.title)
    return QuickAddResult(added=task is not None, task=task)


@router.get("", response_model=list[TaskView])
async def list_tasks(filter: TaskFilter = TaskFilter.all, svc: TaskService = Depends(get_service)):
    today = date.today()
    return [to_view(t, today) for t in await svc.list_tasks(filter)]


@router.get("/stats", response_model=TaskStats)
async def get_stats(svc: TaskService = Depends(get_service)):
    return await svc.stats()


@router.get("/suggestions", response_model=Suggestions)
async def get_suggestions():
    return Suggestions(types=list(SUGGESTED_TYPES), years=suggested_years(date.today()))


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: str, svc: TaskService = Depends(get_service)):
    return await _get_or_404(svc, task_id)


@router.get("/{task_id}/draft", response_model=TaskDraft)
async def get_task_draft(task_id: str, svc: TaskService = Depends(get_service)):
    return draft_from_task(await _get_or_404(svc, task_id))


@router.put("/{task_id}", response_model=Task)
async def edit_task(task_id: str, payload: TaskDraft, svc: TaskService = Depends(get_service)):
    task = await svc.edit_task(task_id, payload)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.post("/{task_id}/complete", response_model=Task)
async def complete_task(task_id: str, svc: TaskService = Depends(get_service)):
    task = await svc.complete_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.delete("/{task_id}")
async def delete_task(task_id: str, svc: TaskService = Depends(get_service)):
    if not await svc.delete_task(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    return {"deleted": True, "id": task_id}
