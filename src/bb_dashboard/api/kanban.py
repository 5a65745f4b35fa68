"""Kanban board API endpoints."""

from fastapi import APIRouter, HTTPException

from bb_dashboard.api.deps import KanbanStoreDep
from bb_dashboard.core.exceptions import TaskNotFoundError
from bb_dashboard.models.kanban import Task, TaskCreate, TaskUpdate

router = APIRouter(prefix="/api/kanban", tags=["kanban"])


@router.get("")
async def list_tasks(kanban: KanbanStoreDep) -> dict:
    """List all tasks on the board."""
    return {"tasks": [t.model_dump(mode="json", by_alias=True) for t in kanban.list_tasks()]}


@router.post("", response_model=Task, status_code=201)
async def create_task(request: TaskCreate, kanban: KanbanStoreDep) -> Task:
    """Create a task."""
    return kanban.create(request)


@router.patch("/{task_id}", response_model=Task)
async def update_task(task_id: str, request: TaskUpdate, kanban: KanbanStoreDep) -> Task:
    """Update fields of a task, e.g. move it to another column."""
    try:
        return kanban.update(task_id, request)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")


@router.delete("/{task_id}")
async def delete_task(task_id: str, kanban: KanbanStoreDep) -> dict:
    """Delete a task."""
    try:
        kanban.delete(task_id)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"status": "ok", "deleted": task_id}
