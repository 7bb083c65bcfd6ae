"""Task API routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from taskboard_api.models.responses import TaskCreatedResponse
from taskboard_api.services import get_task_service
from taskboard_common.errors import NotImplementedAppError, ValidationError
from taskboard_common.models.task import Task
from taskboard_common.services.task_service import TaskService
from taskboard_common.validation import validate_new_task

router = APIRouter(prefix="/tasks", tags=["tasks"], redirect_slashes=False)


@router.get("", response_model=list[Task])
@router.get("/", response_model=list[Task])
def list_tasks(q: str | None = None, service: TaskService = Depends(get_task_service)) -> list[Task]:
    """List tasks, or those whose title or description matches ``%q``.

    Unlike ``/users`` the tasks are returned as a bare array.
    """
    if q is None:
        return service.list_tasks()
    return service.search_tasks(q)


@router.post("", response_model=TaskCreatedResponse)
@router.post("/", response_model=TaskCreatedResponse)
def add_task(
    payload: Any = Body(default=None),
    service: TaskService = Depends(get_task_service),
) -> TaskCreatedResponse:
    """Create a task and return the row as stored."""
    task = validate_new_task(payload if isinstance(payload, dict) else {})

    if service.get_task(task.id):
        raise ValidationError("'id' ja existe.")

    service.add_task(task)
    inserted = service.get_task(task.id)
    return TaskCreatedResponse(message="Task criada com sucesso", task=inserted)


@router.put("/{task_id}")
async def update_task(task_id: str) -> None:
    """Task updates have no defined semantics yet."""
    raise NotImplementedAppError(f"Atualização da task '{task_id}' não implementada")
