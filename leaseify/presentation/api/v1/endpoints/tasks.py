"""Landlord task CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from leaseify.application.schemas.task import (
    DeletedResponse,
    TaskCreate,
    TaskResponse,
    TaskUpdate,
)
from leaseify.application.services import TaskService
from leaseify.domain.exceptions import EntityNotFoundError
from leaseify.infrastructure.dependencies import get_task_service

router = APIRouter(prefix="/landlord/tasks", tags=["Tasks"])


@router.get("/", response_model=list[TaskResponse])
async def list_tasks(
    service: TaskService = Depends(get_task_service),
) -> list[TaskResponse]:
    """Open tasks first, then by due date."""
    tasks = await service.list_tasks()
    return [TaskResponse.model_validate(t, from_attributes=True) for t in tasks]


@router.post("/", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    data: TaskCreate,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    task = await service.create_task(data)
    return TaskResponse.model_validate(task, from_attributes=True)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    data: TaskUpdate,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Mark a task complete or open again."""
    try:
        task = await service.update_task(task_id, data)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return TaskResponse.model_validate(task, from_attributes=True)


@router.delete("/{task_id}", response_model=DeletedResponse)
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> DeletedResponse:
    try:
        deleted_id = await service.delete_task(task_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return DeletedResponse(id=deleted_id, message="Task deleted")
