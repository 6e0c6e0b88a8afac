"""Task API routes."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...application.dtos import CreateTaskDTO, TaskResponseDTO, UpdateTaskDTO
from ...application.use_cases.task import TaskService
from ...domain.entities import Task
from ...domain.errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    InputValidationError,
)
from ..dependencies import get_task_service

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _to_response(tasks: List[Task]) -> List[TaskResponseDTO]:
    return [TaskResponseDTO.from_entity(task) for task in tasks]


@router.post("/", response_model=TaskResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: CreateTaskDTO, task_service: TaskService = Depends(get_task_service)
) -> TaskResponseDTO:
    """Create a new task."""
    try:
        task = await task_service.add_task(task_data.to_entity())
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return TaskResponseDTO.from_entity(task)


@router.get("/", response_model=List[TaskResponseDTO])
async def get_tasks(
    task_service: TaskService = Depends(get_task_service),
) -> List[TaskResponseDTO]:
    """Get all tasks."""
    return _to_response(await task_service.get_all_tasks())


@router.get("/pending", response_model=List[TaskResponseDTO])
async def get_pending_tasks(
    task_service: TaskService = Depends(get_task_service),
) -> List[TaskResponseDTO]:
    """Get tasks that are not completed yet."""
    return _to_response(await task_service.get_pending_tasks())


@router.get("/completed", response_model=List[TaskResponseDTO])
async def get_completed_tasks(
    task_service: TaskService = Depends(get_task_service),
) -> List[TaskResponseDTO]:
    """Get completed tasks."""
    return _to_response(await task_service.get_completed_tasks())


@router.get("/today", response_model=List[TaskResponseDTO])
async def get_today_tasks(
    task_service: TaskService = Depends(get_task_service),
) -> List[TaskResponseDTO]:
    """Get open tasks due today."""
    return _to_response(await task_service.get_today_tasks())


@router.get("/title/{title}", response_model=TaskResponseDTO)
async def get_task_by_title(
    title: str, task_service: TaskService = Depends(get_task_service)
) -> TaskResponseDTO:
    """Get task by title."""
    try:
        task = await task_service.get_task_by_title(title)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return TaskResponseDTO.from_entity(task)


@router.get("/{task_id}", response_model=TaskResponseDTO)
async def get_task(
    task_id: int, task_service: TaskService = Depends(get_task_service)
) -> TaskResponseDTO:
    """Get task by ID."""
    try:
        task = await task_service.get_task_by_id(task_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return TaskResponseDTO.from_entity(task)


@router.put("/", response_model=TaskResponseDTO)
async def update_task(
    task_data: UpdateTaskDTO, task_service: TaskService = Depends(get_task_service)
) -> TaskResponseDTO:
    """Overwrite the task whose title matches the payload."""
    try:
        task = await task_service.update_task(task_data.to_entity())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return TaskResponseDTO.from_entity(task)


@router.delete("/title/{title}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    title: str, task_service: TaskService = Depends(get_task_service)
) -> None:
    """Delete a task by title."""
    try:
        task = await task_service.get_task_by_title(title)
        await task_service.delete_task(task)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
