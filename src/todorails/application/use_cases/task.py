"""Task use cases."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional

from ...domain.entities import Task
from ...domain.errors import DuplicateEntityError, EntityNotFoundError
from ...domain.task_repository import TaskRepository
from ..validators import require_not_blank, require_not_none

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task-related operations.

    The pending/completed/today views load every task and filter in memory.
    That is fine for a personal to-do list; a larger store should push the
    predicates into the repository instead.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        clock: Callable[[], date] = date.today,
    ):
        self.task_repository = task_repository
        self.clock = clock

    async def add_task(self, task: Optional[Task]) -> Task:
        """Create a new task, rejecting duplicate titles.

        Storage assigns the id; any id on ``task`` is ignored.
        """
        require_not_none(task, "Task")
        if await self.task_repository.get_by_title(task.title) is not None:
            logger.warning("Task already exists: %s", task.title)
            raise DuplicateEntityError("Task already exists")
        new_task = task.model_copy(update={"id": None})
        return await self.task_repository.save(new_task)

    async def get_task_by_id(self, task_id: Optional[int]) -> Task:
        """Get task by ID."""
        require_not_none(task_id, "Id")
        task = await self.task_repository.get_by_id(task_id)
        if task is None:
            raise EntityNotFoundError("Task not found")
        return task

    async def get_task_by_title(self, title: Optional[str]) -> Task:
        """Get task by title."""
        require_not_blank(title, "Title")
        task = await self.task_repository.get_by_title(title)
        if task is None:
            raise EntityNotFoundError("Task not found")
        return task

    async def get_all_tasks(self) -> List[Task]:
        """Get all tasks; an empty store yields an empty list."""
        return await self.task_repository.get_all()

    async def update_task(self, task: Optional[Task]) -> Task:
        """Overwrite the task that shares ``task``'s title."""
        require_not_none(task, "Task")
        existing = await self.task_repository.get_by_title(task.title)
        if existing is None:
            logger.warning("Task not found while updating task: %s", task.title)
            raise EntityNotFoundError("Task not found")

        existing.overwrite_with(task)
        return await self.task_repository.save(existing)

    async def delete_task(self, task: Optional[Task]) -> None:
        """Delete the task that shares ``task``'s title."""
        require_not_none(task, "Task")
        existing = await self.task_repository.get_by_title(task.title)
        if existing is None:
            logger.warning("Task not found while deleting task: %s", task.title)
            raise EntityNotFoundError("Task not found")
        await self.task_repository.delete(existing)

    async def get_pending_tasks(self) -> List[Task]:
        """Get tasks that are not completed."""
        tasks = await self.get_all_tasks()
        return [task for task in tasks if not task.completed]

    async def get_completed_tasks(self) -> List[Task]:
        """Get completed tasks."""
        tasks = await self.get_all_tasks()
        return [task for task in tasks if task.completed]

    async def get_today_tasks(self) -> List[Task]:
        """Get open tasks due on the current local date."""
        today = self.clock()
        tasks = await self.get_all_tasks()
        return [task for task in tasks if task.is_due_on(today)]
