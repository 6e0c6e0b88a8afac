"""Task domain repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Task


class TaskRepository(ABC):
    """Abstract repository interface for Task entities."""

    @abstractmethod
    async def get_by_id(self, task_id: int) -> Optional[Task]:
        """Get task by ID."""
        pass

    @abstractmethod
    async def get_by_title(self, title: str) -> Optional[Task]:
        """Get task by its unique title."""
        pass

    @abstractmethod
    async def get_all(self) -> List[Task]:
        """Get every stored task."""
        pass

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Insert a new task (assigning its id) or replace an existing one.

        Raises:
            DuplicateEntityError: If another task already holds the title.
        """
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Delete a task."""
        pass
