"""Task repository implementation over a storage abstraction."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..domain.entities import Task
from ..domain.errors import DuplicateEntityError, StorageError
from ..domain.task_repository import TaskRepository
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


def _task_key(task_id: int) -> str:
    return f"task:{task_id}"


def _title_key(title: str) -> str:
    return f"task:title:{title}"


class TaskRepositoryImpl(TaskRepository):
    """Task repository using a KeyValueStore.

    Titles are indexed under ``task:title:<title>``; the index entry is
    claimed atomically, so two writers racing on one title cannot both win.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get_by_id(self, task_id: int) -> Optional[Task]:
        data = await self.store.get(_task_key(task_id))
        if not data:
            return None
        return Task.model_validate_json(data)

    async def get_by_title(self, title: str) -> Optional[Task]:
        task_id = await self.store.get(_title_key(title))
        if not task_id:
            return None
        task = await self.get_by_id(int(task_id))
        if task is None or task.title != title:
            return None
        return task

    async def get_all(self) -> List[Task]:
        ids: list[str] = await self.store.zrange("tasks:all", 0, -1)
        tasks: List[Task] = []
        for tid in ids:
            data = await self.store.get(_task_key(int(tid)))
            if data:
                tasks.append(Task.model_validate_json(data))
        return tasks

    async def save(self, task: Task) -> Task:
        previous: Optional[Task] = None
        if task.id is None:
            new_id = await self.store.incr("tasks:next_id")
            task = task.model_copy(update={"id": new_id})
        else:
            previous = await self.get_by_id(task.id)

        claimed: Optional[str] = None
        if previous is None or previous.title != task.title:
            claimed = _title_key(task.title)
            if not await self.store.claim(claimed, str(task.id)):
                raise DuplicateEntityError("Task already exists")

        try:
            await self.store.set(_task_key(task.id), task.model_dump_json())
            await self.store.zadd("tasks:all", {str(task.id): float(task.id)})
        except StorageError:
            logger.warning("Rolling back failed save of task %s", task.id)
            if claimed is not None:
                await self.store.delete(claimed)
            if previous is None:
                await self.store.delete(_task_key(task.id))
            else:
                await self.store.set(_task_key(task.id), previous.model_dump_json())
            raise

        if claimed is not None and previous is not None:
            await self.store.delete(_title_key(previous.title))
        return task

    async def delete(self, task: Task) -> None:
        stored = await self.get_by_id(task.id) if task.id is not None else None
        if stored is None:
            stored = await self.get_by_title(task.title)
        if stored is None:
            return

        await self.store.delete(_task_key(stored.id))
        if await self.store.get(_title_key(stored.title)) == str(stored.id):
            await self.store.delete(_title_key(stored.title))
        await self.store.zrem("tasks:all", str(stored.id))
