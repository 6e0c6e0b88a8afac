"""Integration tests for repositories against a real Redis.

Skipped automatically when Redis is not reachable (see ``redis_db_client``).
"""

from __future__ import annotations

import asyncio
from datetime import date

import pytest

from todorails.domain.entities import Task, User
from todorails.domain.errors import DuplicateEntityError, StorageError
from todorails.infrastructure.database import DatabaseClient
from todorails.infrastructure.storage import RedisKeyValueStore
from todorails.infrastructure.task_repository_impl import TaskRepositoryImpl
from todorails.infrastructure.user_repository_impl import UserRepositoryImpl


@pytest.mark.asyncio
async def test_task_roundtrip_through_redis(redis_store: RedisKeyValueStore) -> None:
    repository = TaskRepositoryImpl(redis_store)

    saved = await repository.save(
        Task(title="Homework", description="Finish section 4", due_date=date(2024, 5, 1))
    )

    assert saved.id == 1
    assert await repository.get_by_title("Homework") == saved
    assert await repository.get_all() == [saved]

    await repository.delete(saved)
    assert await repository.get_all() == []


@pytest.mark.asyncio
async def test_concurrent_adds_with_same_title_keep_one(
    redis_store: RedisKeyValueStore,
) -> None:
    repository = TaskRepositoryImpl(redis_store)

    results = await asyncio.gather(
        *(repository.save(Task(title="Homework")) for _ in range(10)),
        return_exceptions=True,
    )

    winners = [r for r in results if isinstance(r, Task)]
    losers = [r for r in results if isinstance(r, DuplicateEntityError)]
    assert len(winners) == 1
    assert len(losers) == 9
    assert len(await repository.get_all()) == 1


@pytest.mark.asyncio
async def test_user_email_uniqueness_in_redis(redis_store: RedisKeyValueStore) -> None:
    repository = UserRepositoryImpl(redis_store)
    await repository.save(User(username="jdoe", email="j@example.com", password="h"))

    with pytest.raises(DuplicateEntityError):
        await repository.save(
            User(username="other", email="J@example.com", password="h")
        )


class _UnreachableSettings:
    database_url = "redis://127.0.0.1:1/0"


@pytest.mark.asyncio
async def test_unreachable_redis_raises_storage_error() -> None:
    client = DatabaseClient(_UnreachableSettings())
    repository = TaskRepositoryImpl(RedisKeyValueStore(client))

    try:
        with pytest.raises(StorageError):
            await repository.get_all()
    finally:
        await client.close()
