"""Shared pytest fixtures."""

from __future__ import annotations

import os
import warnings
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from todorails.infrastructure.database import DatabaseClient
from todorails.infrastructure.storage import RedisKeyValueStore


class TestDatabaseSettings:
    """Minimal settings object accepted by DatabaseClient."""

    __test__ = False

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url


@pytest_asyncio.fixture
async def redis_db_client() -> AsyncGenerator[DatabaseClient, None]:
    """Create a Redis database client for testing.

    Uses database 15 by default, or TEST_REDIS_URL if set.
    """
    test_redis_url = os.getenv("TEST_REDIS_URL", "redis://localhost:6379/15")
    client = DatabaseClient(TestDatabaseSettings(database_url=test_redis_url))
    client.initialize_database()

    try:
        async with client.get_connection() as conn:
            await conn.ping()
    except Exception as e:
        warnings.warn(
            f"Redis not available at {test_redis_url}: {e}. "
            "Tests requiring Redis will be skipped.",
            UserWarning,
        )
        await client.close()
        pytest.skip(f"Redis not available: {e}")

    async with client.get_connection() as conn:
        await conn.flushdb()

    yield client

    try:
        async with client.get_connection() as conn:
            await conn.flushdb()
    finally:
        await client.close()


@pytest_asyncio.fixture
async def redis_store(redis_db_client: DatabaseClient) -> RedisKeyValueStore:
    """Create a Redis-backed key-value store for testing."""
    return RedisKeyValueStore(redis_db_client)
