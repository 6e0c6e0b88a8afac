"""Database connection and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional, Protocol, Union

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..domain.errors import StorageError


class HasDatabaseSettings(Protocol):
    database_url: str


class DatabaseClient:
    """Redis database client."""

    def __init__(self, settings: HasDatabaseSettings):
        self.settings = settings
        self._redis: Optional[redis.Redis] = None

    def initialize_database(self) -> None:
        """Initialize Redis connection instance. No schema to create."""
        self._client()

    def _client(self) -> redis.Redis:
        if self._redis is None:
            # Expecting URL like: redis://host:port/0
            self._redis = redis.from_url(
                self.settings.database_url, decode_responses=True
            )
        return self._redis

    @asynccontextmanager
    async def get_connection(self) -> AsyncGenerator[redis.Redis, None]:
        """Yield a Redis connection (async client).

        Raises:
            StorageError: If Redis fails while the connection is in use.
        """
        client = self._client()
        try:
            yield client
        except RedisError as e:
            raise StorageError(f"Storage operation failed: {e}") from e

    async def close(self) -> None:
        """Close the pooled connection, if one was opened."""
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None


# Global database client instance
_db_client: Union[DatabaseClient, None] = None


def get_database_client(settings: HasDatabaseSettings) -> DatabaseClient:
    """Get or create database client singleton."""
    global _db_client
    if _db_client is None:
        _db_client = DatabaseClient(settings)
    return _db_client
