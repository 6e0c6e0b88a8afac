"""Key-value storage port used by the task and user repositories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Optional

from .database import DatabaseClient


class KeyValueStore(ABC):
    """Strings, counters and sorted sets; the repositories need nothing more."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    async def set_if_absent(self, key: str, value: str) -> bool:
        """Atomically set ``key`` only when it does not exist yet."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> int:
        pass

    @abstractmethod
    async def incr(self, key: str) -> int:
        pass

    @abstractmethod
    async def zadd(self, key: str, mapping: Mapping[str, float]) -> int:
        pass

    @abstractmethod
    async def zrange(self, key: str, start: int, end: int) -> list[str]:
        pass

    @abstractmethod
    async def zrem(self, key: str, member: str) -> int:
        pass

    async def claim(self, key: str, owner: str) -> bool:
        """Claim a unique index key for ``owner``.

        Returns True when the key was free or is already held by ``owner``.
        """
        if await self.set_if_absent(key, owner):
            return True
        return await self.get(key) == owner


class RedisKeyValueStore(KeyValueStore):
    """KeyValueStore on top of a redis.asyncio connection."""

    def __init__(self, db_client: DatabaseClient):
        self._db_client = db_client

    async def get(self, key: str) -> Optional[str]:
        async with self._db_client.get_connection() as conn:
            return await conn.get(key)

    async def set(self, key: str, value: str) -> None:
        async with self._db_client.get_connection() as conn:
            await conn.set(key, value)

    async def set_if_absent(self, key: str, value: str) -> bool:
        async with self._db_client.get_connection() as conn:
            return bool(await conn.set(key, value, nx=True))

    async def delete(self, key: str) -> int:
        async with self._db_client.get_connection() as conn:
            return await conn.delete(key)

    async def incr(self, key: str) -> int:
        async with self._db_client.get_connection() as conn:
            return await conn.incr(key)

    async def zadd(self, key: str, mapping: Mapping[str, float]) -> int:
        async with self._db_client.get_connection() as conn:
            return await conn.zadd(key, mapping)

    async def zrange(self, key: str, start: int, end: int) -> list[str]:
        async with self._db_client.get_connection() as conn:
            return await conn.zrange(key, start, end)

    async def zrem(self, key: str, member: str) -> int:
        async with self._db_client.get_connection() as conn:
            return await conn.zrem(key, member)
