"""User repository implementation over a storage abstraction."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..domain.entities import User
from ..domain.errors import DuplicateEntityError, StorageError
from ..domain.user_repository import UserRepository
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


def _user_key(user_id: int) -> str:
    return f"user:{user_id}"


def _username_key(username: str) -> str:
    return f"user:username:{username}"


def _email_key(email: str) -> str:
    return f"user:email:{email.lower()}"


class UserRepositoryImpl(UserRepository):
    """User repository using a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get_by_id(self, user_id: int) -> Optional[User]:
        data = await self.store.get(_user_key(user_id))
        if not data:
            return None
        return User.model_validate_json(data)

    async def get_by_username(self, username: str) -> Optional[User]:
        user_id = await self.store.get(_username_key(username))
        if not user_id:
            return None
        user = await self.get_by_id(int(user_id))
        if user is None or user.username != username:
            return None
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        user_id = await self.store.get(_email_key(email))
        if not user_id:
            return None
        user = await self.get_by_id(int(user_id))
        if user is None or user.email != email.lower():
            return None
        return user

    async def get_all(self) -> List[User]:
        ids: list[str] = await self.store.zrange("users:all", 0, -1)
        users: List[User] = []
        for user_id in ids:
            data = await self.store.get(_user_key(int(user_id)))
            if data:
                users.append(User.model_validate_json(data))
        return users

    async def save(self, user: User) -> User:
        previous: Optional[User] = None
        if user.id is None:
            new_id = await self.store.incr("users:next_id")
            user = user.model_copy(update={"id": new_id})
        else:
            previous = await self.get_by_id(user.id)
        owner = str(user.id)

        claimed: list[str] = []
        if previous is None or previous.username != user.username:
            key = _username_key(user.username)
            if not await self.store.claim(key, owner):
                raise DuplicateEntityError("Username already exists")
            claimed.append(key)
        if previous is None or previous.email != user.email:
            key = _email_key(user.email)
            if not await self.store.claim(key, owner):
                await self._release(claimed)
                raise DuplicateEntityError("Email already exists")
            claimed.append(key)

        try:
            await self.store.set(_user_key(user.id), user.model_dump_json())
            await self.store.zadd("users:all", {owner: float(user.id)})
        except StorageError:
            logger.warning("Rolling back failed save of user %s", user.id)
            await self._release(claimed)
            if previous is None:
                await self.store.delete(_user_key(user.id))
            else:
                await self.store.set(_user_key(user.id), previous.model_dump_json())
            raise

        if previous is not None:
            if previous.username != user.username:
                await self.store.delete(_username_key(previous.username))
            if previous.email != user.email:
                await self.store.delete(_email_key(previous.email))
        return user

    async def _release(self, keys: list[str]) -> None:
        for key in keys:
            await self.store.delete(key)

    async def delete(self, user: User) -> None:
        stored = await self.get_by_id(user.id) if user.id is not None else None
        if stored is None:
            stored = await self.get_by_username(user.username)
        if stored is None:
            return

        owner = str(stored.id)
        await self.store.delete(_user_key(stored.id))
        for key in (_username_key(stored.username), _email_key(stored.email)):
            if await self.store.get(key) == owner:
                await self.store.delete(key)
        await self.store.zrem("users:all", owner)
