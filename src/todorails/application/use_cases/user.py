"""User use cases."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from ...domain.entities import User
from ...domain.errors import DuplicateEntityError, EntityNotFoundError
from ...domain.password_hasher import PasswordHasher
from ...domain.user_repository import UserRepository
from ..validators import require_not_blank, require_not_none, require_valid_email

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related operations."""

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def add_user(self, user: Optional[User]) -> User:
        """Create a new user, storing only a hash of the password.

        Storage assigns the id; any id on ``user`` is ignored.
        """
        require_not_none(user, "User")
        if await self.user_repository.get_by_username(user.username) is not None:
            logger.warning("Username already exists: %s", user.username)
            raise DuplicateEntityError("Username already exists")
        if await self.user_repository.get_by_email(user.email) is not None:
            logger.warning("Email already exists: %s", user.email)
            raise DuplicateEntityError("Email already exists")

        password = await asyncio.to_thread(self.password_hasher.hash, user.password)
        hashed = user.model_copy(update={"id": None, "password": password})
        return await self.user_repository.save(hashed)

    async def get_user_by_username(self, username: Optional[str]) -> User:
        """Get user by username."""
        require_not_blank(username, "Username")
        user = await self.user_repository.get_by_username(username)
        if user is None:
            raise EntityNotFoundError("User not found")
        return user

    async def get_user_by_email(self, email: Optional[str]) -> User:
        """Get user by email."""
        normalized = require_valid_email(email)
        user = await self.user_repository.get_by_email(normalized)
        if user is None:
            raise EntityNotFoundError("User not found")
        return user

    async def get_user_by_id(self, user_id: Optional[int]) -> User:
        """Get user by ID."""
        require_not_none(user_id, "Id")
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User not found")
        return user

    async def update_user(self, user: Optional[User]) -> User:
        """Overwrite the user that shares ``user``'s username.

        The submitted password is re-hashed unless it is exactly the stored
        hash, so clear text never reaches storage and passing the previous
        hash through leaves it untouched.
        """
        require_not_none(user, "User")
        existing = await self.user_repository.get_by_username(user.username)
        if existing is None:
            logger.warning("User not found while updating user: %s", user.username)
            raise EntityNotFoundError("User not found")

        password = user.password
        if password != existing.password:
            password = await asyncio.to_thread(self.password_hasher.hash, password)

        updated = user.model_copy(update={"id": existing.id, "password": password})
        return await self.user_repository.save(updated)

    async def delete_user(self, user: Optional[User]) -> None:
        """Delete the user that shares ``user``'s username."""
        require_not_none(user, "User")
        existing = await self.user_repository.get_by_username(user.username)
        if existing is None:
            logger.warning("User not found while deleting user: %s", user.username)
            raise EntityNotFoundError("User not found")
        await self.user_repository.delete(existing)

    async def get_all_users(self) -> List[User]:
        """Get all users. Unlike tasks, an empty store is an error."""
        users = await self.user_repository.get_all()
        if not users:
            raise EntityNotFoundError("No users found")
        return users
