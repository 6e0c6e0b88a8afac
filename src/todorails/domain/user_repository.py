"""User domain repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import User


class UserRepository(ABC):
    """Abstract repository interface for User entities."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        pass

    @abstractmethod
    async def get_all(self) -> List[User]:
        """Get every stored user."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user (assigning its id) or replace an existing one.

        Raises:
            DuplicateEntityError: If another user already holds the username
                or the email.
        """
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete a user."""
        pass
