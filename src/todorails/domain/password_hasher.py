"""Password hashing port."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """One-way, salted password hashing.

    Implementations generate and embed their own random salt so a stored
    hash can later be checked with :meth:`verify` without keeping the clear
    text anywhere.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an opaque hash string for ``password``."""
        pass

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Return True when ``password`` matches ``hashed``."""
        pass
