"""Argon2 password hashing backed by ``argon2-cffi``."""

from __future__ import annotations

import logging

from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError

from ..domain.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class Argon2PasswordHasher(PasswordHasher):
    """Hash passwords with Argon2id.

    The encoded hash carries its own salt and cost parameters, so hashes made
    with other settings still verify.
    """

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        self.hasher = Argon2Hasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=32,
            salt_len=16,
        )

    def hash(self, password: str) -> str:
        return self.hasher.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return self.hasher.verify(hashed, password)
        except VerificationError:
            return False
        except InvalidHashError:
            logger.debug("Rejecting malformed password hash")
            return False
