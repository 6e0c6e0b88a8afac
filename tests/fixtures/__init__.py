"""Test fixtures for in-memory implementations."""

from .in_memory_storage import FailOnceKeyValueStore, InMemoryKeyValueStore
from .in_memory_repositories import InMemoryTaskRepository, InMemoryUserRepository

__all__ = [
    "FailOnceKeyValueStore",
    "InMemoryKeyValueStore",
    "InMemoryTaskRepository",
    "InMemoryUserRepository",
]
