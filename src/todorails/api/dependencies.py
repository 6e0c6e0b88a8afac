"""FastAPI dependencies for the TodoRails API."""

from __future__ import annotations

from fastapi import Depends

from ..application.use_cases.task import TaskService
from ..application.use_cases.user import UserService
from ..domain.password_hasher import PasswordHasher
from ..domain.task_repository import TaskRepository
from ..domain.user_repository import UserRepository
from ..env import Settings, get_settings
from ..infrastructure.database import DatabaseClient, get_database_client
from ..infrastructure.password_hasher import Argon2PasswordHasher
from ..infrastructure.storage import KeyValueStore, RedisKeyValueStore
from ..infrastructure.task_repository_impl import TaskRepositoryImpl
from ..infrastructure.user_repository_impl import UserRepositoryImpl


def get_database_client_with_settings(
    settings: Settings = Depends(get_settings),
) -> DatabaseClient:
    """Get database client with settings."""
    return get_database_client(settings)


def get_key_value_store(
    db_client: DatabaseClient = Depends(get_database_client_with_settings),
) -> KeyValueStore:
    """Get key-value store."""
    return RedisKeyValueStore(db_client)


def get_task_repository(
    store: KeyValueStore = Depends(get_key_value_store),
) -> TaskRepository:
    """Get task repository."""
    return TaskRepositoryImpl(store)


def get_user_repository(
    store: KeyValueStore = Depends(get_key_value_store),
) -> UserRepository:
    """Get user repository."""
    return UserRepositoryImpl(store)


def get_password_hasher() -> PasswordHasher:
    """Get password hasher."""
    return Argon2PasswordHasher()


def get_task_service(
    task_repository: TaskRepository = Depends(get_task_repository),
) -> TaskService:
    """Get task service."""
    return TaskService(task_repository)


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    """Get user service."""
    return UserService(user_repository, password_hasher)
