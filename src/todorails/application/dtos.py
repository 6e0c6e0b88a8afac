"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ..domain.entities import Task, User


class CreateTaskDTO(BaseModel):
    """DTO for creating a task."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Homework",
                "description": "Finish section 4",
                "completed": False,
                "due_date": "2024-05-01",
            }
        }
    )

    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field("", max_length=1000)
    completed: bool = False
    due_date: Optional[date] = None

    def to_entity(self) -> Task:
        return Task(**self.model_dump())


class UpdateTaskDTO(CreateTaskDTO):
    """DTO for updating a task. The title selects the record to overwrite."""


class TaskResponseDTO(BaseModel):
    """DTO for returning task data."""

    id: int
    title: str
    description: Optional[str]
    completed: bool
    due_date: Optional[date]

    @classmethod
    def from_entity(cls, task: Task) -> TaskResponseDTO:
        return cls(**task.model_dump())


class CreateUserDTO(BaseModel):
    """DTO for creating a user."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "jdoe",
                "email": "john.doe@example.com",
                "password": "correct horse battery staple",
            }
        }
    )

    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=100)
    password: str = Field(..., min_length=1)

    def to_entity(self) -> User:
        return User(**self.model_dump())


class UpdateUserDTO(CreateUserDTO):
    """DTO for updating a user. The username selects the record to overwrite."""


class UserResponseDTO(BaseModel):
    """DTO for returning user data. Never carries the password hash."""

    id: int
    username: str
    email: EmailStr

    @classmethod
    def from_entity(cls, user: User) -> UserResponseDTO:
        return cls(id=user.id, username=user.username, email=user.email)
