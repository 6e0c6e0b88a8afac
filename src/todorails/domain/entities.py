"""Domain entities: Task and User."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class Task(BaseModel):
    """Task entity representing a to-do item."""

    id: Optional[int] = None
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field("", max_length=1000)
    completed: bool = False
    due_date: Optional[date] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be blank")
        return v

    def is_due_on(self, day: date) -> bool:
        """Return True when the task is still open and due on ``day``."""
        return not self.completed and self.due_date == day

    def overwrite_with(self, other: Task) -> None:
        """Copy every user-editable field from ``other``, keeping this id."""
        self.title = other.title
        self.description = other.description
        self.completed = other.completed
        self.due_date = other.due_date


class User(BaseModel):
    """User entity. ``password`` only ever holds a one-way hash once stored."""

    id: Optional[int] = None
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=100)
    password: str = Field(..., min_length=1)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Username cannot be blank")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()
