"""Domain-specific exceptions."""

from __future__ import annotations


class TodoRailsError(Exception):
    """Base class for errors raised by the service layer."""


class InputValidationError(TodoRailsError):
    """Raised when a required argument is missing, blank or malformed."""


class DuplicateEntityError(TodoRailsError):
    """Raised when a write would violate a uniqueness constraint."""


class EntityNotFoundError(TodoRailsError):
    """Raised when a lookup, update or delete target does not exist."""


class StorageError(TodoRailsError):
    """Raised when the storage backend itself fails."""
