"""Guard clauses shared by the task and user services.

These functions run before any storage access and raise
``InputValidationError`` so callers can tell a bad request apart from a
missing or duplicate entity.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

from ..domain.errors import InputValidationError

_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)


def require_not_none(value: Any, name: str) -> None:
    """Reject ``None``.

    Raises:
        InputValidationError: If ``value`` is None.
    """
    if value is None:
        raise InputValidationError(f"{name} cannot be null")


def require_not_blank(value: Optional[str], name: str) -> None:
    """Reject ``None``, empty and whitespace-only strings.

    Raises:
        InputValidationError: If ``value`` is None or blank.
    """
    require_not_none(value, name)
    if not value.strip():
        raise InputValidationError(f"{name} cannot be blank")


def require_valid_email(value: Optional[str]) -> str:
    """Validate an email address and return it normalised to lower case.

    Raises:
        InputValidationError: If the address is missing, blank or not of the
            form ``local@domain.tld``.
    """
    require_not_blank(value, "Email")
    try:
        return _email_adapter.validate_python(value.strip()).lower()
    except ValidationError as e:
        raise InputValidationError("Email should be valid") from e
