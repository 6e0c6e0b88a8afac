"""User API routes."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...application.dtos import CreateUserDTO, UpdateUserDTO, UserResponseDTO
from ...application.use_cases.user import UserService
from ...domain.errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    InputValidationError,
)
from ..dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: CreateUserDTO, user_service: UserService = Depends(get_user_service)
) -> UserResponseDTO:
    """Create a new user."""
    try:
        user = await user_service.add_user(user_data.to_entity())
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserResponseDTO.from_entity(user)


@router.get("/", response_model=List[UserResponseDTO])
async def get_users(
    user_service: UserService = Depends(get_user_service),
) -> List[UserResponseDTO]:
    """Get all users. Responds 404 when there are none."""
    try:
        users = await user_service.get_all_users()
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [UserResponseDTO.from_entity(user) for user in users]


@router.get("/username/{username}", response_model=UserResponseDTO)
async def get_user_by_username(
    username: str, user_service: UserService = Depends(get_user_service)
) -> UserResponseDTO:
    """Get user by username."""
    try:
        user = await user_service.get_user_by_username(username)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponseDTO.from_entity(user)


@router.get("/email/{email}", response_model=UserResponseDTO)
async def get_user_by_email(
    email: str, user_service: UserService = Depends(get_user_service)
) -> UserResponseDTO:
    """Get user by email."""
    try:
        user = await user_service.get_user_by_email(email)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponseDTO.from_entity(user)


@router.get("/{user_id}", response_model=UserResponseDTO)
async def get_user(
    user_id: int, user_service: UserService = Depends(get_user_service)
) -> UserResponseDTO:
    """Get user by ID."""
    try:
        user = await user_service.get_user_by_id(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponseDTO.from_entity(user)


@router.put("/", response_model=UserResponseDTO)
async def update_user(
    user_data: UpdateUserDTO, user_service: UserService = Depends(get_user_service)
) -> UserResponseDTO:
    """Overwrite the user whose username matches the payload."""
    try:
        user = await user_service.update_user(user_data.to_entity())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserResponseDTO.from_entity(user)


@router.delete("/username/{username}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    username: str, user_service: UserService = Depends(get_user_service)
) -> None:
    """Delete a user by username."""
    try:
        user = await user_service.get_user_by_username(username)
        await user_service.delete_user(user)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
