"""
User endpoints for API v1.

The classic five REST routes over a collection:

* ``GET /users`` returns all users
* ``GET /users/{id}`` returns one user
* ``POST /users`` creates a user
* ``PUT /users/{id}`` renames a user
* ``DELETE /users/{id}`` removes a user

The id is taken from the path as a string and parsed by the service
layer from its leading integer (``1abc`` is user 1).  A segment with
no leading digits behaves like an unknown id instead of failing
validation.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from rest_basics_api.app.core.errors import UserNotFoundError
from rest_basics_api.app.schemas.common import MessageRead
from rest_basics_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from rest_basics_api.app.services.user_service import UserService, parse_user_id


router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users() -> List[UserRead]:
    """Return every user in the directory."""
    return await UserService.list_users()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str) -> UserRead:
    """Return a single user, or 404 if the id is unknown."""
    try:
        return await UserService.get_user(parse_user_id(user_id))
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate) -> UserRead:
    """Add a new user.

    Expects a body like ``{"name": "Charlie"}``.  The id is assigned
    from the current size of the directory.
    """
    return await UserService.create_user(user)


@router.put("/{user_id}", response_model=UserRead)
async def update_user(user_id: str, user: UserUpdate) -> UserRead:
    """Replace the name of an existing user."""
    try:
        return await UserService.update_user(parse_user_id(user_id), user)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{user_id}", response_model=MessageRead)
async def delete_user(user_id: str) -> MessageRead:
    """Remove a user by id.

    The response is the same whether or not a user was removed.
    """
    await UserService.delete_user(parse_user_id(user_id))
    return MessageRead(message="User deleted")
