"""
Pydantic models for user data.

A user is nothing more than an integer id and a name.  Clients only
ever send the name; the id is assigned by ``UserService``.
"""

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["Charlie"])


class UserCreate(UserBase):
    """Schema for adding a user."""
    pass


class UserUpdate(UserBase):
    """Schema for renaming a user."""
    pass


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
