"""
Pydantic models for user data.

The canonical user has a store-generated integer ``id`` plus a
``name`` and an ``email``.  The email must be unique; uniqueness is
enforced by the database, not by these schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["Alice"])
    email: str = Field(..., examples=["alice@example.com"])


class UserCreate(UserBase):
    """Schema for creating a user.  The id is assigned by the store."""


class UserUpdate(UserBase):
    """Schema for replacing a user's name and email.

    When ``id`` is omitted the user is addressed by ``email`` and only
    the name is replaced.
    """

    id: Optional[int] = Field(None, examples=[1])


class User(UserBase):
    """Schema for reading a stored user."""

    id: int

    model_config = {
        "from_attributes": True,
    }
