"""
Pydantic models for user data.

Request schemas are deliberately permissive about presence: ``name``
and ``email`` are optional at the schema level so that a missing field
produces the API's own "Name and email are required" error rather than
a generic validation failure.  Types are still enforced, so a number
sent as ``name`` is rejected.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_ROLE = "user"


class UserCreate(BaseModel):
    """Schema for creating a user.

    ``role`` defaults to ``"user"`` when omitted; presence of ``name``
    and ``email`` is checked by ``UserService.create_user``.
    """

    name: Optional[str] = Field(None, examples=["Dan"])
    email: Optional[str] = Field(None, examples=["dan@example.com"])
    role: Optional[str] = Field(None, examples=["user"])


class UserUpdate(BaseModel):
    """Schema for updating an existing user.

    All fields are optional.  Only truthy values are applied; omitted,
    ``null`` and empty values leave the stored field unchanged.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Alice Johnson"])
    email: str = Field(..., examples=["alice@example.com"])
    role: str = Field(DEFAULT_ROLE, examples=["admin"])

    model_config = ConfigDict(from_attributes=True)


class UserPage(BaseModel):
    """One page of the user listing."""

    users: List[UserRead]
    total: int
    page: int
    limit: int
    # Exposed in camelCase to match the documented response shape.
    total_pages: int = Field(..., alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)


class UserDeleted(BaseModel):
    message: str
    user: UserRead
