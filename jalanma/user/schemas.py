"""User domain schemas.

Request and response schemas for user operations.
"""

import uuid
from typing import Annotated

from pydantic import Field
from sqlmodel import SQLModel

from jalanma.core.schemas import EmailAddress, HttpUrlString, TimestampedRead
from jalanma.user.models import AuthProvider

AvatarUrl = Annotated[HttpUrlString, Field(max_length=2048)]


class UserRead(TimestampedRead):
    """Response schema for user data."""

    id: uuid.UUID
    email: str
    name: str
    avatar_url: str | None
    provider: AuthProvider


class UserCreate(SQLModel):
    """Request schema for ``createUser``."""

    email: Annotated[EmailAddress, Field(max_length=255)]
    name: str = Field(min_length=1, max_length=255)
    avatar_url: AvatarUrl | None = None
    provider: AuthProvider
