"""User domain models.

SQLModel table definition for User.
"""

import uuid
from enum import Enum

from sqlmodel import Field, SQLModel

from jalanma.core.mixins import TimestampMixin


class AuthProvider(str, Enum):
    """Identity source of a user account.

    - google: signed in through Google OAuth
    - email: signed in with an email address
    """

    google = "google"
    email = "email"


class User(TimestampMixin, SQLModel, table=True):
    """User database model.

    ``provider`` is fixed at creation; there is no update path for it.
    """

    __tablename__: str = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: str = Field(index=True, unique=True, max_length=255)
    name: str = Field(max_length=255)
    avatar_url: str | None = Field(default=None, max_length=2048)
    provider: AuthProvider = Field(max_length=20)
