"""Auth domain schemas.

Request schemas for authentication operations. Responses reuse
``jalanma.user.schemas.UserRead``.
"""

from pydantic import BaseModel

from jalanma.core.schemas import EmailAddress
from jalanma.user.models import AuthProvider


class LoginRequest(BaseModel):
    """Request schema for ``loginUser``.

    ``provider_token`` is forwarded to the identity provider; the default
    provider does not inspect it.
    """

    email: EmailAddress
    provider: AuthProvider
    provider_token: str | None = None
