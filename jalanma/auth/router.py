"""Auth domain router.

``createUser`` and ``loginUser`` procedures. Thin HTTP handlers that
delegate to ``jalanma.auth.service``.
"""

from fastapi import APIRouter, status

from jalanma.auth import service
from jalanma.auth.dependencies import IdentityProviderDep
from jalanma.auth.schemas import LoginRequest
from jalanma.core.constants import CommonResponses, Routes
from jalanma.core.deps import SessionDep
from jalanma.user.schemas import UserCreate, UserRead

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.UNPROCESSABLE},
)


@router.post(
    "/createUser",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.CONFLICT},
)
async def create_user(payload: UserCreate, session: SessionDep):
    """Register a user account. Emails are unique."""
    return service.create_user(session, payload)


@router.post("/loginUser", response_model=UserRead | None)
async def login_user(
    payload: LoginRequest,
    session: SessionDep,
    identity_provider: IdentityProviderDep,
):
    """Log in by email and provider.

    Returns ``null`` when no account matches. The provider token is not
    verified.
    """
    return service.login_user(session, payload, identity_provider)
