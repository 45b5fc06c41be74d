"""Account creation and login against the local user store."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from jalanma.auth.identity import IdentityProvider
from jalanma.auth.schemas import LoginRequest
from jalanma.user.exceptions import EmailExistsError
from jalanma.user.models import User
from jalanma.user.schemas import UserCreate

logger = logging.getLogger(__name__)


def get_user_by_email(session: Session, email: str) -> User | None:
    """Exact, case-sensitive email lookup."""
    return session.exec(select(User).where(User.email == email)).first()


def create_user(session: Session, data: UserCreate) -> User:
    """Persist a new user.

    Raises:
        EmailExistsError: If the email is already registered.
    """
    if get_user_by_email(session, data.email) is not None:
        logger.info("Rejected duplicate registration for %s", data.email)
        raise EmailExistsError()

    user = User.model_validate(data.model_dump())
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        # Concurrent registration won the unique index.
        session.rollback()
        logger.warning("Unique violation while creating user %s", data.email)
        raise EmailExistsError() from e
    except Exception:
        session.rollback()
        logger.exception("User creation failed for %s", data.email)
        raise

    session.refresh(user)
    logger.info("Created %s user", user.provider.value, extra={"user_id": user.id})
    return user


def login_user(
    session: Session, data: LoginRequest, identity_provider: IdentityProvider
) -> User | None:
    """Return the stored user when email and provider match, otherwise None."""
    try:
        user = get_user_by_email(session, data.email)
    except Exception:
        logger.exception("User login failed for %s", data.email)
        raise

    if user is None:
        return None

    if user.provider != data.provider:
        logger.info(
            "Login provider mismatch: stored %s, requested %s",
            user.provider.value,
            data.provider.value,
            extra={"user_id": user.id},
        )
        return None

    if not identity_provider.verify(user, data.provider_token):
        return None

    return user
