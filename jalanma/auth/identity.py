"""External identity verification.

Login trusts whatever identity the client claims. That decision lives
behind ``IdentityProvider`` so a real OAuth / email verifier can replace
``TrustedIdentityProvider`` without touching the user store logic.
"""

import logging
from functools import lru_cache
from typing import Protocol

from jalanma.user.models import User

logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Protocol for confirming that a caller owns a stored identity."""

    def verify(self, user: User, provider_token: str | None) -> bool:
        """Return True when the caller may act as ``user``."""
        ...


class TrustedIdentityProvider:
    """Accept every identity without verification.

    Known-insecure passthrough: provider tokens are neither decoded nor
    checked against Google, and email logins carry no password.
    """

    def verify(self, user: User, provider_token: str | None) -> bool:
        logger.debug(
            "Accepting unverified %s identity (token supplied: %s)",
            user.provider.value,
            provider_token is not None,
            extra={"user_id": user.id},
        )
        return True


@lru_cache
def get_identity_provider() -> IdentityProvider:
    """Get the cached identity provider used by ``loginUser``."""
    return TrustedIdentityProvider()
