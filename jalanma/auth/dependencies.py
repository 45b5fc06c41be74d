"""Auth domain dependencies."""

from typing import Annotated

from fastapi import Depends

from jalanma.auth.identity import IdentityProvider, get_identity_provider

IdentityProviderDep = Annotated[IdentityProvider, Depends(get_identity_provider)]
