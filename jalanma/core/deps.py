"""Centralized dependency type aliases for FastAPI routes.

Import shared dependencies from this single module:
    from jalanma.core.deps import SessionDep, SettingsDep
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from jalanma.core.settings import Settings, get_settings
from jalanma.db.engine import get_session

# Database session
SessionDep = Annotated[Session, Depends(get_session)]

# Application settings
SettingsDep = Annotated[Settings, Depends(get_settings)]
