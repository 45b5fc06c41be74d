"""Health domain router.

Health check endpoint for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from jalanma.core.constants import Routes
from jalanma.core.deps import SessionDep
from jalanma.core.mixins import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix=Routes.HEALTH.prefix, tags=[Routes.HEALTH.tag])


@router.get("")
async def health(session: SessionDep):
    """Health check endpoint with database connectivity verification."""
    timestamp = utc_now().isoformat().replace("+00:00", "Z")
    try:
        session.exec(text("SELECT 1"))
    except Exception:
        logger.warning("Health check: database unreachable", exc_info=True)
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "error", "timestamp": timestamp},
        )
    return {"status": "ok", "database": "ok", "timestamp": timestamp}
