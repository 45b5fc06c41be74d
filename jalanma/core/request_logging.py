"""HTTP request/response logging middleware."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from jalanma.core.constants import Routes
from jalanma.core.logging import env_bool

_RPC_PREFIX = f"{Routes.REPORT.prefix}/"


def procedure_name(path: str) -> str | None:
    """``/rpc/getUserReports`` -> ``getUserReports``; None outside /rpc."""
    if not path.startswith(_RPC_PREFIX):
        return None
    return path.removeprefix(_RPC_PREFIX) or None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per call with the RPC procedure, status and duration.

    Health probes are logged at DEBUG so load balancer polling stays quiet.
    """

    def __init__(self, app: FastAPI) -> None:
        super().__init__(app)
        self.logger = logging.getLogger("jalanma.request")

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        status_code: int | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            self._log(request, status_code, (time.perf_counter() - started) * 1000.0)

    def _log(self, request: Request, status_code: int | None, duration_ms: float) -> None:
        path = request.url.path
        procedure = procedure_name(path)

        if status_code is None or status_code >= 500:
            level = logging.ERROR
        elif path.startswith(Routes.HEALTH.prefix):
            level = logging.DEBUG
        else:
            level = logging.INFO

        self.logger.log(
            level,
            "%s %s -> %s (%.2fms)",
            request.method,
            procedure or path,
            status_code,
            duration_ms,
            extra={
                "procedure": procedure,
                "method": request.method,
                "path": path,
                "query": request.url.query,
                "status_code": status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": request.client.host if request.client else None,
                "user_agent": request.headers.get("user-agent"),
            },
        )


def add_request_logging_middleware(app: FastAPI) -> None:
    """Attach request logging middleware unless LOG_REQUESTS is off."""
    if env_bool("LOG_REQUESTS", default=True):
        app.add_middleware(RequestLoggingMiddleware)
