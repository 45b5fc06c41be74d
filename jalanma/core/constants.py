"""
App-wide constants for route configuration.

This module provides a single source of truth for route prefixes, tags,
and common response definitions for API routes.
"""

from dataclasses import dataclass
from typing import Any

from jalanma.models.error import ErrorResponse


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints.

    Every procedure shares the single ``/rpc`` endpoint prefix; tags only
    group them in the OpenAPI docs.
    """

    AUTH = RouteConfig(prefix="/rpc", tag="auth")
    REPORT = RouteConfig(prefix="/rpc", tag="reports")
    UPLOAD = RouteConfig(prefix="/rpc", tag="uploads")
    HEALTH = RouteConfig(prefix="/health", tag="health")


class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    CONFLICT: dict[int | str, dict[str, Any]] = {
        409: {"description": "Uniqueness or reference conflict", "model": ErrorResponse}
    }
    BAD_REQUEST: dict[int | str, dict[str, Any]] = {
        400: {"description": "Invalid request data", "model": ErrorResponse}
    }
    UNPROCESSABLE: dict[int | str, dict[str, Any]] = {
        422: {"description": "Request validation failed", "model": ErrorResponse}
    }
