"""Central logging configuration for the application.

Logs go to stdout, either as plain text or one JSON object per line, and
uvicorn's loggers are routed through the same root handler. Everything is
read from environment variables because logging is set up before the
typed Settings are loaded.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

# Extras attached by the request middleware, exception handlers and services.
_EXTRA_KEYS = (
    "procedure",
    "method",
    "path",
    "query",
    "status_code",
    "duration_ms",
    "client_ip",
    "user_agent",
    "error_type",
    "user_id",
    "report_id",
)

_TRUTHY = frozenset({"1", "true", "t", "yes", "y", "on"})


def env_bool(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


class JsonFormatter(logging.Formatter):
    """One JSON object per line.

    UUIDs, enums and other non-numeric extras are rendered with ``str``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            if key not in record.__dict__:
                continue
            value = record.__dict__[key]
            payload[key] = value if isinstance(value, int | float | None) else str(value)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


@dataclass(frozen=True)
class LoggingOptions:
    """Logging knobs.

    Env vars:
    - LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    - LOG_JSON: true/false (default: false)
    - LOG_REQUESTS: true/false (default: true)
    - LOG_UVICORN_ACCESS: true/false; defaults to the opposite of
      LOG_REQUESTS so each request is logged once
    - SQL_LOG_LEVEL: level for sqlalchemy.engine (default: WARNING)
    """

    level: str = "INFO"
    as_json: bool = False
    uvicorn_access: bool = False
    sql_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> LoggingOptions:
        log_requests = env_bool("LOG_REQUESTS", default=True)
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            as_json=env_bool("LOG_JSON", default=False),
            uvicorn_access=env_bool("LOG_UVICORN_ACCESS", default=not log_requests),
            sql_level=os.getenv("SQL_LOG_LEVEL", "WARNING").upper(),
        )


def build_logging_config(options: LoggingOptions) -> dict[str, Any]:
    """dictConfig schema for the given options."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {"format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"},
            "json": {"()": "jalanma.core.logging.JsonFormatter"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": options.level,
                "formatter": "json" if options.as_json else "text",
                "stream": sys.stdout,
            }
        },
        "root": {"handlers": ["console"], "level": options.level},
        "loggers": {
            "uvicorn": {"level": options.level, "propagate": True},
            "uvicorn.error": {"level": options.level, "propagate": True},
            "uvicorn.access": {
                "level": "INFO" if options.uvicorn_access else "WARNING",
                "propagate": True,
            },
            "sqlalchemy.engine": {"level": options.sql_level, "propagate": True},
        },
    }


def configure_logging(options: LoggingOptions | None = None) -> None:
    """Configure stdlib logging for jalanma + uvicorn."""
    logging.config.dictConfig(build_logging_config(options or LoggingOptions.from_env()))
