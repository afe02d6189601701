"""Logging setup for the SkillCircle API.

Everything goes to stdout, as plain text locally or one JSON object per line
in deployments (LOG_JSON=true). Uvicorn's loggers are routed through the same
handler. Switches are plain environment variables so logging can be
configured before Settings is importable.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from datetime import UTC, datetime
from enum import Enum
from typing import Any

# Record attributes copied into JSON lines when present. Set via extra= by the
# request middleware, the exception handlers and the domain services.
_EXTRA_KEYS = (
    "request_id",
    "method",
    "path",
    "query",
    "status_code",
    "duration_ms",
    "client_ip",
    "user_agent",
    "error_type",
    "user_id",
    "exchange_id",
    "skill_id",
    "action",
)

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}


def env_bool(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, bool | int | float):
        return value
    if isinstance(value, Enum):
        return value.value
    return str(value)


class JsonFormatter(logging.Formatter):
    """One JSON object per record: ts, level, logger, msg plus known extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        for key in _EXTRA_KEYS:
            if key in record.__dict__:
                payload[key] = _jsonable(record.__dict__[key])

        return json.dumps(payload, ensure_ascii=False)


def build_logging_config() -> dict[str, Any]:
    """Return the dictConfig for the current environment.

    Env vars:
    - LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    - LOG_JSON: true/false (default: false)
    - LOG_REQUESTS: true/false (default: true)
    - LOG_UVICORN_ACCESS: defaults to the opposite of LOG_REQUESTS, so each
      request is logged once
    - SQL_LOG_LEVEL: level for sqlalchemy.engine (default: WARNING)
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    uvicorn_access = env_bool(
        "LOG_UVICORN_ACCESS", default=not env_bool("LOG_REQUESTS", default=True)
    )

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            },
            "json": {"()": "skillcircle.core.logging.JsonFormatter"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "json" if env_bool("LOG_JSON", default=False) else "text",
                "stream": sys.stdout,
            }
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": {
            "uvicorn": {"level": level, "propagate": True},
            "uvicorn.error": {"level": level, "propagate": True},
            "uvicorn.access": {
                "level": "INFO" if uvicorn_access else "WARNING",
                "propagate": True,
            },
            "sqlalchemy.engine": {
                "level": os.getenv("SQL_LOG_LEVEL", "WARNING"),
                "propagate": True,
            },
        },
    }


def configure_logging() -> None:
    logging.config.dictConfig(build_logging_config())
