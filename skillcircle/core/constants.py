"""
App-wide constants for route configuration.

This module provides a single source of truth for route prefixes, tags,
and common response definitions for API routes.
"""

from dataclasses import dataclass
from typing import Any

from skillcircle.models.error import ErrorResponse


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints."""

    AUTH = RouteConfig(prefix="/auth", tag="auth")
    USER = RouteConfig(prefix="/users", tag="users")
    PROFILE = RouteConfig(prefix="/profile", tag="profile")
    SKILL = RouteConfig(prefix="/skills", tag="skills")
    EXCHANGE = RouteConfig(prefix="/skill-exchange", tag="skill-exchange")
    HEALTH = RouteConfig(prefix="/health", tag="health")


# Session cookie carrying the Firebase session token
SESSION_COOKIE_NAME = "session"


# Common response definitions for reuse across routers
# Use these when configuring APIRouter or individual endpoints
class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    UNAUTHORIZED: dict[int, dict[str, Any]] = {
        401: {
            "model": ErrorResponse,
            "description": "Not authenticated or invalid credentials",
        }
    }
    FORBIDDEN: dict[int, dict[str, Any]] = {
        403: {
            "model": ErrorResponse,
            "description": "User is inactive or lacks permissions",
        }
    }
    NOT_FOUND: dict[int, dict[str, Any]] = {
        404: {"model": ErrorResponse, "description": "Resource not found"}
    }
    BAD_REQUEST: dict[int, dict[str, Any]] = {
        400: {
            "model": ErrorResponse,
            "description": "Invalid request data or business rule violation",
        }
    }
    INTERNAL_ERROR: dict[int, dict[str, Any]] = {
        500: {"model": ErrorResponse, "description": "Unexpected server error"}
    }
