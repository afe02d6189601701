"""Auth domain schemas.

Request and response schemas for authentication operations.
"""

from pydantic import BaseModel, Field

from skillcircle.core.types import RequestModel


class SessionLoginRequest(RequestModel):
    """Firebase ID token obtained by the client from Google sign-in."""

    id_token: str = Field(min_length=1)


class AuthMessage(BaseModel):
    """Generic auth message response."""

    message: str
