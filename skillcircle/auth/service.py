"""Firebase Authentication service.

Members sign in with Google on the web client through Firebase
Authentication. The backend only ever sees the resulting Firebase ID token:
it trades that token for a long-lived session cookie, verifies the cookie
(or a bearer ID token) on later requests, and revokes refresh tokens on
logout.
"""

import contextlib
import logging
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import Any

from firebase_admin import auth as firebase_admin_auth
from firebase_admin.exceptions import FirebaseError

from skillcircle.auth.exceptions import (
    AuthenticationError,
    InvalidTokenError,
    SessionCookieError,
)

logger = logging.getLogger(__name__)

# Errors the Admin SDK raises for malformed, expired or revoked credentials.
_SDK_ERRORS = (ValueError, FirebaseError)


@dataclass(frozen=True)
class TokenClaims:
    """The identity carried by a verified ID token or session cookie.

    email, name and picture come from the member's Google profile and seed
    the local User on first sign-in.
    """

    uid: str
    email: str | None = None
    email_verified: bool = False
    name: str | None = None
    picture: str | None = None

    @classmethod
    def from_decoded(
        cls,
        decoded: dict[str, Any],
        *,
        allow_sub: bool,
        error: type[AuthenticationError],
    ) -> "TokenClaims":
        """Build claims from a decoded token.

        Session cookies may carry the uid only as the JWT subject; ID tokens
        must include uid.

        Raises:
            error: If no uid can be found
        """
        uid = decoded.get("uid") or (decoded.get("sub") if allow_sub else None)
        if not uid:
            raise error("Invalid token: missing uid")
        return cls(
            uid=uid,
            email=decoded.get("email"),
            email_verified=bool(decoded.get("email_verified", False)),
            name=decoded.get("name"),
            picture=decoded.get("picture"),
        )


class FirebaseAuthService:
    """Thin wrapper over firebase_admin.auth that speaks in app exceptions."""

    def create_session_cookie(self, id_token: str, expires_in: timedelta) -> str:
        """Exchange a fresh Google sign-in ID token for a session cookie.

        Firebase only accepts ID tokens issued in the last five minutes and
        expirations between 5 minutes and 2 weeks.

        Raises:
            SessionCookieError: If Firebase refuses the token
        """
        try:
            return firebase_admin_auth.create_session_cookie(
                id_token, expires_in=expires_in
            )
        except _SDK_ERRORS as e:
            logger.info("Session cookie creation refused: %s", e)
            raise SessionCookieError("Failed to create session cookie") from e

    def verify_session_cookie(
        self, session_cookie: str, check_revoked: bool = True
    ) -> TokenClaims:
        """Raises SessionCookieError if the cookie is invalid or revoked."""
        try:
            decoded = firebase_admin_auth.verify_session_cookie(
                session_cookie, check_revoked=check_revoked
            )
        except _SDK_ERRORS as e:
            raise SessionCookieError("Invalid session cookie") from e
        return TokenClaims.from_decoded(
            decoded, allow_sub=True, error=SessionCookieError
        )

    def verify_id_token(self, id_token: str) -> TokenClaims:
        """Raises InvalidTokenError if the ID token does not verify."""
        try:
            decoded = firebase_admin_auth.verify_id_token(id_token)
        except _SDK_ERRORS as e:
            raise InvalidTokenError("Invalid ID token") from e
        return TokenClaims.from_decoded(
            decoded, allow_sub=False, error=InvalidTokenError
        )

    def revoke_refresh_tokens(self, uid: str) -> None:
        """Sign the member out of every device. Best effort."""
        with contextlib.suppress(FirebaseError):
            firebase_admin_auth.revoke_refresh_tokens(uid)

    def logout(self, session_cookie: str) -> None:
        """Revoke the refresh tokens of the cookie's owner.

        A cookie that no longer verifies means the member is already signed
        out, so it is ignored. The router clears the cookie itself.
        """
        try:
            claims = self.verify_session_cookie(session_cookie, check_revoked=False)
        except SessionCookieError:
            return
        self.revoke_refresh_tokens(claims.uid)
        logger.info("Revoked refresh tokens", extra={"action": "logout"})


@lru_cache
def get_firebase_auth_service() -> FirebaseAuthService:
    return FirebaseAuthService()
