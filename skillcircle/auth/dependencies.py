"""Auth domain dependencies.

Resolves the signed-in SkillCircle member for a request and gates routes on
admin rights or a completed profile.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session, select

from skillcircle.auth.exceptions import (
    AdminRequiredError,
    InvalidCredentialsError,
    InvalidTokenError,
    SessionCookieError,
)
from skillcircle.auth.service import FirebaseAuthService, get_firebase_auth_service
from skillcircle.core.constants import SESSION_COOKIE_NAME
from skillcircle.core.exceptions import AppException
from skillcircle.db.engine import get_session
from skillcircle.user.exceptions import (
    ProfileSetupRequiredError,
    UserInactiveError,
    UserNotFoundError,
)
from skillcircle.user.models import User

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def _firebase_uid(
    request: Request,
    firebase_auth: FirebaseAuthService,
    credentials: HTTPAuthorizationCredentials | None,
) -> str:
    """Return the Firebase uid behind the request's credentials.

    The web client's session cookie wins over an Authorization header; a
    cookie that fails verification is an error even when a bearer token is
    also present.
    """
    session_cookie = request.cookies.get(SESSION_COOKIE_NAME)
    if session_cookie:
        try:
            return firebase_auth.verify_session_cookie(
                session_cookie, check_revoked=True
            ).uid
        except SessionCookieError as e:
            logger.info("Rejected session cookie: %s", e.message)
            raise InvalidTokenError() from e

    if credentials is not None:
        try:
            return firebase_auth.verify_id_token(credentials.credentials).uid
        except AppException as e:
            logger.info("Rejected bearer token: %s", e.message)
            raise InvalidTokenError() from e

    raise InvalidCredentialsError()


def get_current_user(
    request: Request,
    session: Annotated[Session, Depends(get_session)],
    firebase_auth: Annotated[FirebaseAuthService, Depends(get_firebase_auth_service)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(security)
    ] = None,
) -> User:
    """Return the active member signed in on this request.

    Members are created by POST /auth/session, so a verified uid with no
    local row means the client skipped that call.

    Raises:
        InvalidCredentialsError: If neither a cookie nor a bearer token is sent
        InvalidTokenError: If the cookie or token does not verify
        UserNotFoundError: If no member has this Firebase uid
        UserInactiveError: If the member has been deactivated
    """
    uid = _firebase_uid(request, firebase_auth, credentials)

    user = session.exec(select(User).where(User.external_id == uid)).first()
    if user is None:
        raise UserNotFoundError()
    if not user.is_active:
        raise UserInactiveError()
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]
FirebaseAuthDep = Annotated[FirebaseAuthService, Depends(get_firebase_auth_service)]


def require_auth(_user: CurrentUserDep) -> None:
    """Router-level guard; endpoints that need the user take CurrentUserDep."""


def get_setup_user(user: CurrentUserDep) -> User:
    """Return the current user once their profile setup is complete.

    Raises:
        ProfileSetupRequiredError: If profile setup has not been submitted
    """
    if not user.is_setup_completed:
        raise ProfileSetupRequiredError()
    return user


SetupUserDep = Annotated[User, Depends(get_setup_user)]


def get_admin_user(user: CurrentUserDep) -> User:
    """Return the current user if they may use the admin endpoints.

    Raises:
        AdminRequiredError: If user is not an admin
    """
    if not user.is_admin:
        raise AdminRequiredError()
    return user


AdminUserDep = Annotated[User, Depends(get_admin_user)]


def require_admin(_user: AdminUserDep) -> None:
    """Router- or route-level guard for admin-only endpoints."""
