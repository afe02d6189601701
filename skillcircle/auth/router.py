"""Auth domain router.

OAuth sign-in: the web client signs the user in with Google through
Firebase Authentication and posts the resulting ID token here. This module
turns it into an HTTP-only session cookie and keeps the local user record
in sync with the Google profile.
"""

import logging

from fastapi import APIRouter, Request, Response
from sqlmodel import Session, select

from skillcircle.auth.dependencies import CurrentUserDep, FirebaseAuthDep
from skillcircle.auth.exceptions import InvalidCredentialsError
from skillcircle.auth.schemas import AuthMessage, SessionLoginRequest
from skillcircle.auth.service import TokenClaims
from skillcircle.core.constants import SESSION_COOKIE_NAME, CommonResponses, Routes
from skillcircle.core.deps import SessionDep, SettingsDep
from skillcircle.core.exceptions import BadRequestError
from skillcircle.user.exceptions import UserInactiveError
from skillcircle.user.models import User
from skillcircle.user.schemas import UserPublicRead

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.BAD_REQUEST},
)


def _sync_local_user(session: Session, claims: TokenClaims) -> User:
    """Create the local user on first sign-in, refresh Google profile data after.

    Users are matched by Firebase UID first, then by email so an account
    created before the UID was known gets linked instead of duplicated.
    """
    user = session.exec(select(User).where(User.external_id == claims.uid)).first()
    if user is None:
        user = session.exec(select(User).where(User.email == claims.email)).first()

    if user is None:
        user = User(
            external_id=claims.uid,
            email=claims.email,
            name=claims.name or "",
            profile_image=claims.picture,
            is_verified=claims.email_verified,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        logger.info(
            "Created user %s on first sign-in", user.id, extra={"user_id": user.id}
        )
        return user

    changed = False
    if user.external_id != claims.uid:
        user.external_id = claims.uid
        changed = True
    if claims.name and user.name != claims.name:
        user.name = claims.name
        changed = True
    if claims.picture and user.profile_image != claims.picture:
        user.profile_image = claims.picture
        changed = True
    if claims.email_verified and not user.is_verified:
        user.is_verified = True
        changed = True

    if changed:
        session.add(user)
        session.commit()
        session.refresh(user)
    return user


@router.post(
    "/session",
    response_model=UserPublicRead,
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.FORBIDDEN},
)
async def create_session(
    payload: SessionLoginRequest,
    response: Response,
    session: SessionDep,
    firebase_auth: FirebaseAuthDep,
    settings: SettingsDep,
):
    """Exchange a Firebase ID token from Google sign-in for a session cookie.

    Returns the local user; clients check is_setup_completed to decide
    whether to send the user through profile setup.

    Raises:
        - InvalidTokenError: If the ID token cannot be verified
        - UserInactiveError: If the account has been deactivated
    """
    claims = firebase_auth.verify_id_token(payload.id_token)
    if not claims.email:
        raise BadRequestError("Email not found in Firebase token")

    session_cookie = firebase_auth.create_session_cookie(
        payload.id_token,
        expires_in=settings.session_expires_in,
    )

    user = _sync_local_user(session, claims)

    if not user.is_active:
        raise UserInactiveError()

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=session_cookie,
        max_age=int(settings.session_expires_in.total_seconds()),
        httponly=True,
        secure=settings.is_secure_cookie,
        samesite="lax",
    )
    return user


@router.post(
    "/logout",
    response_model=AuthMessage,
    responses={**CommonResponses.UNAUTHORIZED},
)
async def logout(
    request: Request,
    response: Response,
    firebase_auth: FirebaseAuthDep,
):
    """Clear Firebase session cookie and revoke refresh tokens."""
    session_cookie = request.cookies.get(SESSION_COOKIE_NAME)
    if not session_cookie:
        raise InvalidCredentialsError()

    # Always clear cookie on logout
    response.delete_cookie(key=SESSION_COOKIE_NAME)
    firebase_auth.logout(session_cookie)

    return AuthMessage(message="Logout successful")


@router.get(
    "/me",
    response_model=UserPublicRead,
    responses={**CommonResponses.UNAUTHORIZED},
)
async def get_me(user: CurrentUserDep):
    """Get current authenticated user."""
    return user
