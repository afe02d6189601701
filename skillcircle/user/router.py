"""User domain router.

Self-service profile edits and admin account moderation.
Users are deactivated rather than deleted.
"""

import logging
import uuid

from fastapi import APIRouter, Depends
from sqlmodel import select

from skillcircle.auth.dependencies import CurrentUserDep, require_admin, require_auth
from skillcircle.core.constants import CommonResponses, Routes
from skillcircle.core.deps import SessionDep
from skillcircle.user.exceptions import UserNotFoundError
from skillcircle.user.models import User
from skillcircle.user.schemas import (
    UserAdminUpdate,
    UserPublicRead,
    UserRead,
    UserUpdateMe,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.USER.prefix,
    tags=[Routes.USER.tag],
    dependencies=[Depends(require_auth)],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
    },
)


@router.patch(
    "/me", response_model=UserPublicRead, responses={**CommonResponses.BAD_REQUEST}
)
async def update_me(
    user: CurrentUserDep, user_update: UserUpdateMe, session: SessionDep
):
    """Update current authenticated user's profile and privacy flags.

    For security, users cannot modify email, is_active, is_verified or is_admin.
    """
    # Only bio may be cleared; a null elsewhere means "leave unchanged".
    update_data = {
        key: value
        for key, value in user_update.model_dump(exclude_unset=True).items()
        if value is not None or key == "bio"
    }
    for key, value in update_data.items():
        setattr(user, key, value)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@router.get("/", response_model=list[UserRead], dependencies=[Depends(require_admin)])
async def list_users(session: SessionDep):
    """List all users. Admin only."""
    users = session.exec(select(User).order_by(User.created_at.desc())).all()
    return users


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    dependencies=[Depends(require_admin)],
    responses={**CommonResponses.NOT_FOUND},
)
async def update_user(
    user_id: uuid.UUID, user_update: UserAdminUpdate, session: SessionDep
):
    """Activate/deactivate or verify a user by ID. Admin only.

    A deactivated user's skills drop out of search and cannot be requested.
    """
    user = session.get(User, user_id)
    if not user:
        raise UserNotFoundError()

    update_data = user_update.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in update_data.items():
        setattr(user, key, value)

    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info(
        "User %s updated by admin: %s",
        user.id,
        update_data,
        extra={"user_id": user.id},
    )
    return user
