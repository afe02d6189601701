"""Profile domain router."""

import uuid

from fastapi import APIRouter, Depends

from skillcircle.auth.dependencies import CurrentUserDep, require_auth
from skillcircle.core.constants import CommonResponses, Routes
from skillcircle.core.deps import SessionDep
from skillcircle.profile import service
from skillcircle.profile.schemas import (
    ProfileRead,
    ProfileSetupRequest,
    PublicProfileRead,
)

router = APIRouter(
    prefix=Routes.PROFILE.prefix,
    tags=[Routes.PROFILE.tag],
    dependencies=[Depends(require_auth)],
    responses={**CommonResponses.UNAUTHORIZED},
)


@router.post(
    "/setup",
    response_model=ProfileRead,
    responses={**CommonResponses.BAD_REQUEST, **CommonResponses.INTERNAL_ERROR},
)
async def setup_profile(
    payload: ProfileSetupRequest, user: CurrentUserDep, session: SessionDep
):
    """Save the profile setup wizard: details, availability, privacy and skills."""
    return service.setup_profile(session, user, payload)


@router.get("/me", response_model=ProfileRead)
async def get_my_profile(user: CurrentUserDep, session: SessionDep):
    return service.get_own_profile(session, user)


@router.get(
    "/{user_id}",
    response_model=PublicProfileRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_public_profile(
    user_id: uuid.UUID, user: CurrentUserDep, session: SessionDep
):
    """Another user's profile, limited by their privacy settings."""
    return service.get_public_profile(session, user.id, user_id)
