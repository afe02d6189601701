"""Skill domain router.

Skill search for browsing other users' offers, and owner maintenance
of one's own skills.
"""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from skillcircle.auth.dependencies import CurrentUserDep, require_auth
from skillcircle.core.constants import CommonResponses, Routes
from skillcircle.core.deps import SessionDep, SettingsDep
from skillcircle.skill import service
from skillcircle.skill.schemas import (
    MySkillsResponse,
    SkillOfferedRead,
    SkillOfferedUpdate,
    SkillSearchResponse,
)

router = APIRouter(
    prefix=Routes.SKILL.prefix,
    tags=[Routes.SKILL.tag],
    dependencies=[Depends(require_auth)],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.BAD_REQUEST,
    },
)


@router.get("/search", response_model=SkillSearchResponse)
async def search_skills(
    user: CurrentUserDep,
    session: SessionDep,
    settings: SettingsDep,
    query: str | None = None,
    category: str | None = None,
    experience_level: Annotated[str | None, Query(alias="experienceLevel")] = None,
    location: str | None = None,
    page: str | None = None,
    limit: str | None = None,
):
    """Search skills offered by other users.

    category and experienceLevel accept "ALL" for no filter. page and limit
    fall back to 1 and 12 when missing or invalid.
    """
    params = service.SkillSearchParams.from_query(
        query=query,
        category=category,
        experience_level=experience_level,
        location=location,
        page=page,
        limit=limit,
        max_limit=settings.max_page_size,
    )
    return service.search_skills(session, user.id, params)


@router.get("/mine", response_model=MySkillsResponse)
async def list_my_skills(user: CurrentUserDep, session: SessionDep):
    """List the current user's offered and wanted skills."""
    return service.list_my_skills(session, user.id)


@router.patch(
    "/offered/{skill_id}",
    response_model=SkillOfferedRead,
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.FORBIDDEN},
)
async def update_offered_skill(
    skill_id: uuid.UUID,
    update: SkillOfferedUpdate,
    user: CurrentUserDep,
    session: SessionDep,
):
    """Edit or deactivate one of the current user's offered skills."""
    return service.update_offered_skill(session, user.id, skill_id, update)
