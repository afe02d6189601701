"""Skill catalog service.

Search/filter query builder for offered skills, plus owner-side
maintenance of one's own skills.

A skill is visible to a viewer only when the skill is active and public,
belongs to someone else, and its owner is active, not private and shows
their offered skills.
"""

import logging
import uuid
from dataclasses import dataclass

from sqlalchemy import ColumnElement, func
from sqlmodel import Session, col, select

from skillcircle.core.pagination import PageRequest, Pagination
from skillcircle.core.query import clean_text, parse_enum_filter
from skillcircle.skill.exceptions import SkillForbiddenError, SkillNotFoundError
from skillcircle.skill.models import (
    ExperienceLevel,
    SkillCategory,
    SkillOffered,
    SkillWanted,
)
from skillcircle.skill.schemas import (
    MySkillsResponse,
    SkillOfferedRead,
    SkillOfferedUpdate,
    SkillSearchResponse,
    SkillSearchResult,
    SkillWantedRead,
)
from skillcircle.user.models import User
from skillcircle.user.schemas import SkillOwnerRead

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 12


@dataclass(frozen=True)
class SkillSearchParams:
    """Normalized search input."""

    page: PageRequest
    query: str | None = None
    category: SkillCategory | None = None
    experience_level: ExperienceLevel | None = None
    location: str | None = None

    @classmethod
    def from_query(
        cls,
        *,
        query: str | None = None,
        category: str | None = None,
        experience_level: str | None = None,
        location: str | None = None,
        page: str | int | None = None,
        limit: str | int | None = None,
        max_limit: int = 100,
    ) -> "SkillSearchParams":
        """Build params from raw query-string values.

        Raises:
            ValidationError: If category or experience level is unknown
        """
        return cls(
            page=PageRequest.from_query(
                page, limit, default_limit=DEFAULT_SEARCH_LIMIT, max_limit=max_limit
            ),
            query=clean_text(query),
            category=parse_enum_filter(category, SkillCategory, "category"),
            experience_level=parse_enum_filter(
                experience_level, ExperienceLevel, "experienceLevel"
            ),
            location=clean_text(location),
        )


def build_skill_search_filters(
    viewer_id: uuid.UUID, params: SkillSearchParams
) -> list[ColumnElement[bool]]:
    """Compose the WHERE clauses for a skill search.

    The clauses reference both SkillOffered and User, so the statement
    they are applied to must join the owner.
    """
    filters: list[ColumnElement[bool]] = [
        col(SkillOffered.is_active).is_(True),
        col(SkillOffered.is_public).is_(True),
        col(SkillOffered.user_id) != viewer_id,
        col(User.is_active).is_(True),
        col(User.is_private).is_(False),
        col(User.show_skills_offered).is_(True),
    ]

    if params.query:
        filters.append(
            col(SkillOffered.title).icontains(params.query, autoescape=True)
            | col(SkillOffered.description).icontains(params.query, autoescape=True)
        )

    if params.category is not None:
        filters.append(col(SkillOffered.category) == params.category)

    if params.experience_level is not None:
        filters.append(col(SkillOffered.experience_level) == params.experience_level)

    if params.location:
        filters.append(col(User.show_location).is_(True))
        filters.append(
            col(User.location)["address"]
            .as_string()
            .icontains(params.location, autoescape=True)
        )

    return filters


def search_skills(
    session: Session, viewer_id: uuid.UUID, params: SkillSearchParams
) -> SkillSearchResponse:
    """Return one page of skills visible to viewer_id, newest first."""
    filters = build_skill_search_filters(viewer_id, params)

    count_statement = (
        select(func.count())
        .select_from(SkillOffered)
        .join(User, col(SkillOffered.user_id) == col(User.id))
        .where(*filters)
    )
    total_count = session.exec(count_statement).one()

    rows = []
    # Pages past the end never reach the database; their offset may not fit.
    if not params.page.is_past_end(total_count):
        statement = (
            select(SkillOffered, User)
            .join(User, col(SkillOffered.user_id) == col(User.id))
            .where(*filters)
            .order_by(
                col(SkillOffered.created_at).desc(), col(SkillOffered.id).desc()
            )
            .offset(params.page.offset)
            .limit(params.page.limit)
        )
        rows = session.exec(statement).all()

    skills = [
        SkillSearchResult.model_validate(
            {**skill.model_dump(), "user": SkillOwnerRead.model_validate(owner)}
        )
        for skill, owner in rows
    ]
    return SkillSearchResponse(
        skills=skills,
        pagination=Pagination.build(params.page, total_count),
    )


def list_my_skills(session: Session, user_id: uuid.UUID) -> MySkillsResponse:
    offered = session.exec(
        select(SkillOffered)
        .where(SkillOffered.user_id == user_id)
        .order_by(col(SkillOffered.created_at).desc())
    ).all()
    wanted = session.exec(
        select(SkillWanted)
        .where(SkillWanted.user_id == user_id)
        .order_by(col(SkillWanted.created_at).desc())
    ).all()
    return MySkillsResponse(
        skills_offered=[SkillOfferedRead.model_validate(s) for s in offered],
        skills_wanted=[SkillWantedRead.model_validate(s) for s in wanted],
    )


def update_offered_skill(
    session: Session,
    user_id: uuid.UUID,
    skill_id: uuid.UUID,
    update: SkillOfferedUpdate,
) -> SkillOffered:
    """Apply an owner's edits to one of their offered skills.

    Raises:
        SkillNotFoundError: If the skill does not exist
        SkillForbiddenError: If user_id does not own it
    """
    skill = session.get(SkillOffered, skill_id)
    if skill is None:
        raise SkillNotFoundError("Skill not found")
    if skill.user_id != user_id:
        raise SkillForbiddenError()

    # Explicit nulls only make sense for the one nullable column.
    update_data = {
        key: value
        for key, value in update.model_dump(exclude_unset=True).items()
        if value is not None or key == "years_of_experience"
    }
    for key, value in update_data.items():
        setattr(skill, key, value)

    session.add(skill)
    session.commit()
    session.refresh(skill)
    logger.info(
        "Offered skill %s updated by owner: %s",
        skill.id,
        sorted(update_data),
        extra={"skill_id": skill.id, "user_id": user_id},
    )
    return skill
