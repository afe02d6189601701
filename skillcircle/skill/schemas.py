"""Skill domain schemas.

Request and response schemas for the skill catalog and search.
"""

import uuid

from pydantic import Field
from sqlmodel import SQLModel

from skillcircle.core.pagination import Pagination
from skillcircle.core.types import RequestModel, UTCDateTime
from skillcircle.skill.models import ExperienceLevel, SkillCategory
from skillcircle.user.schemas import SkillOwnerRead


class SkillOfferedCreate(RequestModel):
    """A skill offered, as submitted during profile setup."""

    title: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=10, max_length=500)
    category: SkillCategory
    experience_level: ExperienceLevel
    years_of_experience: int | None = Field(default=None, ge=0, le=50)


class SkillWantedCreate(RequestModel):
    """A skill wanted, as submitted during profile setup."""

    title: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=10, max_length=500)
    category: SkillCategory
    current_level: ExperienceLevel | None = None
    desired_level: ExperienceLevel


class SkillOfferedUpdate(RequestModel):
    """Owner edits to an offered skill. is_active=False soft-deactivates it."""

    title: str | None = Field(default=None, min_length=3, max_length=100)
    description: str | None = Field(default=None, min_length=10, max_length=500)
    experience_level: ExperienceLevel | None = None
    years_of_experience: int | None = Field(default=None, ge=0, le=50)
    is_active: bool | None = None
    is_public: bool | None = None


class SkillOfferedRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: str
    category: SkillCategory
    experience_level: ExperienceLevel
    years_of_experience: int | None
    is_active: bool
    is_public: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


class SkillWantedRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: str
    category: SkillCategory
    current_level: ExperienceLevel | None
    desired_level: ExperienceLevel
    created_at: UTCDateTime
    updated_at: UTCDateTime


class SkillSearchResult(SkillOfferedRead):
    """A search hit with its owner's public projection."""

    user: SkillOwnerRead


class SkillSearchResponse(SQLModel):
    skills: list[SkillSearchResult]
    pagination: Pagination


class MySkillsResponse(SQLModel):
    skills_offered: list[SkillOfferedRead]
    skills_wanted: list[SkillWantedRead]
