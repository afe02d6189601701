"""Skill catalog models.

SQLModel table definitions for skills a user offers and skills a user
wants to learn, plus the category and level enums they share.
"""

import uuid
from enum import Enum

from sqlmodel import Field, SQLModel

from skillcircle.core.mixins import TimestampMixin


class SkillCategory(str, Enum):
    TECHNOLOGY = "TECHNOLOGY"
    BUSINESS = "BUSINESS"
    CREATIVE = "CREATIVE"
    LANGUAGES = "LANGUAGES"
    MUSIC = "MUSIC"
    SPORTS = "SPORTS"
    COOKING = "COOKING"
    CRAFTS = "CRAFTS"
    HEALTH_WELLNESS = "HEALTH_WELLNESS"
    EDUCATION = "EDUCATION"
    AUTOMOTIVE = "AUTOMOTIVE"
    HOME_GARDEN = "HOME_GARDEN"
    OTHER = "OTHER"


class ExperienceLevel(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"


class SkillOffered(TimestampMixin, SQLModel, table=True):
    """A skill a user can teach.

    Never deleted; owners soft-deactivate it with is_active. Whether it
    shows up in search also depends on the owner's privacy flags.
    """

    __tablename__: str = "skills_offered"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True)
    title: str = Field(max_length=100)
    description: str = Field(max_length=500)
    category: SkillCategory = Field(index=True)
    experience_level: ExperienceLevel = Field(index=True)
    years_of_experience: int | None = Field(default=None, ge=0, le=50)
    is_active: bool = Field(default=True)
    is_public: bool = Field(default=True)


class SkillWanted(TimestampMixin, SQLModel, table=True):
    """A skill a user wants to learn."""

    __tablename__: str = "skills_wanted"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True)
    title: str = Field(max_length=100)
    description: str = Field(max_length=500)
    category: SkillCategory = Field(index=True)
    current_level: ExperienceLevel | None = Field(default=None)
    desired_level: ExperienceLevel
