"""User domain models.

SQLModel table definition for User.
"""

import uuid
from typing import Any

from pydantic import EmailStr
from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from skillcircle.core.mixins import TimestampMixin


class User(TimestampMixin, SQLModel, table=True):
    """User database model.

    Created on first OAuth sign-in and completed by profile setup.
    Users are never hard-deleted; deactivate with is_active instead.

    Note: external_id is internal-only (Firebase UID) and should
    never be exposed in API responses.

    location holds {"address": str, "is_public": bool,
    "coordinates": {"lat": float, "lng": float} | None} or None.
    """

    __tablename__: str = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    external_id: str = Field(index=True, unique=True)
    email: EmailStr = Field(index=True, unique=True, max_length=255)
    name: str = Field(default="", max_length=100)
    profile_image: str | None = Field(default=None, max_length=1024)
    bio: str | None = Field(default=None, max_length=500)
    location: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))

    # Privacy
    is_private: bool = Field(default=False)
    show_location: bool = Field(default=True)
    show_skills_offered: bool = Field(default=True)
    show_skills_wanted: bool = Field(default=True)
    show_ratings: bool = Field(default=True)
    allow_direct_contact: bool = Field(default=True)

    # Account state
    is_setup_completed: bool = Field(default=False)
    is_active: bool = Field(default=True)
    is_verified: bool = Field(default=False)
    is_admin: bool = Field(default=False)
