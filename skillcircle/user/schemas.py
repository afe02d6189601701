"""User domain schemas.

Request and response schemas for user operations.

Security notes:
- external_id (Firebase UID) is internal-only, never exposed in responses
- UserSummary / SkillOwnerRead are the only projections shown to other users
- UserUpdateMe is restricted to prevent privilege escalation
"""

import uuid
from typing import Any

from pydantic import EmailStr, Field, model_validator
from sqlmodel import SQLModel

from skillcircle.core.types import RequestModel, UTCDateTime


class UserSummary(SQLModel):
    """Minimal projection of another user (exchange teacher/learner)."""

    id: uuid.UUID
    name: str
    profile_image: str | None
    is_verified: bool


class SkillOwnerRead(UserSummary):
    """Owner projection attached to search results.

    location is withheld unless the owner shares it.
    """

    bio: str | None
    location: dict[str, Any] | None
    show_location: bool

    @model_validator(mode="after")
    def hide_private_location(self) -> "SkillOwnerRead":
        if not self.show_location:
            self.location = None
        return self


class PrivacySettings(RequestModel):
    """Privacy flags controlling what other users can see."""

    is_private: bool = False
    show_location: bool = True
    show_ratings: bool = True
    show_skills_offered: bool = True
    show_skills_wanted: bool = True
    allow_direct_contact: bool = True


class UserPublicRead(SQLModel):
    """Response schema for the current user's own data.

    Used for non-admin contexts like /me endpoints.
    """

    id: uuid.UUID
    email: EmailStr
    name: str
    profile_image: str | None
    bio: str | None
    location: dict[str, Any] | None
    is_private: bool
    show_location: bool
    show_ratings: bool
    show_skills_offered: bool
    show_skills_wanted: bool
    allow_direct_contact: bool
    is_setup_completed: bool
    is_active: bool
    is_verified: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


class UserRead(UserPublicRead):
    """Full response schema for admin contexts."""

    is_admin: bool


class UserUpdateMe(RequestModel):
    """Schema for users updating their own profile.

    Intentionally limited to prevent privilege escalation.
    Users cannot modify: email, is_active, is_verified, is_admin, external_id.
    """

    name: str | None = Field(default=None, min_length=1, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    is_private: bool | None = None
    show_location: bool | None = None
    show_ratings: bool | None = None
    show_skills_offered: bool | None = None
    show_skills_wanted: bool | None = None
    allow_direct_contact: bool | None = None


class UserAdminUpdate(RequestModel):
    """Schema for admins moderating an account."""

    is_active: bool | None = None
    is_verified: bool | None = None
