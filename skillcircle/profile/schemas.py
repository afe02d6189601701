"""Profile domain schemas.

The multi-step profile setup body, and the full profile returned to its
owner or, subject to privacy flags, to other users.
"""

import uuid
from typing import Any

from pydantic import Field, model_validator
from sqlmodel import SQLModel

from skillcircle.core.types import RequestModel
from skillcircle.profile.models import DayOfWeek, SessionDuration, TimeSlot
from skillcircle.skill.schemas import (
    SkillOfferedCreate,
    SkillOfferedRead,
    SkillWantedCreate,
    SkillWantedRead,
)
from skillcircle.user.schemas import PrivacySettings, UserPublicRead


class Position(RequestModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class LocationInput(RequestModel):
    address: str | None = Field(default=None, max_length=255)
    position: Position | None = None


class AvailabilityInput(RequestModel):
    days_of_week: list[DayOfWeek] = Field(min_length=1)
    time_slots: list[TimeSlot] = Field(min_length=1)
    session_duration: SessionDuration
    timezone: str = Field(min_length=1, max_length=64)
    is_recurring: bool = True


class ProfileSetupRequest(RequestModel):
    """Everything collected by the profile setup wizard."""

    name: str = Field(min_length=1, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    location: LocationInput | None = None
    availability: AvailabilityInput
    privacy: PrivacySettings = Field(default_factory=PrivacySettings)
    skills_offered: list[SkillOfferedCreate] = Field(default_factory=list)
    skills_wanted: list[SkillWantedCreate] = Field(default_factory=list)

    @model_validator(mode="after")
    def require_a_skill(self) -> "ProfileSetupRequest":
        if not self.skills_offered and not self.skills_wanted:
            raise ValueError("Add at least one skill you offer or want to learn")
        return self


class AvailabilityRead(SQLModel):
    days_of_week: list[DayOfWeek]
    time_slots: list[TimeSlot]
    session_duration: SessionDuration
    timezone: str
    is_recurring: bool


class ProfileRead(SQLModel):
    """A user's own profile."""

    user: UserPublicRead
    availability: AvailabilityRead | None
    skills_offered: list[SkillOfferedRead]
    skills_wanted: list[SkillWantedRead]


class PublicProfileRead(SQLModel):
    """Another user's profile with privacy flags applied.

    Hidden sections come back as null rather than empty, so clients can
    tell "not shared" from "none".
    """

    id: uuid.UUID
    name: str
    profile_image: str | None
    bio: str | None
    location: dict[str, Any] | None
    is_verified: bool
    allow_direct_contact: bool
    availability: AvailabilityRead | None
    skills_offered: list[SkillOfferedRead] | None
    skills_wanted: list[SkillWantedRead] | None
