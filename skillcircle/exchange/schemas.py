"""Skill exchange domain schemas.

Request bodies for creating and acting on exchanges, and the read model
returned to either participant.
"""

import uuid
from enum import Enum

from pydantic import Field
from sqlmodel import SQLModel

from skillcircle.core.pagination import Pagination
from skillcircle.core.types import RequestModel, UTCDateTime
from skillcircle.exchange.models import ExchangeFormat, ExchangeRole, ExchangeStatus
from skillcircle.skill.models import ExperienceLevel, SkillCategory
from skillcircle.user.schemas import UserSummary


class ExchangeCreate(RequestModel):
    """A learner's request for another user's offered skill."""

    offered_skill_id: uuid.UUID
    exchange_title: str = Field(min_length=1, max_length=200)
    agreement_terms: str = Field(min_length=1)
    format: ExchangeFormat
    estimated_hours: float | None = Field(default=None, gt=0)
    wanted_skill_id: uuid.UUID | None = None


class ExchangeAction(str, Enum):
    accept = "accept"
    reject = "reject"


class ExchangeRespond(RequestModel):
    """The teacher's decision on a pending request."""

    action: ExchangeAction
    response_message: str | None = Field(default=None, max_length=1000)


class ExchangeStart(RequestModel):
    progress_note: str | None = Field(default=None, max_length=1000)


class OfferedSkillSummary(SQLModel):
    id: uuid.UUID
    title: str
    description: str
    category: SkillCategory
    experience_level: ExperienceLevel


class WantedSkillSummary(SQLModel):
    id: uuid.UUID
    title: str
    description: str
    category: SkillCategory
    desired_level: ExperienceLevel


class ExchangeRead(SQLModel):
    """An exchange as seen by one of its participants.

    user_role is the viewer's side of the exchange.
    """

    id: uuid.UUID
    teacher_id: uuid.UUID
    learner_id: uuid.UUID
    offered_skill_id: uuid.UUID
    wanted_skill_id: uuid.UUID | None
    exchange_title: str
    agreement_terms: str
    format: ExchangeFormat
    estimated_hours: float | None
    status: ExchangeStatus
    scheduled_start: UTCDateTime | None
    actual_start: UTCDateTime | None
    completed_at: UTCDateTime | None
    progress_notes: str | None
    created_at: UTCDateTime
    updated_at: UTCDateTime
    teacher: UserSummary
    learner: UserSummary
    offered_skill: OfferedSkillSummary
    wanted_skill: WantedSkillSummary | None
    user_role: ExchangeRole


class ExchangeActionResponse(SQLModel):
    data: ExchangeRead
    message: str


class ExchangeListResponse(SQLModel):
    exchanges: list[ExchangeRead]
    pagination: Pagination
