"""Skill exchange domain models.

SQLModel table definition for SkillExchange and its status/format enums.

Status lifecycle:
    PENDING --accept--> ACCEPTED --start--> IN_PROGRESS --complete--> COMPLETED
    PENDING --reject / learner cancel--> CANCELLED
"""

import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import Index, text
from sqlmodel import Field, SQLModel

from skillcircle.core.mixins import TimestampMixin


class ExchangeStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class ExchangeFormat(str, Enum):
    ONLINE_ONLY = "ONLINE_ONLY"
    IN_PERSON_ONLY = "IN_PERSON_ONLY"
    HYBRID = "HYBRID"


class ExchangeRole(str, Enum):
    """The viewer's side of an exchange. Derived on read, never stored."""

    teacher = "teacher"
    learner = "learner"


# A learner may hold at most one of these per offered skill.
ACTIVE_STATUSES: tuple[ExchangeStatus, ...] = (
    ExchangeStatus.PENDING,
    ExchangeStatus.ACCEPTED,
    ExchangeStatus.IN_PROGRESS,
)

_ACTIVE_STATUS_CLAUSE = text(
    "status IN ({})".format(", ".join(f"'{s.value}'" for s in ACTIVE_STATUSES))
)


class SkillExchange(TimestampMixin, SQLModel, table=True):
    """A proposed or ongoing barter between a teacher and a learner.

    teacher_id is always the owner of offered_skill_id; learner_id is the
    user who created the request.
    """

    __tablename__: str = "skill_exchanges"
    __table_args__ = (
        Index(
            "uq_skill_exchanges_active_learner_skill",
            "learner_id",
            "offered_skill_id",
            unique=True,
            sqlite_where=_ACTIVE_STATUS_CLAUSE,
            postgresql_where=_ACTIVE_STATUS_CLAUSE,
        ),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    teacher_id: uuid.UUID = Field(foreign_key="users.id", index=True)
    learner_id: uuid.UUID = Field(foreign_key="users.id", index=True)
    offered_skill_id: uuid.UUID = Field(foreign_key="skills_offered.id", index=True)
    wanted_skill_id: uuid.UUID | None = Field(
        default=None, foreign_key="skills_wanted.id"
    )
    exchange_title: str = Field(max_length=200)
    agreement_terms: str
    format: ExchangeFormat
    estimated_hours: float | None = Field(default=None)
    status: ExchangeStatus = Field(default=ExchangeStatus.PENDING, index=True)
    scheduled_start: datetime | None = Field(default=None)
    actual_start: datetime | None = Field(default=None)
    completed_at: datetime | None = Field(default=None)
    progress_notes: str | None = Field(default=None)
