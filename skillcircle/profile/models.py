"""Profile domain models.

SQLModel table definition for a user's availability window.
"""

import uuid
from enum import Enum

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from skillcircle.core.mixins import TimestampMixin


class DayOfWeek(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class TimeSlot(str, Enum):
    EARLY_MORNING = "EARLY_MORNING"
    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    EVENING = "EVENING"
    LATE_EVENING = "LATE_EVENING"


class SessionDuration(str, Enum):
    THIRTY_MINUTES = "THIRTY_MINUTES"
    ONE_HOUR = "ONE_HOUR"
    TWO_HOURS = "TWO_HOURS"
    THREE_HOURS = "THREE_HOURS"
    HALF_DAY = "HALF_DAY"
    FULL_DAY = "FULL_DAY"
    FLEXIBLE = "FLEXIBLE"


class Availability(TimestampMixin, SQLModel, table=True):
    """When a user is available for exchanges. One row per user.

    days_of_week and time_slots are stored as JSON lists of enum values.
    """

    __tablename__: str = "availabilities"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", unique=True, index=True)
    days_of_week: list[DayOfWeek] = Field(sa_column=Column(JSON, nullable=False))
    time_slots: list[TimeSlot] = Field(sa_column=Column(JSON, nullable=False))
    session_duration: SessionDuration
    timezone: str = Field(max_length=64)
    is_recurring: bool = Field(default=True)
