"""Shared types for request and response schemas."""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def serialize_datetime(value: datetime) -> str:
    """Format datetime as ISO 8601 string in UTC.

    Converts datetime to UTC timezone and formats with Z suffix
    (e.g. 2026-01-19T12:34:56Z).
    """
    # Convert to UTC if timezone-aware, otherwise assume UTC
    if value.tzinfo is not None:
        utc_value = value.astimezone(UTC)
    else:
        # Naive datetime - assume it's already UTC (SQLite drops tzinfo)
        utc_value = value.replace(tzinfo=UTC)

    # Normalize to whole seconds and format with Z suffix
    return utc_value.replace(microsecond=0).isoformat().replace("+00:00", "Z")


UTCDateTime = Annotated[
    datetime, PlainSerializer(serialize_datetime, return_type=str, when_used="json")
]


class RequestModel(BaseModel):
    """Base for request bodies.

    The web client sends camelCase keys; snake_case is accepted too.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )
