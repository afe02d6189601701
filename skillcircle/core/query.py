"""Helpers for parsing list/search query strings."""

from enum import Enum
from typing import TypeVar

from skillcircle.core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)

# Sentinel meaning "no filter" for enum query parameters.
ALL = "ALL"


def parse_enum_filter(value: str | None, enum_cls: type[E], field: str) -> E | None:
    """Parse an optional enum filter from a query string.

    Empty values and the "ALL" sentinel (any case) mean no filter. Anything
    else must be a member of enum_cls.

    Raises:
        ValidationError: If the value is not a known member
    """
    if value is None:
        return None
    stripped = value.strip()
    if not stripped or stripped.upper() == ALL:
        return None
    try:
        return enum_cls(stripped)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        message = f"Invalid {field}: expected one of {allowed}"
        raise ValidationError(
            message, details=[{"field": field, "message": message}]
        ) from e


def clean_text(value: str | None) -> str | None:
    """Trim a free-text query parameter, mapping blank to None."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None
