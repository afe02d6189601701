"""Error response schemas for consistent API error formatting."""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """One failing field of a rejected request."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema.

    All API errors return this format for consistency. details is only
    present on validation errors.
    """

    type: str
    message: str
    details: list[ErrorDetail] | None = None
