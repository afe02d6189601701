"""Skill exchange domain exceptions.

Client-facing messages are short business statements; callers tell
cases apart by error_type.
"""

from skillcircle.core.exceptions import (
    AuthorizationError,
    ConflictError,
    InvalidOperationError,
    NotFoundError,
)
from skillcircle.exchange.models import ExchangeStatus


class ExchangeNotFoundError(NotFoundError):
    """Raised when a skill exchange does not exist."""

    error_type = "exchange_not_found"

    def __init__(self, message: str = "Skill exchange request not found"):
        super().__init__(message)


class ExchangeForbiddenError(AuthorizationError):
    """Raised when a user acts on an exchange in a role they do not hold."""

    error_type = "exchange_forbidden"

    def __init__(
        self, message: str = "You are not authorized to respond to this request"
    ):
        super().__init__(message)


class SelfExchangeRequestError(InvalidOperationError):
    """Raised when a user requests a skill they offer themselves."""

    error_type = "self_request"

    def __init__(self, message: str = "You cannot request your own skill"):
        super().__init__(message)


class SkillUnavailableError(InvalidOperationError):
    """Raised when the skill's owner is inactive or private."""

    error_type = "skill_unavailable"

    def __init__(self, message: str = "This skill is not available for exchange"):
        super().__init__(message)


class DuplicateExchangeRequestError(ConflictError):
    """Raised when the learner already has an active request for the skill."""

    error_type = "duplicate_request"

    def __init__(
        self, message: str = "You already have an active request for this skill"
    ):
        super().__init__(message)


class InvalidExchangeStatusError(InvalidOperationError):
    """Raised when a transition is attempted from the wrong status."""

    error_type = "invalid_status"

    def __init__(self, status: ExchangeStatus, verb: str = "respond to"):
        self.status = status
        super().__init__(f"Cannot {verb} request with status: {status.value}")
