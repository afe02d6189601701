"""Skill domain exceptions."""

from skillcircle.core.exceptions import AuthorizationError, NotFoundError


class SkillNotFoundError(NotFoundError):
    """Raised when a skill does not exist or is not available."""

    error_type = "skill_not_found"

    def __init__(self, message: str = "Skill not found or not available"):
        super().__init__(message)


class SkillForbiddenError(AuthorizationError):
    """Raised when a user edits a skill they do not own."""

    error_type = "skill_forbidden"

    def __init__(self, message: str = "You can only modify your own skills"):
        super().__init__(message)
