"""User domain exceptions."""

from skillcircle.core.exceptions import AuthorizationError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a member does not exist or keeps their profile private."""

    error_type = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class UserInactiveError(AuthorizationError):
    """Raised when a deactivated member tries to sign in or act."""

    error_type = "user_inactive"

    def __init__(self, message: str = "User is inactive"):
        super().__init__(message)


class ProfileSetupRequiredError(AuthorizationError):
    """Raised when a member acts before completing profile setup."""

    error_type = "profile_setup_required"

    def __init__(self, message: str = "Complete your profile setup first"):
        super().__init__(message)
