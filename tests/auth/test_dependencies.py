"""Tests for skillcircle/auth/dependencies.py - member resolution and guards."""

from unittest.mock import MagicMock

import pytest

from skillcircle.auth.dependencies import (
    get_admin_user,
    get_current_user,
    get_setup_user,
)
from skillcircle.auth.exceptions import (
    AdminRequiredError,
    InvalidCredentialsError,
    InvalidTokenError,
    SessionCookieError,
)
from skillcircle.auth.service import FirebaseAuthService, TokenClaims
from skillcircle.core.exceptions import AppException
from skillcircle.user.exceptions import (
    ProfileSetupRequiredError,
    UserInactiveError,
    UserNotFoundError,
)


def make_request(cookie: str | None = None) -> MagicMock:
    request = MagicMock()
    request.cookies = {"session": cookie} if cookie else {}
    return request


def bearer(token: str) -> MagicMock:
    credentials = MagicMock()
    credentials.credentials = token
    return credentials


@pytest.fixture(name="firebase")
def firebase_fixture() -> MagicMock:
    return MagicMock(spec=FirebaseAuthService)


class TestGetCurrentUser:
    def test_bearer_token(self, session, test_user, firebase):
        firebase.verify_id_token.return_value = TokenClaims(uid=test_user.external_id)

        user = get_current_user(make_request(), session, firebase, bearer("id-token"))

        assert user.id == test_user.id
        firebase.verify_id_token.assert_called_once_with("id-token")

    def test_session_cookie(self, session, teacher, firebase):
        firebase.verify_session_cookie.return_value = TokenClaims(
            uid=teacher.external_id
        )

        user = get_current_user(make_request("cookie"), session, firebase, None)

        assert user.name == "Tina Teacher"
        firebase.verify_session_cookie.assert_called_once_with(
            "cookie", check_revoked=True
        )

    def test_cookie_wins_over_bearer(self, session, test_user, teacher, firebase):
        firebase.verify_session_cookie.return_value = TokenClaims(
            uid=teacher.external_id
        )
        firebase.verify_id_token.return_value = TokenClaims(uid=test_user.external_id)

        user = get_current_user(
            make_request("cookie"), session, firebase, bearer("id-token")
        )

        assert user.id == teacher.id
        firebase.verify_id_token.assert_not_called()

    def test_bad_cookie_does_not_fall_back_to_bearer(self, session, firebase):
        firebase.verify_session_cookie.side_effect = SessionCookieError("revoked")

        with pytest.raises(InvalidTokenError):
            get_current_user(
                make_request("stale"), session, firebase, bearer("id-token")
            )

        firebase.verify_id_token.assert_not_called()

    def test_bad_bearer_token(self, session, firebase):
        firebase.verify_id_token.side_effect = AppException("expired")

        with pytest.raises(InvalidTokenError) as exc_info:
            get_current_user(make_request(), session, firebase, bearer("old"))

        assert exc_info.value.status_code == 401

    def test_no_credentials(self, session, firebase):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            get_current_user(make_request(), session, firebase, None)

        assert exc_info.value.message == "Authentication required"

    def test_unknown_uid(self, session, firebase):
        firebase.verify_id_token.return_value = TokenClaims(uid="never-signed-in")

        with pytest.raises(UserNotFoundError):
            get_current_user(make_request(), session, firebase, bearer("id-token"))

    def test_inactive_member(self, session, inactive_user, firebase):
        firebase.verify_id_token.return_value = TokenClaims(
            uid=inactive_user.external_id
        )

        with pytest.raises(UserInactiveError) as exc_info:
            get_current_user(make_request(), session, firebase, bearer("id-token"))

        assert exc_info.value.status_code == 403


def test_setup_user_passes_completed_profile(test_user):
    assert get_setup_user(test_user) is test_user


def test_setup_user_rejects_incomplete_profile(user_factory):
    newcomer = user_factory(is_setup_completed=False)

    with pytest.raises(ProfileSetupRequiredError) as exc_info:
        get_setup_user(newcomer)

    assert exc_info.value.status_code == 403


def test_admin_user(admin_user, test_user):
    assert get_admin_user(admin_user) is admin_user

    with pytest.raises(AdminRequiredError):
        get_admin_user(test_user)
