import hmac

from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from skillcircle.core.settings import get_settings


class AdminAuth(AuthenticationBackend):
    """SQLAdmin login against the back-office credentials in settings."""

    def __init__(self) -> None:
        # Signs the back-office session cookie; must stay stable across restarts.
        settings = get_settings()
        super().__init__(secret_key=settings.session_secret_key)

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = str(form.get("username", "")).strip()
        password = str(form.get("password", ""))

        settings = get_settings()
        ok = hmac.compare_digest(
            username.encode(), settings.admin_username.encode()
        ) and hmac.compare_digest(password.encode(), settings.admin_password.encode())
        if ok:
            request.session["admin_user"] = username
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get("admin_user"))
