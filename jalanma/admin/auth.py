from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from jalanma.core.settings import get_settings


class AdminAuth(AuthenticationBackend):
    """SQLAdmin auth using Starlette sessions.

    Login always fails while ADMIN_USERNAME / ADMIN_PASSWORD are unset.
    """

    def __init__(self) -> None:
        super().__init__(secret_key=get_settings().session_secret_key)

    async def login(self, request: Request) -> bool:
        settings = get_settings()
        if not settings.admin_enabled:
            return False

        form = await request.form()
        username = str(form.get("username", form.get("email", "")))
        password = str(form.get("password", ""))

        ok = (
            username.strip() == settings.admin_username
            and password == settings.admin_password
        )
        if ok:
            request.session["admin_user"] = username.strip()
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get("admin_user"))
