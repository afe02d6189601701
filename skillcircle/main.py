from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqladmin import Admin

from skillcircle.admin.auth import AdminAuth
from skillcircle.admin.views import (
    AvailabilityAdmin,
    SkillExchangeAdmin,
    SkillOfferedAdmin,
    SkillWantedAdmin,
    UserAdmin,
)
from skillcircle.core.cors import add_cors_middleware
from skillcircle.core.exception_handlers import register_exception_handlers
from skillcircle.core.firebase import init_firebase
from skillcircle.core.logging import configure_logging
from skillcircle.core.request_logging import add_request_logging_middleware
from skillcircle.db.engine import engine
from skillcircle.router import api_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_firebase()
    yield


app = FastAPI(title="SkillCircle", version="0.1.0", lifespan=lifespan)

app.include_router(api_router)

add_request_logging_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)

# Mount SQLAdmin UI at /admin (SQLAdmin enables sessions via auth backend secret)
admin = Admin(
    app=app,
    engine=engine,
    title="SkillCircle Admin",
    authentication_backend=AdminAuth(),
)
admin.add_view(UserAdmin)
admin.add_view(SkillOfferedAdmin)
admin.add_view(SkillWantedAdmin)
admin.add_view(AvailabilityAdmin)
admin.add_view(SkillExchangeAdmin)
