import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqladmin import Admin

from jalanma.admin.auth import AdminAuth
from jalanma.admin.views import RoadDamageReportAdmin, UserAdmin
from jalanma.core.cors import add_cors_middleware
from jalanma.core.exception_handlers import register_exception_handlers
from jalanma.core.logging import configure_logging
from jalanma.core.request_logging import add_request_logging_middleware
from jalanma.core.settings import get_settings
from jalanma.db.engine import engine, init_db
from jalanma.router import api_router

configure_logging()

logger = logging.getLogger("jalanma")


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    if settings.db_auto_create:
        init_db()
    logger.info("JalanMa API ready (%s)", settings.env_name)
    yield


app = FastAPI(title="JalanMa", version="0.1.0", lifespan=lifespan)

app.include_router(api_router)

add_request_logging_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)

# Mount SQLAdmin UI at /admin (SQLAdmin enables sessions via auth backend secret)
admin = Admin(
    app=app,
    engine=engine,
    authentication_backend=AdminAuth(),
)
admin.add_view(UserAdmin)
admin.add_view(RoadDamageReportAdmin)
