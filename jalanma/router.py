"""Central API router aggregating all domain routers."""

from fastapi import APIRouter

from jalanma.auth.router import router as auth_router
from jalanma.health.router import router as health_router
from jalanma.report.router import router as report_router
from jalanma.upload.router import router as upload_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(report_router)
api_router.include_router(upload_router)
