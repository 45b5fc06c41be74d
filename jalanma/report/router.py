"""Report domain router.

Report procedures: create, filter/list, read by id, read by owner, update.
Absent reports are answered with ``null`` rather than 404.
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from jalanma.core.constants import CommonResponses, Routes
from jalanma.core.deps import SessionDep
from jalanma.report import service
from jalanma.report.schemas import ReportCreate, ReportQuery, ReportRead, ReportUpdate

router = APIRouter(
    prefix=Routes.REPORT.prefix,
    tags=[Routes.REPORT.tag],
    responses={**CommonResponses.UNPROCESSABLE},
)


@router.post(
    "/createRoadDamageReport",
    response_model=ReportRead,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.CONFLICT},
)
async def create_road_damage_report(payload: ReportCreate, session: SessionDep):
    """Submit a report. The status always starts as ``pending``."""
    return service.create_report(session, payload)


@router.get("/getRoadDamageReports", response_model=list[ReportRead])
async def get_road_damage_reports(
    query: Annotated[ReportQuery, Query()], session: SessionDep
):
    """List reports, newest first, filtered by status, owner and/or radius."""
    return service.get_road_damage_reports(session, query)


@router.get("/getRoadDamageReportById", response_model=ReportRead | None)
async def get_road_damage_report_by_id(
    report_id: Annotated[str, Query(alias="id")], session: SessionDep
):
    return service.get_report_by_id(session, report_id)


@router.get("/getUserReports", response_model=list[ReportRead])
async def get_user_reports(
    user_id: Annotated[str, Query(alias="userId")], session: SessionDep
):
    return service.get_user_reports(session, user_id)


@router.post("/updateRoadDamageReport", response_model=ReportRead | None)
async def update_road_damage_report(payload: ReportUpdate, session: SessionDep):
    """Partially update a report.

    Any caller may update any report and set any status.
    """
    return service.update_report(session, payload)
