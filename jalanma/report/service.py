"""Road damage report handlers and the report query engine.

All functions take an open SQLModel session and either return records,
return None / an empty list for absent data, or raise. Storage failures
are logged and re-raised unchanged; nothing is retried.
"""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from jalanma.core.mixins import utc_now
from jalanma.report.exceptions import ReportOwnerNotFoundError
from jalanma.report.geo import bounding_box, great_circle_distance_km
from jalanma.report.models import ReportStatus, RoadDamageReport
from jalanma.report.schemas import ReportCreate, ReportQuery, ReportUpdate

logger = logging.getLogger(__name__)

_NEWEST_FIRST = (
    col(RoadDamageReport.created_at).desc(),
    col(RoadDamageReport.id).desc(),
)


def _parse_id(value: str | uuid.UUID) -> uuid.UUID | None:
    """Identifiers that are not UUIDs cannot match any stored row."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


def create_report(session: Session, data: ReportCreate) -> RoadDamageReport:
    """Persist a new report with status ``pending``.

    Raises:
        ReportOwnerNotFoundError: If ``user_id`` references no user.
    """
    report = RoadDamageReport(**data.model_dump(), status=ReportStatus.pending)
    session.add(report)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.warning(
            "Report rejected, unknown owner %s", data.user_id, extra={"user_id": data.user_id}
        )
        raise ReportOwnerNotFoundError() from e
    except Exception:
        session.rollback()
        logger.exception("Road damage report creation failed")
        raise

    session.refresh(report)
    logger.info(
        "Created report",
        extra={"report_id": report.id, "user_id": report.user_id},
    )
    return report


def get_report_by_id(session: Session, report_id: str) -> RoadDamageReport | None:
    report_uuid = _parse_id(report_id)
    if report_uuid is None:
        return None
    try:
        return session.get(RoadDamageReport, report_uuid)
    except Exception:
        logger.exception("Failed to get road damage report %s", report_id)
        raise


def get_user_reports(session: Session, user_id: str) -> Sequence[RoadDamageReport]:
    """All reports owned by ``user_id``, newest first.

    Unknown users and users without reports both yield an empty list.
    """
    owner = _parse_id(user_id)
    if owner is None:
        return []
    statement = (
        select(RoadDamageReport)
        .where(RoadDamageReport.user_id == owner)
        .order_by(*_NEWEST_FIRST)
    )
    try:
        return session.exec(statement).all()
    except Exception:
        logger.exception("Failed to fetch reports of user %s", user_id)
        raise


def get_road_damage_reports(
    session: Session, query: ReportQuery
) -> Sequence[RoadDamageReport]:
    """Filter, order and paginate reports.

    Status and owner filters plus a bounding-box prefilter run in SQL. The
    exact great-circle test runs on the candidates afterwards, so pagination
    for radius queries happens in Python on the already filtered list.
    """
    statement = select(RoadDamageReport)

    if query.status is not None:
        statement = statement.where(RoadDamageReport.status == query.status)

    if query.user_id:
        owner = _parse_id(query.user_id)
        if owner is None:
            return []
        statement = statement.where(RoadDamageReport.user_id == owner)

    statement = statement.order_by(*_NEWEST_FIRST)

    radius_filter = query.radius_filter
    try:
        if radius_filter is None:
            paged = statement.offset(query.offset).limit(query.limit)
            return session.exec(paged).all()

        lat, lon, radius_km = radius_filter
        box = bounding_box(lat, lon, radius_km)
        statement = statement.where(
            col(RoadDamageReport.latitude).between(box.min_lat, box.max_lat)
        )
        if box.bounds_longitude:
            statement = statement.where(
                col(RoadDamageReport.longitude).between(box.min_lon, box.max_lon)
            )

        candidates = session.exec(statement).all()
    except Exception:
        logger.exception("Failed to fetch road damage reports")
        raise

    nearby = [
        report
        for report in candidates
        if great_circle_distance_km(lat, lon, report.latitude, report.longitude)
        <= radius_km
    ]
    return nearby[query.offset : query.offset + query.limit]


def update_report(session: Session, data: ReportUpdate) -> RoadDamageReport | None:
    """Apply the supplied fields; ``updated_at`` is refreshed on every call."""
    report = get_report_by_id(session, data.id)
    if report is None:
        return None

    for key, value in data.changes().items():
        setattr(report, key, value)
    report.updated_at = utc_now()

    session.add(report)
    try:
        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Road damage report update failed", extra={"report_id": report.id})
        raise

    session.refresh(report)
    logger.info("Updated report", extra={"report_id": report.id})
    return report
