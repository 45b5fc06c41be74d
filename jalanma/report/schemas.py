"""Report domain schemas.

Request, query and response schemas for road damage reports. Field limits
mirror what the submission form enforces client side.
"""

import uuid
from datetime import date
from typing import Annotated, Self

from pydantic import BaseModel, Field, model_validator
from sqlmodel import SQLModel

from jalanma.core.schemas import HttpUrlString, TimestampedRead
from jalanma.report.models import ReportStatus

PhotoUrl = Annotated[HttpUrlString, Field(max_length=2048)]
ReporterName = Annotated[str, Field(min_length=1, max_length=255)]
ReporterPhone = Annotated[str, Field(min_length=10, max_length=32)]
ReporterAddress = Annotated[str, Field(min_length=5, max_length=1000)]
Latitude = Annotated[float, Field(ge=-90, le=90)]
Longitude = Annotated[float, Field(ge=-180, le=180)]

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100


class ReportRead(TimestampedRead):
    """Response schema for a full report record."""

    id: uuid.UUID
    user_id: uuid.UUID
    reporter_name: str
    reporter_phone: str
    reporter_address: str
    report_date: date
    damage_description: str | None
    photo_url: str
    latitude: float
    longitude: float
    status: ReportStatus


class ReportCreate(SQLModel):
    """Request schema for ``createRoadDamageReport``.

    There is deliberately no ``status`` field: a submitted status is dropped
    and new reports always start as pending.
    """

    reporter_name: ReporterName
    reporter_phone: ReporterPhone
    reporter_address: ReporterAddress
    report_date: date
    damage_description: str | None = None
    photo_url: PhotoUrl
    latitude: Latitude
    longitude: Longitude
    user_id: uuid.UUID


class ReportUpdate(SQLModel):
    """Request schema for ``updateRoadDamageReport``.

    Only fields present in the payload are applied. ``damage_description``
    may be set to null; the other fields may be omitted but not nulled.
    """

    id: str
    reporter_name: ReporterName | None = None
    reporter_phone: ReporterPhone | None = None
    reporter_address: ReporterAddress | None = None
    report_date: date | None = None
    damage_description: str | None = None
    photo_url: PhotoUrl | None = None
    latitude: Latitude | None = None
    longitude: Longitude | None = None
    status: ReportStatus | None = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> Self:
        nulled = sorted(
            name
            for name in self.model_fields_set
            if name != "damage_description" and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict[str, object]:
        """Explicitly supplied fields, excluding the target id."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class ReportQuery(BaseModel):
    """Query parameters for ``getRoadDamageReports``.

    The radius filter applies only when latitude, longitude and radius_km
    are all given.
    """

    status: ReportStatus | None = None
    user_id: str | None = None
    latitude: Latitude | None = None
    longitude: Longitude | None = None
    radius_km: float | None = Field(default=None, gt=0)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    offset: int = Field(default=0, ge=0)

    @property
    def radius_filter(self) -> tuple[float, float, float] | None:
        """(latitude, longitude, radius_km), or None unless all three are set."""
        if self.latitude is None or self.longitude is None or self.radius_km is None:
            return None
        return self.latitude, self.longitude, self.radius_km
