"""Report domain models.

SQLModel table definition for RoadDamageReport.
"""

import uuid
from datetime import date
from enum import Enum

from sqlmodel import Field, SQLModel

from jalanma.core.mixins import TimestampMixin


class ReportStatus(str, Enum):
    """Report lifecycle tag.

    - pending: newly submitted, not yet looked at
    - in_progress: repair work acknowledged or underway
    - resolved: damage repaired
    - rejected: report dismissed

    No transition graph is enforced: updates may set any status.
    """

    pending = "pending"
    in_progress = "in_progress"
    resolved = "resolved"
    rejected = "rejected"


class RoadDamageReport(TimestampMixin, SQLModel, table=True):
    """Road damage report database model.

    Reporter fields are free text and independent of the owning user's
    profile.
    """

    __tablename__: str = "road_damage_reports"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    reporter_name: str
    reporter_phone: str
    reporter_address: str
    report_date: date
    damage_description: str | None = Field(default=None)
    photo_url: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    status: ReportStatus = Field(default=ReportStatus.pending, index=True, max_length=20)
