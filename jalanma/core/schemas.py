"""Shared schema pieces."""

from datetime import UTC, datetime
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, HttpUrl, TypeAdapter, field_serializer
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import SQLModel

_HTTP_URL = TypeAdapter(HttpUrl)


def _check_email(value: str) -> str:
    """Format check only; the address is kept exactly as sent."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


def _check_http_url(value: str) -> str:
    """Accept http(s) URLs without normalizing them."""
    try:
        _HTTP_URL.validate_python(value)
    except PydanticValidationError as e:
        raise ValueError("value is not a valid http(s) URL") from e
    return value


# Emails and URLs are matched and returned byte for byte, so validation
# must not rewrite them (EmailStr lowercases the domain, HttpUrl adds "/").
EmailAddress = Annotated[str, AfterValidator(_check_email)]
HttpUrlString = Annotated[str, AfterValidator(_check_http_url)]


class TimestampedRead(SQLModel):
    """Response base for records carrying ``TimestampMixin`` columns."""

    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_datetime(self, value: datetime) -> str:
        """Format datetime as ISO 8601 string in UTC with a Z suffix.

        e.g. 2026-01-19T12:34:56.123456Z
        """
        # Naive values come back from SQLite and are already UTC.
        if value.tzinfo is not None:
            utc_value = value.astimezone(UTC)
        else:
            utc_value = value.replace(tzinfo=UTC)

        return utc_value.isoformat().replace("+00:00", "Z")
