"""Error response schemas for consistent API error formatting."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response schema.

    ``type`` is the machine-readable ``error_type`` of the raised exception,
    ``message`` is meant for humans.
    """

    type: str
    message: str
