"""Report domain exceptions."""

from jalanma.core.exceptions import ConflictError


class ReportOwnerNotFoundError(ConflictError):
    """Raised when a report references a user that does not exist."""

    error_type = "report_owner_not_found"

    def __init__(self, message: str = "Report owner does not exist"):
        super().__init__(message)
