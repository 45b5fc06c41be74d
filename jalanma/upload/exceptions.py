"""Upload domain exceptions."""

from jalanma.core.exceptions import ValidationError


class PhotoValidationError(ValidationError):
    """Raised when an uploaded photo is empty, too large or not an image."""

    error_type = "photo_validation_error"

    def __init__(self, message: str = "Invalid photo upload"):
        super().__init__(message)
