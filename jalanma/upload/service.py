"""Photo upload service.

Validates road damage photos and synthesizes the public URL they would
be served from. Bytes are not persisted; ``PhotoUploader`` stands in for
an object storage client.
"""

import logging
import time
import uuid
from functools import lru_cache

from jalanma.core.settings import get_settings
from jalanma.upload.exceptions import PhotoValidationError

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB, inclusive

ALLOWED_MIME_TYPES = (
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/webp",
    "image/gif",
)

MIME_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
}

DEFAULT_EXTENSION = ".jpg"
STORED_NAME_PREFIX = "road-damage"


def file_extension(file_name: str, mime_type: str) -> str:
    """Pick the stored file extension.

    Order: the original name's extension (a dot followed by at least one
    character), then the MIME type table, then ``.jpg``.
    """
    _, dot, suffix = file_name.rpartition(".")
    if dot and suffix:
        return f".{suffix}"
    return MIME_EXTENSIONS.get(mime_type.strip().lower(), DEFAULT_EXTENSION)


class PhotoUploader:
    """Validate photos and hand out ``<base_url>/uploads/<name>`` URLs."""

    def __init__(
        self,
        base_url: str,
        max_file_size: int = MAX_FILE_SIZE,
        allowed_mime_types: tuple[str, ...] = ALLOWED_MIME_TYPES,
    ):
        self._base_url = base_url.rstrip("/")
        self._max_file_size = max_file_size
        self._allowed_mime_types = allowed_mime_types

    @property
    def base_url(self) -> str:
        return self._base_url

    def validate(self, content: bytes, file_name: str, mime_type: str) -> None:
        """Check the payload; the first failing rule wins.

        Raises:
            PhotoValidationError: If the payload breaks any rule.
        """
        if not content:
            raise PhotoValidationError("File buffer is required and cannot be empty")
        if not file_name.strip():
            raise PhotoValidationError("File name is required")
        if not mime_type.strip():
            raise PhotoValidationError("MIME type is required")
        if len(content) > self._max_file_size:
            max_mb = self._max_file_size // (1024 * 1024)
            raise PhotoValidationError(
                f"File size exceeds maximum allowed size of {max_mb}MB"
            )
        if mime_type.strip().lower() not in self._allowed_mime_types:
            raise PhotoValidationError(
                f"Unsupported file type: {mime_type}. "
                f"Allowed types: {', '.join(self._allowed_mime_types)}"
            )

    def stored_name(self, file_name: str, mime_type: str) -> str:
        """``road-damage-<ms timestamp>-<uuid4><ext>``, unique per call."""
        timestamp_ms = time.time_ns() // 1_000_000
        extension = file_extension(file_name, mime_type)
        return f"{STORED_NAME_PREFIX}-{timestamp_ms}-{uuid.uuid4()}{extension}"

    def upload(self, content: bytes, file_name: str, mime_type: str) -> str:
        """Validate the photo and return its public URL."""
        try:
            self.validate(content, file_name, mime_type)
        except PhotoValidationError as e:
            logger.info("Photo rejected: %s", e.message)
            raise

        url = f"{self._base_url}/uploads/{self.stored_name(file_name, mime_type)}"
        logger.info("Accepted photo upload (%d bytes) -> %s", len(content), url)
        return url


@lru_cache
def get_photo_uploader() -> PhotoUploader:
    """Get the cached uploader configured from settings."""
    return PhotoUploader(base_url=get_settings().upload_base_url)
