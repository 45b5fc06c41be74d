"""Upload domain router."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import BaseModel

from jalanma.core.constants import CommonResponses, Routes
from jalanma.upload.service import PhotoUploader, get_photo_uploader

router = APIRouter(
    prefix=Routes.UPLOAD.prefix,
    tags=[Routes.UPLOAD.tag],
    responses={**CommonResponses.BAD_REQUEST, **CommonResponses.UNPROCESSABLE},
)

PhotoUploaderDep = Annotated[PhotoUploader, Depends(get_photo_uploader)]


class PhotoUploadResponse(BaseModel):
    url: str


@router.post("/uploadPhoto", response_model=PhotoUploadResponse)
async def upload_photo(
    uploader: PhotoUploaderDep,
    file: Annotated[UploadFile, File()],
    file_name: Annotated[str | None, Form(alias="fileName")] = None,
    mime_type: Annotated[str | None, Form(alias="mimeType")] = None,
):
    """Upload a road damage photo (multipart).

    ``fileName`` and ``mimeType`` override the name and content type of the
    uploaded part.
    """
    content = await file.read()
    url = uploader.upload(
        content,
        file_name if file_name is not None else (file.filename or ""),
        mime_type if mime_type is not None else (file.content_type or ""),
    )
    return PhotoUploadResponse(url=url)
