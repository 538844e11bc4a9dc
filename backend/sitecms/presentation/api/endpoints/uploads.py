"""Media endpoints: admin upload and public serving of stored files."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import Response

from sitecms.application.services import UploadService, content_type_for
from sitecms.infrastructure.dependencies import get_upload_service, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Media"])

MEDIA_CACHE_CONTROL = "public, max-age=31536000, immutable"


@router.post("/upload", dependencies=[Depends(require_admin)])
async def upload_file(
    file: UploadFile | None = File(None),
    folder: str | None = Form(None),
    service: UploadService = Depends(get_upload_service),
) -> dict[str, Any]:
    """Store an image or video and return its public URL."""
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file provided")

    content = await file.read()
    stored = await service.upload(
        content=content,
        filename=file.filename,
        content_type=file.content_type,
        folder=folder,
    )
    return {"success": True, "url": stored.url, "filename": stored.key}


@router.get("/media/{key:path}")
async def get_media(
    key: str,
    service: UploadService = Depends(get_upload_service),
) -> Response:
    """Serve a stored file by its key."""
    content = await service.read(key)
    if content is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")
    return Response(
        content=content,
        media_type=content_type_for(key),
        headers={"Cache-Control": MEDIA_CACHE_CONTROL},
    )
