"""Media upload use case: type and size checks, then store under a unique key."""

import logging
import re
import secrets
import time
from pathlib import PurePosixPath

from sitecms.application.interfaces import MediaStore
from sitecms.application.services.form_response_service import PREFIX as FORM_RESPONSES_PREFIX
from sitecms.domain.entities import StoredMedia
from sitecms.domain.exceptions import ItemValidationError

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES: frozenset[str] = frozenset(
    {
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "image/svg+xml",
        "video/mp4",
        "video/webm",
        "video/quicktime",
    }
)

DEFAULT_FOLDER = "uploads"

_EXTENSION_TYPES: dict[str, str] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "mp4": "video/mp4",
    "webm": "video/webm",
    "mov": "video/quicktime",
}


def _clean_folder(folder: str | None) -> str:
    """Keep a safe relative folder: word characters and dashes per segment."""
    parts = [
        re.sub(r"[^\w\-]", "", part)
        for part in (folder or "").replace("\\", "/").split("/")
        if part not in ("", ".", "..")
    ]
    cleaned = "/".join(part for part in parts if part)
    return cleaned or DEFAULT_FOLDER


def _extension(filename: str | None) -> str:
    suffix = PurePosixPath(filename or "").suffix.lstrip(".").lower()
    return re.sub(r"[^a-z0-9]", "", suffix) or "bin"


def content_type_for(key: str) -> str:
    return _EXTENSION_TYPES.get(_extension(key), "application/octet-stream")


def build_media_key(folder: str | None, filename: str | None) -> str:
    """``<folder>/<epoch millis>-<random>.<ext>``"""
    stamp = int(time.time() * 1000)
    return f"{_clean_folder(folder)}/{stamp}-{secrets.token_hex(4)[:7]}.{_extension(filename)}"


class UploadService:
    """Validates uploaded files and writes them to the media store."""

    def __init__(self, store: MediaStore, max_size_bytes: int):
        self._store = store
        self._max_size_bytes = max_size_bytes

    @property
    def max_size_bytes(self) -> int:
        return self._max_size_bytes

    async def upload(
        self,
        content: bytes,
        filename: str | None,
        content_type: str | None,
        folder: str | None = None,
    ) -> StoredMedia:
        if content_type not in ALLOWED_CONTENT_TYPES:
            raise ItemValidationError(
                "Invalid file type. Allowed: jpg, png, gif, webp, svg, mp4, webm, mov"
            )
        if len(content) > self._max_size_bytes:
            limit_mb = self._max_size_bytes // (1024 * 1024)
            raise ItemValidationError(f"File too large. Max size: {limit_mb}MB")

        key = build_media_key(folder, filename)
        url = await self._store.put(key, content, content_type)
        logger.info("Uploaded %s as %s (%d bytes)", filename, key, len(content))

        return StoredMedia(
            key=key,
            url=url,
            size=len(content),
            content_type=content_type,
            uploaded_at=time.time(),
        )

    async def read(self, key: str) -> bytes | None:
        """Public media bytes; contact form responses are never served here."""
        normalized = "/".join(p for p in key.replace("\\", "/").split("/") if p not in ("", ".", ".."))
        if normalized.startswith(FORM_RESPONSES_PREFIX):
            return None
        return await self._store.get(key)
