"""Local filesystem media store: uploaded media and contact form responses.

Storage layout:
    <media_dir>/<folder>/<millis>-<random>.<ext>   : uploaded images and videos
    <media_dir>/form-responses/<id>.json           : contact form submissions

Objects are addressed by their relative key and served back through
``/api/media/<key>``.
"""

import asyncio
import logging
import re
from pathlib import Path

from sitecms.application.interfaces import MediaObject, MediaStore

logger = logging.getLogger(__name__)

MEDIA_URL_PREFIX = "/api/media/"


def _sanitise(segment: str, max_len: int = 120) -> str:
    """Replace characters outside word/dot/dash with underscores and truncate."""
    return re.sub(r"[^\w.\-]", "_", segment)[:max_len].strip("_.") or "unnamed"


class LocalMediaStore(MediaStore):
    """Infrastructure adapter storing media objects as plain files."""

    def __init__(self, media_dir: str | Path, url_prefix: str = MEDIA_URL_PREFIX):
        self._root = Path(media_dir).resolve()
        self._url_prefix = url_prefix

    @property
    def root(self) -> Path:
        return self._root

    # ── Key Handling ────────────────────────────────────────────────

    def _path_for(self, key: str) -> Path:
        """Map a key to a path inside the media root; ``..`` segments are dropped."""
        segments = [
            _sanitise(part)
            for part in key.replace("\\", "/").split("/")
            if part not in ("", ".", "..")
        ]
        if not segments:
            raise ValueError(f"Invalid media key: {key!r}")
        return self._root.joinpath(*segments)

    def _key_for(self, path: Path) -> str:
        return path.relative_to(self._root).as_posix()

    # ── MediaStore ──────────────────────────────────────────────────

    async def put(self, key: str, content: bytes, content_type: str | None = None) -> str:
        dest_path = self._path_for(key)
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        await asyncio.to_thread(dest_path.write_bytes, content)

        stored_key = self._key_for(dest_path)
        logger.info("Stored media object: %s (%d bytes, %s)", stored_key, len(content), content_type)
        return f"{self._url_prefix}{stored_key}"

    async def get(self, key: str) -> bytes | None:
        try:
            path = self._path_for(key)
        except ValueError:
            return None
        if not path.is_file():
            return None
        return await asyncio.to_thread(path.read_bytes)

    async def list(self, prefix: str = "") -> list[MediaObject]:
        def scan() -> list[MediaObject]:
            objects: list[MediaObject] = []
            if not self._root.is_dir():
                return objects
            for path in self._root.rglob("*"):
                if not path.is_file():
                    continue
                key = self._key_for(path)
                if not key.startswith(prefix):
                    continue
                stat = path.stat()
                objects.append(MediaObject(key=key, size=stat.st_size, uploaded=stat.st_mtime))
            return objects

        return await asyncio.to_thread(scan)
