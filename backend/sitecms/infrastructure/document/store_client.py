"""Document store client: reads and writes the site document by its fixed key.

The backend is optional. Without one, reads return the bundled default
document and writes raise ``BackendUnavailableError`` so callers can report
"accepted but not persisted" instead of failing.
"""

import copy
import json
import logging
from pathlib import Path

from sitecms.application.interfaces import KVBackend
from sitecms.domain.entities import Document
from sitecms.domain.exceptions import (
    BackendUnavailableError,
    DocumentParseError,
    DocumentReadError,
    DocumentWriteError,
)

logger = logging.getLogger(__name__)


def load_default_document(path: str | Path) -> Document:
    """Read the bundled default document from disk."""
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise DocumentParseError(str(path), "default document must be a JSON object")
    return data


class DocumentStoreClient:
    """Infrastructure adapter between the site document and a ``KVBackend``."""

    def __init__(
        self,
        backend: KVBackend | None,
        default_document: Document,
        key: str = "site-content",
    ):
        self._backend = backend
        self._default_document = default_document
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @property
    def available(self) -> bool:
        return self._backend is not None

    @property
    def backend_name(self) -> str:
        return self._backend.name if self._backend else "none"

    @property
    def default_document(self) -> Document:
        return copy.deepcopy(self._default_document)

    async def load_document(self) -> Document:
        """Read the document, falling back to the bundled default.

        A missing backend or missing key is normal operation. Malformed JSON
        is not: it raises ``DocumentParseError`` instead of being masked by
        the default.
        """
        if self._backend is None:
            logger.debug("No KV backend configured, serving default document")
            return self.default_document

        try:
            raw = await self._backend.get(self._key)
        except Exception as exc:
            logger.exception("Failed to read document '%s' from %s", self._key, self.backend_name)
            raise DocumentReadError(self._key, exc) from exc

        if raw is None:
            logger.info("Document '%s' not found in %s, serving default", self._key, self.backend_name)
            return self.default_document

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Document '%s' in %s is not valid JSON: %s", self._key, self.backend_name, exc)
            raise DocumentParseError(self._key, str(exc)) from exc

        if not isinstance(data, dict):
            raise DocumentParseError(self._key, f"expected a JSON object, got {type(data).__name__}")
        return data

    async def save_document(self, document: Document) -> None:
        """Serialize and write the full document under the fixed key."""
        if self._backend is None:
            raise BackendUnavailableError()

        payload = json.dumps(document, ensure_ascii=False)
        try:
            await self._backend.put(self._key, payload)
        except Exception as exc:
            logger.exception("Failed to write document '%s' to %s", self._key, self.backend_name)
            raise DocumentWriteError(self._key, exc) from exc

        logger.info("Saved document '%s' to %s (%d bytes)", self._key, self.backend_name, len(payload))
