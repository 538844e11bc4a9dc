"""Document store: the single read-modify-write primitive over the site document.

Sections are edited independently but stored together. ``mutate_section``
reads the whole document (through the cache), replaces one section's
``items`` and writes the whole document back. Two concurrent mutations of
the same section race and the last write wins; there is no version stamp
or lock. Keeping every write behind this one method means a compare-and-swap
can be introduced here without touching the repositories.
"""

import logging
from collections.abc import Callable
from typing import Any

from sitecms.application.interfaces import SiteDocumentStore
from sitecms.domain.entities import Document, Item, empty_section
from sitecms.domain.exceptions import BackendUnavailableError
from sitecms.infrastructure.document.read_cache import DocumentCache
from sitecms.infrastructure.document.store_client import DocumentStoreClient

logger = logging.getLogger(__name__)

# Receives the current items; returns the new items, or None to skip the write.
SectionMutation = Callable[[list[Item]], list[Item] | None]


class DocumentStore(SiteDocumentStore):
    """Cached reads and whole-document writes with cache invalidation."""

    def __init__(self, client: DocumentStoreClient, cache: DocumentCache):
        self._client = client
        self._cache = cache

    @property
    def available(self) -> bool:
        return self._client.available

    @property
    def backend_name(self) -> str:
        return self._client.backend_name

    @property
    def cache(self) -> DocumentCache:
        return self._cache

    async def read(self) -> Document:
        return await self._cache.get()

    def section_from(
        self, document: Document, section_key: str, default_items: list[Item] | None = None
    ) -> dict[str, Any]:
        """Return the named section, substituting a default one when missing."""
        section = document.get(section_key)
        if isinstance(section, dict) and isinstance(section.get("items"), list):
            return section

        bundled = self._client.default_document.get(section_key)
        if default_items is None and isinstance(bundled, dict):
            default_items = bundled.get("items") or []
        substitute = empty_section(default_items)
        if isinstance(bundled, dict):
            substitute.update({k: v for k, v in bundled.items() if k != "items"})
        if isinstance(section, dict):
            substitute.update({k: v for k, v in section.items() if k != "items"})
        return substitute

    async def read_items(self, section_key: str, default_items: list[Item] | None = None) -> list[Item]:
        document = await self.read()
        return list(self.section_from(document, section_key, default_items)["items"])

    async def mutate_section(
        self,
        section_key: str,
        mutation: SectionMutation,
        default_items: list[Item] | None = None,
    ) -> bool:
        """Apply ``mutation`` to one section's items and persist the document.

        Returns True if the document was persisted, False if the mutation
        asked to skip the write or no backend is configured. Every other
        top-level key of the document is written back unchanged.
        """
        document = await self.read()
        section = self.section_from(document, section_key, default_items)

        new_items = mutation(list(section["items"]))
        if new_items is None:
            return False

        document[section_key] = {**section, "items": new_items}
        return await self._save(document, reason=f"section '{section_key}'")

    async def replace_document(self, document: Document) -> bool:
        """Overwrite the whole document (admin dashboard save)."""
        return await self._save(document, reason="full document")

    async def _save(self, document: Document, reason: str) -> bool:
        try:
            await self._client.save_document(document)
        except BackendUnavailableError:
            logger.warning("KV backend not available, %s change not persisted", reason)
            return False

        self._cache.invalidate()
        return True
