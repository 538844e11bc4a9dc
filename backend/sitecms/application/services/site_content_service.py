"""Application service for whole-document reads and the dashboard save."""

import logging
from typing import Any

from sitecms.application.interfaces import SiteDocumentStore
from sitecms.application.sections import SECTIONS
from sitecms.application.services.section_service import NOT_PERSISTED_WARNING
from sitecms.domain.entities import Document
from sitecms.domain.exceptions import ItemValidationError

logger = logging.getLogger(__name__)


def check_sections(document: Document) -> None:
    """Every CRUD section present must hold objects with unique, non-empty string ids."""
    for definition in SECTIONS:
        key = definition.section_key
        if key not in document:
            continue
        section = document[key]
        if not isinstance(section, dict) or not isinstance(section.get("items"), list):
            raise ItemValidationError(f"{key}: must be an object with an 'items' list")

        seen: set[str] = set()
        for index, item in enumerate(section["items"]):
            if not isinstance(item, dict):
                raise ItemValidationError(f"{key}.items.{index}: must be an object")
            item_id = item.get("id")
            if not isinstance(item_id, str) or not item_id.strip():
                raise ItemValidationError(f"{key}.items.{index}: missing 'id'")
            if item_id in seen:
                raise ItemValidationError(f"{key}.items.{index}: duplicate id '{item_id}'")
            seen.add(item_id)


class SiteContentService:
    """Reads the full site document and replaces it wholesale."""

    def __init__(self, store: SiteDocumentStore):
        self._store = store

    async def get_content(self) -> Document:
        return await self._store.read()

    async def replace_content(self, document: Any) -> str | None:
        """Overwrite the whole document. Returns a warning when not persisted."""
        if not isinstance(document, dict):
            raise ItemValidationError("Site content must be a JSON object")
        check_sections(document)

        persisted = await self._store.replace_document(document)
        logger.info("Site content replaced (persisted=%s, keys=%s)", persisted, sorted(document))
        return None if persisted else NOT_PERSISTED_WARNING
