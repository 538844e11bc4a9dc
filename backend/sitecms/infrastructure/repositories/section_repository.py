"""Concrete repository for one document section, backed by the DocumentStore."""

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field

from sitecms.application.interfaces import SectionRepository
from sitecms.domain.entities import Item, default_id_generator, item_ids
from sitecms.domain.exceptions import ItemValidationError
from sitecms.infrastructure.document import DocumentStore

logger = logging.getLogger(__name__)

IdGenerator = Callable[[Item], str]
# Returns (valid, error message).
CreateValidator = Callable[[Item], tuple[bool, str | None]]


def _always_valid(data: Item) -> tuple[bool, str | None]:
    return True, None


@dataclass
class SectionRepositoryConfig:
    """Per-section repository settings."""

    section_key: str
    default_items: list[Item] = field(default_factory=list)
    id_generator: IdGenerator = default_id_generator
    validate_on_create: CreateValidator = _always_valid


class DocumentSectionRepository(SectionRepository):
    """Implements the SectionRepository port on one array field of the site document.

    Every mutation is a read-modify-write of the whole document through
    ``DocumentStore.mutate_section``; concurrent writers to the same section
    race and the last one wins.
    """

    def __init__(self, store: DocumentStore, config: SectionRepositoryConfig):
        self._store = store
        self._config = config

    @property
    def section_key(self) -> str:
        return self._config.section_key

    @property
    def persistent(self) -> bool:
        return self._store.available

    # ── Reads ───────────────────────────────────────────────────────

    async def get_all(self) -> list[Item]:
        return await self._store.read_items(self.section_key, self._config.default_items)

    async def get_by_id(self, item_id: str) -> Item | None:
        for item in await self.get_all():
            if item.get("id") == item_id:
                return item
        return None

    # ── Writes ──────────────────────────────────────────────────────

    async def create(self, data: Item) -> Item:
        valid, error = self._config.validate_on_create(data)
        if not valid:
            raise ItemValidationError(error or "Validation failed")

        explicit_id = str(data.get("id") or "").strip()
        created: Item = {}

        def append(items: list[Item]) -> list[Item]:
            existing = item_ids(items)
            if explicit_id:
                if explicit_id in existing:
                    raise ItemValidationError(
                        f"An item with id '{explicit_id}' already exists in {self.section_key}"
                    )
                new_id = explicit_id
            else:
                new_id = self._unique_id(self._config.id_generator(data), existing)
            created.update({**data, "id": new_id})
            return [*items, dict(created)]

        persisted = await self._store.mutate_section(
            self.section_key, append, self._config.default_items
        )
        logger.info(
            "Created item '%s' in %s (persisted=%s)", created["id"], self.section_key, persisted
        )
        return created

    async def update(self, item_id: str, partial: Item) -> Item | None:
        changes = {k: v for k, v in partial.items() if k != "id"}
        merged: Item | None = None

        def merge(items: list[Item]) -> list[Item] | None:
            nonlocal merged
            for index, item in enumerate(items):
                if item.get("id") == item_id:
                    merged = {**item, **changes}
                    updated = list(items)
                    updated[index] = merged
                    return updated
            return None

        persisted = await self._store.mutate_section(
            self.section_key, merge, self._config.default_items
        )
        if merged is None:
            logger.debug("Update skipped, item '%s' not found in %s", item_id, self.section_key)
            return None

        logger.info(
            "Updated item '%s' in %s, fields=%s (persisted=%s)",
            item_id, self.section_key, sorted(changes), persisted,
        )
        return merged

    async def delete(self, item_id: str) -> bool:
        removed = False

        def remove(items: list[Item]) -> list[Item] | None:
            nonlocal removed
            remaining = [item for item in items if item.get("id") != item_id]
            if len(remaining) == len(items):
                return None
            removed = True
            return remaining

        persisted = await self._store.mutate_section(
            self.section_key, remove, self._config.default_items
        )
        if removed:
            logger.info("Deleted item '%s' from %s (persisted=%s)", item_id, self.section_key, persisted)
        return removed

    # ── Helpers ─────────────────────────────────────────────────────

    @staticmethod
    def _unique_id(candidate: str, existing: set[str]) -> str:
        """Make a generated id non-empty and unique within the section."""
        if not candidate:
            candidate = f"item-{secrets.token_hex(4)}"
        if candidate not in existing:
            return candidate
        suffix = 2
        while f"{candidate}-{suffix}" in existing:
            suffix += 1
        return f"{candidate}-{suffix}"
