"""Application service (use case) for CRUD on one document section."""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from sitecms.application.interfaces import SectionRepository
from sitecms.application.schemas import format_validation_error, patch_changes
from sitecms.application.sections import SectionDefinition
from sitecms.domain.entities import Item
from sitecms.domain.exceptions import EntityNotFoundError, ItemValidationError

logger = logging.getLogger(__name__)

NOT_PERSISTED_WARNING = "Storage backend not available, changes not persisted"


@dataclass
class MutationResult:
    """Outcome of a write: the affected item and a warning when not durable."""

    item: Item | None = None
    warning: str | None = None


class SectionService:
    """Orchestrates section CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, definition: SectionDefinition, repository: SectionRepository):
        self._definition = definition
        self._repository = repository

    @property
    def definition(self) -> SectionDefinition:
        return self._definition

    @property
    def resource_name(self) -> str:
        return self._definition.resource_name

    def _warning(self) -> str | None:
        return None if self._repository.persistent else NOT_PERSISTED_WARNING

    async def list_items(self) -> list[Item]:
        return await self._repository.get_all()

    async def get_item(self, item_id: str) -> Item:
        item = await self._repository.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(self.resource_name, item_id)
        return item

    async def create_item(self, data: dict[str, Any]) -> MutationResult:
        missing = self._definition.missing_fields(data)
        if missing:
            raise ItemValidationError(f"Missing required fields: {', '.join(missing)}")

        try:
            validated = self._definition.create_schema.model_validate(data)
        except ValidationError as exc:
            raise ItemValidationError(format_validation_error(exc)) from exc

        fields = validated.model_dump(exclude_unset=True, by_alias=True, mode="json")
        if data.get("id"):
            fields["id"] = str(data["id"])

        item = await self._repository.create(fields)
        return MutationResult(item=item, warning=self._warning())

    async def update_item(self, item_id: str, data: dict[str, Any]) -> MutationResult:
        # The id in the path is authoritative; an id echoed in the body is ignored.
        body = {k: v for k, v in data.items() if k != "id"}
        try:
            changes = patch_changes(self._definition.patch_schema, body)
        except ValidationError as exc:
            raise ItemValidationError(format_validation_error(exc)) from exc

        item = await self._repository.update(item_id, changes)
        if item is None:
            raise EntityNotFoundError(self.resource_name, item_id)
        return MutationResult(item=item, warning=self._warning())

    async def delete_item(self, item_id: str) -> MutationResult:
        deleted = await self._repository.delete(item_id)
        if not deleted:
            raise EntityNotFoundError(self.resource_name, item_id)
        return MutationResult(warning=self._warning())
