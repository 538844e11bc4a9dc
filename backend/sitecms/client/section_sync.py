"""Client-side synchronization of one section's items with the API.

Edits are applied locally first and sent afterwards (optimistic); a failed
save keeps the local value and reports an error, leaving ``retry_save`` and
``revert_item`` to the user. Nothing here raises into the caller: outcomes
are reported through the return value and the ``error`` / ``success``
messages.
"""

import logging
from collections.abc import Callable
from typing import Any

from sitecms.client.api_client import ApiResult, CrudApiClient
from sitecms.client.item_state import ItemState, TrackedItem
from sitecms.domain.entities import Item
from sitecms.domain.exceptions import InvalidTransitionError

logger = logging.getLogger(__name__)


class SectionSync:
    """Holds a section's items and their per-item sync state."""

    def __init__(
        self,
        api: CrudApiClient,
        resource_name: str = "Item",
        default_item: Callable[[], Item] | None = None,
    ):
        self._api = api
        self._resource_name = resource_name
        self._default_item = default_item or dict
        self._items: list[TrackedItem] = []

        self.loading = False
        self.error: str | None = None
        self.success: str | None = None

    # ── State ───────────────────────────────────────────────────────

    @property
    def items(self) -> list[Item]:
        return [tracked.view() for tracked in self._items]

    def get(self, item_id: str) -> TrackedItem | None:
        for tracked in self._items:
            if tracked.id == item_id:
                return tracked
        return None

    def state_of(self, item_id: str) -> ItemState | None:
        tracked = self.get(item_id)
        return tracked.state if tracked else None

    def clear_messages(self) -> None:
        self.error = None
        self.success = None

    def _fail(self, message: str) -> bool:
        self.error = message
        return False

    def _note_warning(self, result: ApiResult, action: str) -> None:
        if result.warning:
            self.success = f"{self._resource_name} {action} (not persisted: {result.warning})"

    # ── Operations ──────────────────────────────────────────────────

    async def load(self) -> bool:
        self.loading = True
        self.error = None
        try:
            result = await self._api.list_items()
            if not result.success:
                return self._fail(result.error or "Error loading items")
            self._items = [TrackedItem(item) for item in result.data or [] if isinstance(item, dict)]
            return True
        finally:
            self.loading = False

    async def edit_field(self, item_id: str, field: str, value: Any) -> bool:
        return await self.edit_fields(item_id, {field: value})

    async def edit_fields(self, item_id: str, changes: dict[str, Any]) -> bool:
        """Apply ``changes`` locally, then send them; the local value survives a failure."""
        tracked = self.get(item_id)
        if tracked is None:
            return self._fail(f"{self._resource_name} not found")
        try:
            tracked.apply(changes)
            tracked.begin_save()
        except InvalidTransitionError as exc:
            logger.debug("Edit rejected: %s", exc)
            return self._fail(f"{self._resource_name} is being deleted")

        sent = {k: v for k, v in changes.items() if k != "id"}
        return await self._send_save(tracked, sent)

    async def retry_save(self, item_id: str) -> bool:
        """Re-send every field that differs from the last acknowledged snapshot."""
        tracked = self.get(item_id)
        if tracked is None:
            return self._fail(f"{self._resource_name} not found")
        unsaved = {
            k: v
            for k, v in tracked.data.items()
            if k != "id" and tracked.confirmed.get(k) != v
        }
        if not unsaved:
            return True
        try:
            tracked.begin_save()
        except InvalidTransitionError as exc:
            logger.debug("Retry rejected: %s", exc)
            return self._fail(f"{self._resource_name} is being deleted")
        return await self._send_save(tracked, unsaved)

    async def _send_save(self, tracked: TrackedItem, sent: dict[str, Any]) -> bool:
        result = await self._api.update_item(tracked.id, sent)

        # The item may have been replaced by a reload while the request was in flight.
        if self.get(tracked.id) is not tracked:
            return result.success

        acknowledged = result.data if isinstance(result.data, dict) else sent
        tracked.save_settled(result.success, acknowledged if result.success else None)
        if not result.success:
            return self._fail(result.error or "Error saving")
        self._note_warning(result, "updated")
        return True

    def revert_item(self, item_id: str) -> bool:
        """Drop unsaved local changes, restoring the last acknowledged values."""
        tracked = self.get(item_id)
        if tracked is None:
            return self._fail(f"{self._resource_name} not found")
        try:
            tracked.revert()
        except InvalidTransitionError as exc:
            logger.debug("Revert rejected: %s", exc)
            return self._fail(f"{self._resource_name} is busy")
        return True

    async def delete_item(self, item_id: str) -> bool:
        tracked = self.get(item_id)
        if tracked is None:
            return self._fail(f"{self._resource_name} not found")
        try:
            tracked.begin_delete()
        except InvalidTransitionError as exc:
            logger.debug("Delete rejected: %s", exc)
            return self._fail(f"{self._resource_name} is busy, try again")

        result = await self._api.delete_item(item_id)
        if not result.success:
            tracked.delete_failed()
            return self._fail(result.error or "Error deleting")

        self._items = [t for t in self._items if t.id != tracked.id]
        self._note_warning(result, "deleted")
        return True

    async def add_item(self, data: Item | None = None) -> Item | None:
        """Create an item on the server and append what it returns."""
        self.loading = True
        self.error = None
        try:
            payload = data if data is not None else self._default_item()
            result = await self._api.create_item(payload)
            if not result.success:
                self._fail(result.error or f"Error creating {self._resource_name.lower()}")
                return None
            if isinstance(result.data, dict):
                self._items.append(TrackedItem(result.data))
            self._note_warning(result, "created")
            return result.data
        finally:
            self.loading = False
