"""Per-item sync state for optimistic editing.

    IDLE ──begin_save──▶ SAVING ──save_settled (last pending)──▶ IDLE
    IDLE ──begin_delete──▶ DELETING ──delete_failed──▶ IDLE
                                     └─delete succeeded: item is dropped

Overlapping saves on one item are allowed; the item stays SAVING until
every one of them has settled. Deleting is only possible from IDLE.
"""

import copy
from enum import Enum
from typing import Any

from sitecms.domain.entities import Item
from sitecms.domain.exceptions import InvalidTransitionError


class ItemState(str, Enum):
    IDLE = "idle"
    SAVING = "saving"
    DELETING = "deleting"


class TrackedItem:
    """An item's local (optimistic) fields plus its last server-acknowledged snapshot."""

    def __init__(self, data: Item):
        self.data: Item = copy.deepcopy(data)
        self.confirmed: Item = copy.deepcopy(data)
        self.state = ItemState.IDLE
        self.pending_saves = 0

    @property
    def id(self) -> str:
        return str(self.data.get("id", ""))

    @property
    def dirty(self) -> bool:
        """True when local fields differ from what the server last acknowledged."""
        return self.data != self.confirmed

    def _reject(self, event: str) -> InvalidTransitionError:
        return InvalidTransitionError(self.id, self.state.value, event)

    # ── Transitions ─────────────────────────────────────────────────

    def apply(self, changes: dict[str, Any]) -> None:
        """Write field changes locally (the optimistic part of an edit)."""
        if self.state is ItemState.DELETING:
            raise self._reject("apply")
        self.data.update({k: v for k, v in changes.items() if k != "id"})

    def begin_save(self) -> None:
        if self.state is ItemState.DELETING:
            raise self._reject("begin_save")
        self.state = ItemState.SAVING
        self.pending_saves += 1

    def save_settled(self, success: bool, acknowledged: Item | None = None) -> None:
        """One in-flight save finished. The local value is kept either way."""
        if self.state is not ItemState.SAVING or self.pending_saves == 0:
            raise self._reject("save_settled")
        self.pending_saves -= 1
        if success and acknowledged:
            self.confirmed.update(copy.deepcopy(acknowledged))
        if self.pending_saves == 0:
            self.state = ItemState.IDLE

    def begin_delete(self) -> None:
        if self.state is not ItemState.IDLE:
            raise self._reject("begin_delete")
        self.state = ItemState.DELETING

    def delete_failed(self) -> None:
        if self.state is not ItemState.DELETING:
            raise self._reject("delete_failed")
        self.state = ItemState.IDLE

    def revert(self) -> None:
        """Restore the last acknowledged snapshot."""
        if self.state is not ItemState.IDLE:
            raise self._reject("revert")
        self.data = copy.deepcopy(self.confirmed)

    # ── Views ───────────────────────────────────────────────────────

    def view(self) -> Item:
        """Fields plus the ``isSaving`` / ``isDeleting`` flags a form renders from."""
        return {
            **copy.deepcopy(self.data),
            "isSaving": self.state is ItemState.SAVING,
            "isDeleting": self.state is ItemState.DELETING,
        }
