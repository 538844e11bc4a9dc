"""Unit tests for the per-item sync state machine."""

import pytest

from sitecms.client import ItemState, TrackedItem
from sitecms.domain.exceptions import InvalidTransitionError


def make_item() -> TrackedItem:
    return TrackedItem({"id": "p1", "title": "Old", "features": []})


def test_new_item_is_idle_and_clean():
    item = make_item()
    assert item.state is ItemState.IDLE
    assert item.dirty is False
    assert item.view()["isSaving"] is False
    assert item.view()["isDeleting"] is False


def test_save_success_returns_to_idle_and_acknowledges():
    item = make_item()
    item.apply({"title": "New"})
    item.begin_save()
    assert item.view()["isSaving"] is True

    item.save_settled(True, {"title": "New"})

    assert item.state is ItemState.IDLE
    assert item.data["title"] == "New"
    assert item.dirty is False


def test_save_failure_keeps_optimistic_value():
    item = make_item()
    item.apply({"title": "New"})
    item.begin_save()

    item.save_settled(False)

    assert item.state is ItemState.IDLE
    assert item.data["title"] == "New"
    assert item.confirmed["title"] == "Old"
    assert item.dirty is True


def test_overlapping_saves_stay_saving_until_all_settle():
    item = make_item()
    item.begin_save()
    item.begin_save()

    item.save_settled(True, {"title": "A"})
    assert item.state is ItemState.SAVING

    item.save_settled(True, {"title": "B"})
    assert item.state is ItemState.IDLE


def test_revert_restores_acknowledged_snapshot():
    item = make_item()
    item.apply({"title": "Unsaved"})

    item.revert()

    assert item.data["title"] == "Old"


def test_delete_failure_returns_to_idle():
    item = make_item()
    item.begin_delete()
    assert item.view()["isDeleting"] is True

    item.delete_failed()

    assert item.state is ItemState.IDLE


@pytest.mark.parametrize(
    "setup, event",
    [
        ("save", "begin_delete"),
        ("delete", "begin_save"),
        ("delete", "begin_delete"),
        ("delete", "revert"),
        ("save", "revert"),
        ("idle", "delete_failed"),
    ],
)
def test_invalid_transitions_raise(setup: str, event: str):
    item = make_item()
    if setup == "save":
        item.begin_save()
    elif setup == "delete":
        item.begin_delete()

    with pytest.raises(InvalidTransitionError):
        getattr(item, event)()


def test_settle_without_pending_save_raises():
    with pytest.raises(InvalidTransitionError):
        make_item().save_settled(True)


def test_apply_never_changes_id():
    item = make_item()
    item.apply({"id": "other", "title": "x"})
    assert item.id == "p1"
