"""Section and item primitives of the site document.

The document is plain JSON: a section is ``{"title", "subtitle", "items": [...]}``
and an item is a JSON object whose only required field is a string ``id``.
"""

import re
from typing import Any

Item = dict[str, Any]
Document = dict[str, Any]

_WHITESPACE = re.compile(r"\s+")
_NOT_SLUG = re.compile(r"[^a-z0-9-]")


def slugify(text: str) -> str:
    """Lower-case, whitespace runs to ``-``, then drop anything outside ``[a-z0-9-]``.

    Diacritics are stripped, not transliterated: ``"Café"`` becomes ``"caf"``.
    """
    return _NOT_SLUG.sub("", _WHITESPACE.sub("-", text.lower()))


def default_id_generator(data: Item) -> str:
    """Slug of the item's ``name`` field, or of ``title`` when it has no ``name``."""
    field_name = "name" if "name" in data else "title"
    return slugify(str(data.get(field_name) or ""))


def empty_section(items: list[Item] | None = None) -> dict[str, Any]:
    """Section shape used when the document is missing a section key."""
    return {"title": "", "subtitle": "", "items": list(items or [])}


def item_ids(items: list[Item]) -> set[str]:
    return {str(item.get("id")) for item in items if item.get("id")}
