from .form_response import FormResponse
from .media import StoredMedia
from .section import (
    Document,
    Item,
    default_id_generator,
    empty_section,
    item_ids,
    slugify,
)

__all__ = [
    "Document",
    "FormResponse",
    "Item",
    "StoredMedia",
    "default_id_generator",
    "empty_section",
    "item_ids",
    "slugify",
]
