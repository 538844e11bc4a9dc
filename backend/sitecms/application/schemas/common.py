"""Shared response envelope and patch helpers."""

import typing
from typing import Any

from pydantic import BaseModel, ValidationError


class ApiResponse(BaseModel):
    """``{success, data?, error?, warning?}``: the envelope of every JSON endpoint."""

    success: bool
    data: Any = None
    error: str | None = None
    warning: str | None = None

    def to_json(self, *, include_data: bool = True) -> dict[str, Any]:
        body: dict[str, Any] = {"success": self.success}
        if include_data and self.data is not None:
            body["data"] = self.data
        if self.error is not None:
            body["error"] = self.error
        if self.warning is not None:
            body["warning"] = self.warning
        return body


def format_validation_error(exc: ValidationError) -> str:
    """First pydantic error as ``"<dotted.path>: <message>"``."""
    errors = exc.errors()
    if not errors:
        return "Validation error"
    first = errors[0]
    path = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{path}: {message}" if path else message


def empty_value(model: type[BaseModel], field_name: str) -> Any:
    """The "cleared" value of a field: ``""``, ``[]``, ``{}`` or None by type."""
    info = model.model_fields[field_name]
    annotation = info.annotation
    candidates = typing.get_args(annotation) or (annotation,)
    for candidate in candidates:
        origin = typing.get_origin(candidate) or candidate
        if origin is list:
            return []
        if origin is dict:
            return {}
        if origin is str:
            return ""
    return None


def patch_changes(model: type[BaseModel], body: dict[str, Any]) -> dict[str, Any]:
    """Validate a partial update and return only the fields the caller sent.

    Omitted fields are left untouched by the merge. A field sent as ``null``
    is cleared to its empty value instead of being skipped.
    """
    patch = model.model_validate(body)
    changes = patch.model_dump(exclude_unset=True, by_alias=True, mode="json")
    aliases = {(info.alias or name): name for name, info in model.model_fields.items()}
    for key, value in list(changes.items()):
        if value is None:
            changes[key] = empty_value(model, aliases.get(key, key))
    return changes
