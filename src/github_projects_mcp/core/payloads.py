from __future__ import annotations

from typing import Any, Dict

from .errors import ParameterError, PayloadValidationError
from .models import NewProjectItem, UpdateFieldPayload

CONTENT_TYPES = {
    "issue": "Issue",
    "pull_request": "PullRequest",
}


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a field id
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_update_field(raw: Any) -> UpdateFieldPayload:
    """
    Validate the decoded ``updated_field`` argument.

    Expects ``{"id": <number>, "value": <any JSON value>}``; a null value
    clears the field. Extra keys are ignored.
    """
    if not isinstance(raw, dict):
        raise PayloadValidationError("updated_field must be an object")

    if "id" not in raw:
        raise PayloadValidationError("updated_field.id is required")
    field_id = raw["id"]
    if not _is_number(field_id):
        raise PayloadValidationError("updated_field.id must be a number")
    if isinstance(field_id, float) and not field_id.is_integer():
        raise PayloadValidationError("updated_field.id must be an integer")

    if "value" not in raw:
        raise PayloadValidationError("updated_field.value is required")

    return UpdateFieldPayload(id=int(field_id), value=raw["value"])


def update_body(payload: UpdateFieldPayload) -> Dict[str, Any]:
    """Wrap one field update as the singleton batch the API expects."""
    return {"fields": [payload.model_dump()]}


def to_content_type(item_type: str) -> str:
    # exact tags only; "ISSUE" or "Issue" is rejected
    if not isinstance(item_type, str) or item_type not in CONTENT_TYPES:
        raise ParameterError("item_type must be either 'issue' or 'pull_request'")
    return CONTENT_TYPES[item_type]


def new_item_body(item_type: str, content_id: int) -> Dict[str, Any]:
    return NewProjectItem(id=content_id, type=to_content_type(item_type)).model_dump()


__all__ = [
    "CONTENT_TYPES",
    "build_update_field",
    "update_body",
    "to_content_type",
    "new_item_body",
]
