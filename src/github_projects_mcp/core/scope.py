from __future__ import annotations

from enum import Enum
from typing import Union
from urllib.parse import quote

from .errors import ParameterError


class OwnerType(str, Enum):
    ORG = "org"
    USER = "user"


_PREFIXES = {OwnerType.ORG: "orgs", OwnerType.USER: "users"}


def parse_owner_type(value: Union[str, OwnerType, None]) -> OwnerType:
    if isinstance(value, OwnerType):
        return value
    try:
        return OwnerType(value)
    except ValueError:
        raise ParameterError(
            f"owner_type must be one of 'user' or 'org', got {value!r}"
        ) from None


def owner_path(owner_type: Union[str, OwnerType], owner: str) -> str:
    """
    Path prefix for an owner: ``orgs/{owner}`` or ``users/{owner}``.
    The owner is escaped as a single path segment.
    """
    prefix = _PREFIXES[parse_owner_type(owner_type)]
    return f"{prefix}/{quote(owner, safe='')}"


def projects_path(owner_type: Union[str, OwnerType], owner: str) -> str:
    return f"{owner_path(owner_type, owner)}/projectsV2"


def project_path(
    owner_type: Union[str, OwnerType], owner: str, project_number: int
) -> str:
    return f"{projects_path(owner_type, owner)}/{project_number}"


def fields_path(
    owner_type: Union[str, OwnerType],
    owner: str,
    project_number: int,
    field_id: int | None = None,
) -> str:
    path = f"{project_path(owner_type, owner, project_number)}/fields"
    return path if field_id is None else f"{path}/{field_id}"


def items_path(
    owner_type: Union[str, OwnerType],
    owner: str,
    project_number: int,
    item_id: int | None = None,
) -> str:
    path = f"{project_path(owner_type, owner, project_number)}/items"
    return path if item_id is None else f"{path}/{item_id}"


__all__ = [
    "OwnerType",
    "parse_owner_type",
    "owner_path",
    "projects_path",
    "project_path",
    "fields_path",
    "items_path",
]
