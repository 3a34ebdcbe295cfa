"""
Drop field records whose data type already lives on the item's content.

Labels, assignees, milestone and friends are part of the issue/PR object an
item wraps, so repeating them as field data only duplicates information.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol, TypeVar

SPECIAL_FIELD_DATA_TYPES = frozenset(
    {
        "assignees",
        "labels",
        "linked_pull_requests",
        "milestone",
        "parent_issue",
        "repository",
        "reviewers",
        "sub_issues_progress",
        "title",
    }
)


class DataTyped(Protocol):
    @property
    def data_type_key(self) -> str:
        """Lower-cased data type, "" when unknown."""
        ...


T = TypeVar("T", bound=DataTyped)


def is_special_type(record: DataTyped) -> bool:
    return record.data_type_key in SPECIAL_FIELD_DATA_TYPES


def filter_special_types(records: Iterable[T]) -> List[T]:
    """
    Return a new list with the special-typed records removed, order preserved.

    Works for field definitions and item field values alike.
    """
    return [r for r in records if not is_special_type(r)]


__all__ = [
    "SPECIAL_FIELD_DATA_TYPES",
    "DataTyped",
    "is_special_type",
    "filter_special_types",
]
