"""
Compose independent option groups into one request target.

Every group knows its own query keys and contributes only the values that
differ from the server default, so an all-default group leaves no trace in
the URL. Keys are sorted on output, which keeps the target stable for a given
input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Protocol

import httpx

from .errors import EncodingError

MAX_PROJECTS_PER_PAGE = 50

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_FORBIDDEN_CHARS_RE = re.compile(r"[\x00-\x20\x7f]")


class QueryOption(Protocol):
    def contribute(self, query: Dict[str, str]) -> None: ...


def _put(query: Dict[str, str], key: str, value: str) -> None:
    if key in query:
        raise EncodingError(f"query key '{key}' contributed by more than one option")
    query[key] = value


def clamp_page_size(per_page: Optional[int]) -> Optional[int]:
    """Clamp per_page down to the maximum; non-positive means server default."""
    if per_page is None or per_page <= 0:
        return None
    return min(per_page, MAX_PROJECTS_PER_PAGE)


@dataclass(frozen=True)
class PaginationOptions:
    per_page: Optional[int] = None
    after: Optional[str] = None
    before: Optional[str] = None

    def contribute(self, query: Dict[str, str]) -> None:
        per_page = clamp_page_size(self.per_page)
        if per_page is not None:
            _put(query, "per_page", str(per_page))
        if self.after:
            _put(query, "after", self.after)
        if self.before:
            _put(query, "before", self.before)


@dataclass(frozen=True)
class FilterQueryOptions:
    query: Optional[str] = None

    def contribute(self, query: Dict[str, str]) -> None:
        if self.query:
            _put(query, "q", self.query)


@dataclass(frozen=True)
class FieldSelectionOptions:
    fields: str = ""

    @classmethod
    def from_ids(cls, ids: Optional[Iterable[str]]) -> "FieldSelectionOptions":
        return cls(fields=",".join(ids or ()))

    def contribute(self, query: Dict[str, str]) -> None:
        if self.fields:
            _put(query, "fields", self.fields)


def _validate_path(path: str) -> None:
    if not isinstance(path, str) or not path:
        raise EncodingError("request path must be a non-empty string")
    if _FORBIDDEN_CHARS_RE.search(path):
        raise EncodingError(
            f"invalid request path {path!r}: whitespace or control character"
        )
    if _BAD_ESCAPE_RE.search(path):
        raise EncodingError(
            f"invalid request path {path!r}: malformed percent escape"
        )


def add_options(path: str, *options: QueryOption) -> str:
    """
    Return ``path`` with the query string built from ``options``.

    The encoded query replaces any query already present on ``path``.
    Raises EncodingError when ``path`` is not a valid relative path or two
    options claim the same key.
    """
    _validate_path(path)
    try:
        target = httpx.URL(path)
    except httpx.InvalidURL as exc:
        raise EncodingError(f"invalid request path {path!r}: {exc}") from exc
    if target.scheme or target.host:
        raise EncodingError(
            f"invalid request path {path!r}: expected a relative path"
        )

    query: Dict[str, str] = {}
    for option in options:
        if option is not None:
            option.contribute(query)

    # empty params drop the query entirely, no trailing "?"
    return str(target.copy_with(params=httpx.QueryParams(sorted(query.items()))))


__all__ = [
    "MAX_PROJECTS_PER_PAGE",
    "QueryOption",
    "PaginationOptions",
    "FilterQueryOptions",
    "FieldSelectionOptions",
    "clamp_page_size",
    "add_options",
]
