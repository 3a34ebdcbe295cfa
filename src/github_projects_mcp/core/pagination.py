"""
Cursor pagination helpers.

GitHub's Projects endpoints paginate with opaque cursors advertised in the
``Link`` response header::

    <https://api.github.com/orgs/o/projectsV2/1/items?after=Y3Vy>; rel="next",
    <https://api.github.com/orgs/o/projectsV2/1/items?before=Y3Vx>; rel="prev"

The cursors are copied through untouched; callers pass them back as
``after``/``before`` on the next call.
"""

from __future__ import annotations

from typing import Optional, Tuple

import httpx
from pydantic import BaseModel, ConfigDict, Field


class PageInfo(BaseModel):
    has_next_page: bool = Field(alias="hasNextPage")
    has_previous_page: bool = Field(alias="hasPreviousPage")
    next_cursor: Optional[str] = Field(default=None, alias="nextCursor")
    prev_cursor: Optional[str] = Field(default=None, alias="prevCursor")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_dict(self) -> dict:
        # cursors are omitted, not null, when there is no such page
        return self.model_dump(by_alias=True, exclude_none=True)


def _link_param(response: httpx.Response, rel: str, param: str) -> str:
    link = response.links.get(rel)
    if not link or not link.get("url"):
        return ""
    try:
        return httpx.URL(link["url"]).params.get(param) or ""
    except httpx.InvalidURL:
        return ""


def cursors_from_links(response: httpx.Response) -> Tuple[str, str]:
    """Return the (after, before) cursors advertised by a response, "" if absent."""
    return (
        _link_param(response, "next", "after"),
        _link_param(response, "prev", "before"),
    )


def build_page_info(after: Optional[str], before: Optional[str]) -> PageInfo:
    after = after or ""
    before = before or ""
    return PageInfo(
        has_next_page=after != "",
        has_previous_page=before != "",
        next_cursor=after or None,
        prev_cursor=before or None,
    )


__all__ = ["PageInfo", "build_page_info", "cursors_from_links"]
