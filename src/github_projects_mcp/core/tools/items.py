from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from github_projects_mcp.core.client import GitHubClient
from github_projects_mcp.core.filtering import filter_special_types
from github_projects_mcp.core.models import ProjectItem
from github_projects_mcp.core.options import (
    MAX_PROJECTS_PER_PAGE,
    FieldSelectionOptions,
    FilterQueryOptions,
    PaginationOptions,
    add_options,
)
from github_projects_mcp.core.pagination import build_page_info
from github_projects_mcp.core.params import (
    optional_page_size,
    optional_str,
    optional_str_list,
    require_positive_int,
    require_str,
)
from github_projects_mcp.core.payloads import (
    build_update_field,
    new_item_body,
    update_body,
)
from github_projects_mcp.core.scope import items_path, parse_owner_type
from github_projects_mcp.core.tools._requests import (
    call_api,
    elements,
    parse_model,
    parse_models,
)

LIST_ITEMS_FAILED = "failed to list project items"
GET_ITEM_FAILED = "failed to get project item"
ADD_ITEM_FAILED = "failed to add a project item"
UPDATE_ITEM_FAILED = "failed to update a project item"
DELETE_ITEM_FAILED = "failed to delete a project item"


def _item_to_dict(item: ProjectItem) -> Dict[str, Any]:
    item.fields = filter_special_types(item.fields)
    return item.to_dict()


async def list_project_items(
    client: GitHubClient,
    owner_type: Literal["user", "org"],
    owner: str,
    project_number: int,
    *,
    query: Optional[str] = None,
    fields: Optional[List[str]] = None,
    per_page: Optional[int] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
) -> Dict[str, Any]:
    """
    List the items (issues, pull requests, drafts) of a project.

    query uses the project item filter syntax, for example
    'is:issue state:open sprint:@current updated:>@today-7d'.
    fields is a list of field ids (from list_project_fields) whose values
    should be returned; without it only the title is included. Keep query,
    fields and per_page identical on every page and loop while
    pageInfo.hasNextPage is true, passing pageInfo.nextCursor as after.

    item.id is the project item id used by update/delete; item.content.id is
    the id of the underlying issue or pull request.
    """
    owner_type = parse_owner_type(owner_type)
    owner = require_str("owner", owner)
    project_number = require_positive_int("project_number", project_number)
    pagination = PaginationOptions(
        per_page=optional_page_size("per_page", per_page, MAX_PROJECTS_PER_PAGE),
        after=optional_str("after", after),
        before=optional_str("before", before),
    )
    filter_query = FilterQueryOptions(query=optional_str("query", query))
    selection = FieldSelectionOptions.from_ids(optional_str_list("fields", fields))

    url = add_options(
        items_path(owner_type, owner, project_number),
        pagination,
        filter_query,
        selection,
    )
    resp = await call_api(
        client, "GET", url, failure=LIST_ITEMS_FAILED, tool="list_project_items"
    )

    items = parse_models(
        ProjectItem,
        elements(resp, failure=LIST_ITEMS_FAILED),
        failure=LIST_ITEMS_FAILED,
    )
    return {
        "items": [_item_to_dict(i) for i in items],
        "pageInfo": build_page_info(resp.after, resp.before).to_dict(),
    }


async def get_project_item(
    client: GitHubClient,
    owner_type: Literal["user", "org"],
    owner: str,
    project_number: int,
    item_id: int,
    *,
    fields: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """
    Get one project item by its project item id (not the issue/PR id).
    fields selects which field values to include, as in list_project_items.
    """
    owner_type = parse_owner_type(owner_type)
    owner = require_str("owner", owner)
    project_number = require_positive_int("project_number", project_number)
    item_id = require_positive_int("item_id", item_id)
    selection = FieldSelectionOptions.from_ids(optional_str_list("fields", fields))

    url = add_options(items_path(owner_type, owner, project_number, item_id), selection)
    resp = await call_api(
        client, "GET", url, failure=GET_ITEM_FAILED, tool="get_project_item"
    )
    return _item_to_dict(parse_model(ProjectItem, resp.data, failure=GET_ITEM_FAILED))


async def add_project_item(
    client: GitHubClient,
    owner_type: Literal["user", "org"],
    owner: str,
    project_number: int,
    item_type: Literal["issue", "pull_request"],
    item_id: int,
) -> Dict[str, Any]:
    """
    Add an issue or pull request to a project. item_id is the id of the
    issue or pull request itself; the response carries the new project item id.
    """
    owner_type = parse_owner_type(owner_type)
    owner = require_str("owner", owner)
    project_number = require_positive_int("project_number", project_number)
    item_id = require_positive_int("item_id", item_id)
    body = new_item_body(require_str("item_type", item_type), item_id)

    resp = await call_api(
        client,
        "POST",
        items_path(owner_type, owner, project_number),
        failure=ADD_ITEM_FAILED,
        tool="add_project_item",
        expected_status=201,
        json=body,
    )
    return _item_to_dict(parse_model(ProjectItem, resp.data, failure=ADD_ITEM_FAILED))


async def update_project_item(
    client: GitHubClient,
    owner_type: Literal["user", "org"],
    owner: str,
    project_number: int,
    item_id: int,
    updated_field: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Set one field value on a project item.

    updated_field is {"id": <field id>, "value": <new value>}: text and date
    fields take strings, number fields numbers, single-select and iteration
    fields the option/iteration id. A null value clears the field.
    item_id is the project item id from list_project_items.
    """
    owner_type = parse_owner_type(owner_type)
    owner = require_str("owner", owner)
    project_number = require_positive_int("project_number", project_number)
    item_id = require_positive_int("item_id", item_id)
    payload = build_update_field(updated_field)

    resp = await call_api(
        client,
        "PATCH",
        items_path(owner_type, owner, project_number, item_id),
        failure=UPDATE_ITEM_FAILED,
        tool="update_project_item",
        expected_status=200,
        json=update_body(payload),
    )
    return _item_to_dict(
        parse_model(ProjectItem, resp.data, failure=UPDATE_ITEM_FAILED)
    )


async def delete_project_item(
    client: GitHubClient,
    owner_type: Literal["user", "org"],
    owner: str,
    project_number: int,
    item_id: int,
) -> Dict[str, Any]:
    """Remove an item from a project. The underlying issue/PR is untouched."""
    owner_type = parse_owner_type(owner_type)
    owner = require_str("owner", owner)
    project_number = require_positive_int("project_number", project_number)
    item_id = require_positive_int("item_id", item_id)

    await call_api(
        client,
        "DELETE",
        items_path(owner_type, owner, project_number, item_id),
        failure=DELETE_ITEM_FAILED,
        tool="delete_project_item",
        expected_status=204,
    )
    return {"message": "project item successfully deleted"}
