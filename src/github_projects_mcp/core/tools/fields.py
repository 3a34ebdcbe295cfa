from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from github_projects_mcp.core.client import GitHubClient
from github_projects_mcp.core.filtering import filter_special_types
from github_projects_mcp.core.models import ProjectField
from github_projects_mcp.core.options import (
    MAX_PROJECTS_PER_PAGE,
    PaginationOptions,
    add_options,
)
from github_projects_mcp.core.pagination import build_page_info
from github_projects_mcp.core.params import (
    optional_page_size,
    optional_str,
    require_positive_int,
    require_str,
)
from github_projects_mcp.core.scope import fields_path, parse_owner_type
from github_projects_mcp.core.tools._requests import (
    call_api,
    elements,
    parse_model,
    parse_models,
)

LIST_FIELDS_FAILED = "failed to list project fields"
GET_FIELD_FAILED = "failed to get project field"


async def list_project_fields(
    client: GitHubClient,
    owner_type: Literal["user", "org"],
    owner: str,
    project_number: int,
    *,
    per_page: Optional[int] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
) -> Dict[str, Any]:
    """
    List the field definitions of a project. Call this before filtering or
    updating items to learn field ids and data types.

    Fields whose values already live on the item's content (assignees,
    labels, milestone, repository, title, ...) are left out.
    """
    owner_type = parse_owner_type(owner_type)
    owner = require_str("owner", owner)
    project_number = require_positive_int("project_number", project_number)
    pagination = PaginationOptions(
        per_page=optional_page_size("per_page", per_page, MAX_PROJECTS_PER_PAGE),
        after=optional_str("after", after),
        before=optional_str("before", before),
    )

    url = add_options(fields_path(owner_type, owner, project_number), pagination)
    resp = await call_api(
        client, "GET", url, failure=LIST_FIELDS_FAILED, tool="list_project_fields"
    )

    fields = parse_models(
        ProjectField,
        elements(resp, failure=LIST_FIELDS_FAILED),
        failure=LIST_FIELDS_FAILED,
    )
    return {
        "fields": [f.to_dict() for f in filter_special_types(fields)],
        "pageInfo": build_page_info(resp.after, resp.before).to_dict(),
    }


async def get_project_field(
    client: GitHubClient,
    owner_type: Literal["user", "org"],
    owner: str,
    project_number: int,
    field_id: int,
) -> Dict[str, Any]:
    """Get one field definition of a project by field id."""
    owner_type = parse_owner_type(owner_type)
    owner = require_str("owner", owner)
    project_number = require_positive_int("project_number", project_number)
    field_id = require_positive_int("field_id", field_id)

    resp = await call_api(
        client,
        "GET",
        fields_path(owner_type, owner, project_number, field_id),
        failure=GET_FIELD_FAILED,
        tool="get_project_field",
        expected_status=200,
    )
    return parse_model(ProjectField, resp.data, failure=GET_FIELD_FAILED).to_dict()
