from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from github_projects_mcp.core.client import GitHubClient
from github_projects_mcp.core.models import Project
from github_projects_mcp.core.options import (
    MAX_PROJECTS_PER_PAGE,
    FilterQueryOptions,
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
from github_projects_mcp.core.scope import parse_owner_type, project_path, projects_path
from github_projects_mcp.core.tools._requests import (
    call_api,
    elements,
    parse_model,
    parse_models,
)

LIST_PROJECTS_FAILED = "failed to list projects"
GET_PROJECT_FAILED = "failed to get project"


async def list_projects(
    client: GitHubClient,
    owner_type: Literal["user", "org"],
    owner: str,
    *,
    query: Optional[str] = None,
    per_page: Optional[int] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
) -> Dict[str, Any]:
    """
    List Projects (v2) for a user or organization.

    owner is the user handle when owner_type == "user", or the organization
    name when owner_type == "org". query filters by title text and open/closed
    state (e.g. "roadmap is:open"). per_page is capped at 50; keep it, and
    query, identical across pages. When pageInfo.hasNextPage is true, pass
    pageInfo.nextCursor as after to fetch the next page; before with
    pageInfo.prevCursor goes back one page.

    Returns:
        {"projects": [...], "pageInfo": {"hasNextPage": bool, ...}}
    """
    owner_type = parse_owner_type(owner_type)
    owner = require_str("owner", owner)
    pagination = PaginationOptions(
        per_page=optional_page_size("per_page", per_page, MAX_PROJECTS_PER_PAGE),
        after=optional_str("after", after),
        before=optional_str("before", before),
    )
    filter_query = FilterQueryOptions(query=optional_str("query", query))

    url = add_options(projects_path(owner_type, owner), pagination, filter_query)
    resp = await call_api(
        client, "GET", url, failure=LIST_PROJECTS_FAILED, tool="list_projects"
    )

    projects = parse_models(
        Project,
        elements(resp, failure=LIST_PROJECTS_FAILED),
        failure=LIST_PROJECTS_FAILED,
    )
    return {
        "projects": [p.to_summary().to_dict() for p in projects],
        "pageInfo": build_page_info(resp.after, resp.before).to_dict(),
    }


async def get_project(
    client: GitHubClient,
    owner_type: Literal["user", "org"],
    owner: str,
    project_number: int,
) -> Dict[str, Any]:
    """Get a single Project (v2) of a user or organization by its number."""
    owner_type = parse_owner_type(owner_type)
    owner = require_str("owner", owner)
    project_number = require_positive_int("project_number", project_number)

    resp = await call_api(
        client,
        "GET",
        project_path(owner_type, owner, project_number),
        failure=GET_PROJECT_FAILED,
        tool="get_project",
        expected_status=200,
    )
    project = parse_model(Project, resp.data, failure=GET_PROJECT_FAILED)
    return project.to_summary().to_dict()
