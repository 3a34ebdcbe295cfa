import pytest
import respx
from github_projects_mcp.core.client import GitHubClient
from github_projects_mcp.core.errors import GitHubHTTPError
from github_projects_mcp.core.tools.fields import (
    get_project_field,
    list_project_fields,
)
from httpx import Response

API = "https://api.github.com"

FIELDS = [
    {"id": 100, "name": "Title", "data_type": "title"},
    {
        "id": 101,
        "name": "Status",
        "data_type": "single_select",
        "options": [{"id": "opt1", "name": {"raw": "Todo"}}],
    },
    {"id": 102, "name": "Labels", "data_type": "labels"},
    {"id": 103, "name": "Estimate", "data_type": "number"},
]


@pytest.fixture
def client():
    return GitHubClient(token="test-token", base_url=API)


@pytest.mark.asyncio
@respx.mock
async def test_list_project_fields_filters_special_types(client):
    route = respx.get(f"{API}/orgs/acme/projectsV2/1/fields").mock(
        return_value=Response(200, json=FIELDS)
    )

    async with client:
        result = await list_project_fields(client, "org", "acme", 1, per_page=10)

    assert route.calls[0].request.url.params["per_page"] == "10"
    assert [f["id"] for f in result["fields"]] == [101, 103]
    assert result["fields"][0]["options"] == [{"id": "opt1", "name": {"raw": "Todo"}}]
    assert result["pageInfo"] == {"hasNextPage": False, "hasPreviousPage": False}


@pytest.mark.asyncio
@respx.mock
async def test_list_project_fields_before_cursor(client):
    link = f'<{API}/orgs/acme/projectsV2/1/fields?before=B1>; rel="prev"'
    route = respx.get(f"{API}/orgs/acme/projectsV2/1/fields").mock(
        return_value=Response(200, json=[], headers={"Link": link})
    )

    async with client:
        result = await list_project_fields(client, "org", "acme", 1, before="B2")

    assert route.calls[0].request.url.params["before"] == "B2"
    assert result["pageInfo"] == {
        "hasNextPage": False,
        "hasPreviousPage": True,
        "prevCursor": "B1",
    }


@pytest.mark.asyncio
@respx.mock
async def test_get_project_field(client):
    respx.get(f"{API}/users/octocat/projectsV2/1/fields/103").mock(
        return_value=Response(200, json=FIELDS[3])
    )

    async with client:
        field = await get_project_field(client, "user", "octocat", 1, 103)

    assert field == {"id": 103, "name": "Estimate", "data_type": "number"}


@pytest.mark.asyncio
@respx.mock
async def test_get_project_field_not_found(client):
    respx.get(f"{API}/orgs/acme/projectsV2/1/fields/9").mock(
        return_value=Response(404, json={"message": "Not Found"})
    )

    async with client:
        with pytest.raises(GitHubHTTPError) as exc:
            await get_project_field(client, "org", "acme", 1, 9)

    assert exc.value.message.startswith("failed to get project field: ")
