import pytest
import respx
from github_projects_mcp.core.client import GitHubClient
from github_projects_mcp.core.errors import GitHubHTTPError, ParameterError
from github_projects_mcp.core.tools.projects import get_project, list_projects
from httpx import Response

API = "https://api.github.com"

PROJECT = {
    "id": 2,
    "node_id": "PVT_kwDOAA",
    "number": 3,
    "title": "Roadmap",
    "short_description": "Q3 plan",
    "public": False,
    "closed_at": None,
    "owner": {
        "login": "acme",
        "id": 10,
        "html_url": "https://github.com/acme",
        "avatar_url": "https://avatars.example/10",
        "type": "Organization",
    },
    "creator": {"login": "octocat", "id": 1, "html_url": "https://github.com/octocat"},
    "state": "open",
}


@pytest.fixture
def client():
    return GitHubClient(token="test-token", base_url=API)


@pytest.mark.asyncio
@respx.mock
async def test_list_projects_returns_summaries_and_page_info(client):
    link = f'<{API}/orgs/acme/projectsV2?after=CUR&per_page=50>; rel="next"'
    route = respx.get(f"{API}/orgs/acme/projectsV2").mock(
        return_value=Response(200, json=[PROJECT], headers={"Link": link})
    )

    async with client:
        result = await list_projects(client, "org", "acme")

    assert route.calls[0].request.url.params["per_page"] == "50"
    assert result["pageInfo"] == {
        "hasNextPage": True,
        "hasPreviousPage": False,
        "nextCursor": "CUR",
    }
    [project] = result["projects"]
    assert project["title"] == "Roadmap"
    assert project["number"] == 3
    assert project["owner"] == {
        "login": "acme",
        "id": 10,
        "profile_url": "https://github.com/acme",
        "avatar_url": "https://avatars.example/10",
    }
    assert project["creator"] == {
        "login": "octocat",
        "id": 1,
        "profile_url": "https://github.com/octocat",
    }
    assert "closed_at" not in project
    assert "state" not in project


@pytest.mark.asyncio
@respx.mock
async def test_list_projects_query_and_cursor_params(client):
    route = respx.get(f"{API}/users/octocat/projectsV2").mock(
        return_value=Response(200, json=[])
    )

    async with client:
        result = await list_projects(
            client, "user", "octocat", query="is:open", per_page=200, after="abc"
        )

    params = route.calls[0].request.url.params
    assert params["q"] == "is:open"
    assert params["per_page"] == "50"
    assert params["after"] == "abc"
    assert "before" not in params
    assert result == {
        "projects": [],
        "pageInfo": {"hasNextPage": False, "hasPreviousPage": False},
    }


@pytest.mark.asyncio
@respx.mock
async def test_list_projects_non_positive_page_size_omitted(client):
    route = respx.get(f"{API}/orgs/acme/projectsV2").mock(
        return_value=Response(200, json=[])
    )

    async with client:
        await list_projects(client, "org", "acme", per_page=0)

    assert "per_page" not in route.calls[0].request.url.params


@pytest.mark.asyncio
@respx.mock
async def test_list_projects_failure_message(client):
    respx.get(f"{API}/orgs/ghost/projectsV2").mock(
        return_value=Response(404, json={"message": "Not Found"})
    )

    async with client:
        with pytest.raises(GitHubHTTPError) as exc:
            await list_projects(client, "org", "ghost")

    assert exc.value.status_code == 404
    assert exc.value.message.startswith("failed to list projects: ")
    assert "Not Found" in exc.value.message


@pytest.mark.asyncio
async def test_list_projects_rejects_bad_owner_type(client):
    with pytest.raises(ParameterError):
        await list_projects(client, "team", "acme")
    await client.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_get_project(client):
    respx.get(f"{API}/orgs/acme/projectsV2/3").mock(
        return_value=Response(200, json=PROJECT)
    )

    async with client:
        project = await get_project(client, "org", "acme", 3)

    assert project["id"] == 2
    assert project["short_description"] == "Q3 plan"


@pytest.mark.asyncio
@respx.mock
async def test_get_project_unexpected_status(client):
    respx.get(f"{API}/orgs/acme/projectsV2/3").mock(
        return_value=Response(202, json={"queued": True})
    )

    async with client:
        with pytest.raises(GitHubHTTPError) as exc:
            await get_project(client, "org", "acme", 3)

    assert exc.value.status_code == 202
    assert exc.value.message.startswith("failed to get project: ")
