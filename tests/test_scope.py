import pytest
from github_projects_mcp.core.errors import ParameterError
from github_projects_mcp.core.scope import (
    OwnerType,
    fields_path,
    items_path,
    parse_owner_type,
    project_path,
    projects_path,
)


def test_owner_prefixes():
    assert projects_path("org", "acme") == "orgs/acme/projectsV2"
    assert projects_path(OwnerType.USER, "octocat") == "users/octocat/projectsV2"


def test_nested_paths():
    assert project_path("org", "acme", 3) == "orgs/acme/projectsV2/3"
    assert fields_path("org", "acme", 3) == "orgs/acme/projectsV2/3/fields"
    assert fields_path("org", "acme", 3, 42) == "orgs/acme/projectsV2/3/fields/42"
    assert items_path("user", "u", 1) == "users/u/projectsV2/1/items"
    assert items_path("user", "u", 1, 9) == "users/u/projectsV2/1/items/9"


def test_owner_is_escaped_as_one_segment():
    assert projects_path("org", "a/b c") == "orgs/a%2Fb%20c/projectsV2"


@pytest.mark.parametrize("value", ["organization", "", None, "ORG"])
def test_invalid_owner_type(value):
    with pytest.raises(ParameterError) as exc:
        parse_owner_type(value)
    assert "owner_type must be one of 'user' or 'org'" in str(exc.value)
