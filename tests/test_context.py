import uuid

import pytest
from github_projects_mcp.core.context import (
    MissingBaseUrlError,
    MissingTokenError,
    RequestContext,
    apply_request_context,
    client_from_context,
    get_context,
    request_context,
    reset_context,
    seed_from_env,
)


def test_seed_from_env_missing_token(monkeypatch):
    monkeypatch.delenv("GITHUB_PERSONAL_ACCESS_TOKEN", raising=False)
    with pytest.raises(MissingTokenError):
        seed_from_env()


def test_seed_from_env_defaults_base_url(monkeypatch):
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "env-token")
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    ctx = seed_from_env()
    assert ctx.token == "env-token"
    assert ctx.base_url == "https://api.github.com"
    assert "env-token" not in repr(ctx)


def test_seed_from_env_enterprise_url(monkeypatch):
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "t")
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example/api/v3")
    assert seed_from_env().base_url == "https://ghe.example/api/v3"


def test_apply_and_get_context_isolated():
    token = apply_request_context(token="k1", base_url="b1", request_id="r1")
    ctx = get_context()
    assert (ctx.token, ctx.base_url, ctx.request_id) == ("k1", "b1", "r1")
    reset_context(token)
    with pytest.raises(MissingTokenError):
        get_context()


def test_missing_base_url():
    token = apply_request_context(token="k", base_url="")
    try:
        with pytest.raises(MissingBaseUrlError):
            get_context()
        assert get_context(require_base_url=False).token == "k"
    finally:
        reset_context(token)


def test_request_id_generated():
    token = apply_request_context(token="k", base_url="b")
    ctx = get_context()
    uuid.UUID(hex=ctx.request_id)  # should parse
    reset_context(token)


def test_request_context_manager_restores_previous():
    outer = RequestContext(token="o", base_url="https://a", request_id="r-out")
    inner = RequestContext(token="i", base_url="https://b", request_id="r-in")

    with request_context(outer):
        with request_context(inner) as ctx:
            assert ctx.token == "i"
        assert get_context().request_id == "r-out"

    with pytest.raises(MissingTokenError):
        get_context()


@pytest.mark.asyncio
async def test_client_from_context():
    ctx = RequestContext(token="k", base_url="https://api.github.com", request_id="rid")
    with request_context(ctx):
        client = client_from_context()
    assert client.base_url == "https://api.github.com"
    assert client.request_id == "rid"
    await client.aclose()
