"""
Shared request plumbing for the project tools.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from github_projects_mcp.core.client import GitHubClient, GitHubResponse
from github_projects_mcp.core.errors import (
    GitHubClientError,
    GitHubHTTPError,
    GitHubModelValidationError,
    GitHubParseError,
    body_text,
)

M = TypeVar("M", bound=BaseModel)


async def call_api(
    client: GitHubClient,
    method: str,
    path: str,
    *,
    failure: str,
    tool: str,
    expected_status: Optional[int] = None,
    json: Optional[Dict[str, Any]] = None,
) -> GitHubResponse:
    """
    Issue a request; every unsuccessful outcome is re-raised with a message
    starting with ``failure``. API errors stay GitHubHTTPError and carry the
    response body.
    """
    try:
        resp = await client.request(method, path, json=json, tool=tool)
    except GitHubHTTPError as exc:
        raise GitHubHTTPError(
            status_code=exc.status_code,
            method=exc.method,
            url=exc.url,
            message=f"{failure}: {body_text(exc.response_json, exc.response_text)}",
            response_json=exc.response_json,
            response_text=exc.response_text,
        ) from exc
    except GitHubClientError as exc:
        # network, timeout and undecodable bodies
        raise type(exc)(f"{failure}: {exc}") from exc

    if expected_status is not None and resp.status_code != expected_status:
        raise GitHubHTTPError(
            status_code=resp.status_code,
            method=method.upper(),
            url=resp.url,
            message=f"{failure}: {resp.text}",
            response_json=resp.data,
            response_text=resp.text,
        )
    return resp


def elements(resp: GitHubResponse, *, failure: str) -> List[Dict[str, Any]]:
    """Extract the JSON array of a list response."""
    if resp.data is None:
        return []
    if not isinstance(resp.data, list):
        raise GitHubParseError(
            f"{failure}: expected a JSON array, got {type(resp.data).__name__}"
        )
    return [e for e in resp.data if isinstance(e, dict)]


def parse_model(model: Type[M], payload: Any, *, failure: str) -> M:
    try:
        return model.model_validate(payload if payload is not None else {})
    except ValidationError as exc:
        raise GitHubModelValidationError(
            f"{failure}: response did not match model {model.__name__}: {exc}"
        ) from exc


def parse_models(
    model: Type[M], payloads: List[Dict[str, Any]], *, failure: str
) -> List[M]:
    return [parse_model(model, p, failure=failure) for p in payloads]
