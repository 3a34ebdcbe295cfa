"""
Session-scoped request context.

The token, API root and request id travel together in one ContextVar, so a
transport sets them once and every client built afterwards in the same
context picks them up.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .client import GitHubClient
from .config import API_URL_ENV, TOKEN_ENV, load_env_config


class MissingTokenError(ValueError):
    """Raised when a GitHub token is required but missing."""


class MissingBaseUrlError(ValueError):
    """Raised when the API root is required but missing."""


def ensure_request_id(candidate: Optional[str] = None) -> str:
    return candidate or uuid.uuid4().hex


@dataclass(frozen=True)
class RequestContext:
    token: str = field(repr=False)
    base_url: str
    request_id: str


_current: ContextVar[Optional[RequestContext]] = ContextVar(
    "github_projects_mcp_request_context", default=None
)


def seed_from_env(*, use_dotenv: bool = False) -> RequestContext:
    base_url, token = load_env_config(use_dotenv=use_dotenv)
    if not token:
        raise MissingTokenError(f"{TOKEN_ENV} not set")
    if not base_url:
        raise MissingBaseUrlError(f"{API_URL_ENV} not set")
    return RequestContext(
        token=token, base_url=base_url, request_id=ensure_request_id()
    )


def apply_request_context(
    token: str,
    base_url: str,
    request_id: Optional[str] = None,
) -> Token:
    """Make a context current; pass the returned token to reset_context()."""
    return _current.set(
        RequestContext(
            token=token,
            base_url=base_url,
            request_id=ensure_request_id(request_id),
        )
    )


def reset_context(token: Token) -> None:
    _current.reset(token)


@contextmanager
def request_context(ctx: RequestContext) -> Iterator[RequestContext]:
    token = apply_request_context(ctx.token, ctx.base_url, ctx.request_id)
    try:
        yield get_context()
    finally:
        reset_context(token)


def get_context(
    *, require_token: bool = True, require_base_url: bool = True
) -> RequestContext:
    ctx = _current.get() or RequestContext(token="", base_url="", request_id="")

    if require_token and not ctx.token:
        raise MissingTokenError("GitHub token is required and missing.")
    if require_base_url and not ctx.base_url:
        raise MissingBaseUrlError("Base URL is required and missing.")

    if not ctx.request_id:
        ctx = RequestContext(
            token=ctx.token, base_url=ctx.base_url, request_id=ensure_request_id()
        )
    return ctx


def client_from_context() -> GitHubClient:
    ctx = get_context()
    return GitHubClient(
        token=ctx.token, base_url=ctx.base_url, request_id=ctx.request_id
    )


__all__ = [
    "RequestContext",
    "MissingTokenError",
    "MissingBaseUrlError",
    "seed_from_env",
    "get_context",
    "apply_request_context",
    "reset_context",
    "request_context",
    "ensure_request_id",
    "client_from_context",
]
