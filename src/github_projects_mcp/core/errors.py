from __future__ import annotations

from typing import Any, Optional


class GitHubClientError(Exception):
    """Base error for client failures."""


class GitHubHTTPError(GitHubClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        message: str,
        response_json: Optional[Any] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} {method} {url}: {message}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.message = message
        self.response_json = response_json
        self.response_text = response_text


class GitHubParseError(GitHubClientError):
    pass


class GitHubModelValidationError(GitHubClientError):
    pass


class EncodingError(GitHubClientError):
    """Raised when request options cannot be composed onto a path."""


class ParameterError(GitHubClientError, ValueError):
    """Missing or mistyped tool argument, detected before any request."""


class PayloadValidationError(GitHubClientError, ValueError):
    """Structurally invalid update payload."""


def body_text(response_json: Optional[Any], response_text: Optional[str]) -> str:
    """Best-effort verbatim body for failure messages."""
    if response_text:
        return response_text
    if response_json is not None:
        return str(response_json)
    return ""


__all__ = [
    "GitHubClientError",
    "GitHubHTTPError",
    "GitHubParseError",
    "GitHubModelValidationError",
    "EncodingError",
    "ParameterError",
    "PayloadValidationError",
    "body_text",
]
