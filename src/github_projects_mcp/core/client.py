import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .errors import (
    GitHubClientError,
    GitHubHTTPError,
    GitHubModelValidationError,
    GitHubParseError,
)
from .observability import log_event
from .pagination import cursors_from_links

DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
USER_AGENT = "github-projects-mcp"


@dataclass(frozen=True)
class GitHubResponse:
    """Decoded response plus the status and cursor metadata tools need."""

    status_code: int
    data: Any
    text: str
    url: str
    after: str = ""
    before: str = ""


class GitHubClient:
    """
    Shared HTTP client for the GitHub REST API.
    - Handles auth, base URL and timeouts
    - Returns decoded JSON together with status and pagination cursors
    - No retries and no business logic; tools own domain decisions
    """

    def __init__(
        self,
        *,
        token: str,
        base_url: str = DEFAULT_API_URL,
        timeout_seconds: float = 10.0,
        request_id: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        token = token or ""

        if not base_url:
            raise ValueError("base_url must be provided.")
        if not token:
            raise ValueError("token must be provided.")

        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.request_id = request_id
        self.log = logger or logging.getLogger("github_projects_mcp.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "User-Agent": USER_AGENT,
                "X-GitHub-Api-Version": API_VERSION,
            },
            timeout=timeout_seconds,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        tool: Optional[str] = None,
    ) -> GitHubResponse:
        """
        Issue one request.
        - Raises GitHubHTTPError on non-2xx HTTP responses
        - Raises GitHubClientError on network/timeout errors
        - Raises GitHubParseError if a non-empty body isn't valid JSON
        - Lets asyncio.CancelledError propagate untouched
        """
        method = method.upper()
        start = time.perf_counter()

        def _log(status: Any, **fields: Any) -> None:
            failed = not isinstance(status, int) or status >= 400
            log_event(
                "op_call",
                level=logging.WARNING if failed else logging.INFO,
                request_id=self.request_id,
                tool=tool,
                method=method,
                endpoint=url.split("?", 1)[0],
                status=status,
                duration_ms=int((time.perf_counter() - start) * 1000),
                **fields,
            )

        try:
            resp = await self.http.request(method, url, json=json)
        except asyncio.CancelledError:
            _log("cancelled")
            raise
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            _log("exception", error_type=type(exc).__name__)
            raise GitHubClientError(
                f"Network/timeout error calling {method} {url}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            _log("exception", error_type=type(exc).__name__)
            raise GitHubClientError(
                f"HTTPX error calling {method} {url}: {exc}"
            ) from exc

        _log(resp.status_code)

        if resp.status_code < 200 or resp.status_code >= 300:
            raise self._to_http_error(resp, method=method)

        after, before = cursors_from_links(resp)
        return GitHubResponse(
            status_code=resp.status_code,
            data=self._safe_json(resp),
            text=resp.text or "",
            url=str(resp.request.url),
            after=after,
            before=before,
        )

    def _safe_json(self, resp: httpx.Response) -> Any:
        # 204 No Content and friends
        if not resp.content:
            return None

        try:
            return resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise GitHubParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

    def _to_http_error(self, resp: httpx.Response, *, method: str) -> GitHubHTTPError:
        url = str(resp.request.url)
        response_json: Optional[Any] = None
        response_text = resp.text or ""
        message = response_text or "request failed"

        try:
            parsed = resp.json()
        except ValueError:
            parsed = None
        if isinstance(parsed, dict):
            response_json = parsed
            # GitHub errors carry "message" and usually "documentation_url"
            message = parsed.get("message") or message

        return GitHubHTTPError(
            status_code=resp.status_code,
            method=method,
            url=url,
            message=message,
            response_json=response_json,
            response_text=response_text,
        )

    async def get(self, url: str, *, tool: Optional[str] = None) -> GitHubResponse:
        return await self.request("GET", url, tool=tool)

    async def post(
        self, url: str, *, json: Dict[str, Any], tool: Optional[str] = None
    ) -> GitHubResponse:
        return await self.request("POST", url, json=json, tool=tool)


__all__ = [
    "GitHubClient",
    "GitHubResponse",
    "GitHubClientError",
    "GitHubHTTPError",
    "GitHubParseError",
    "GitHubModelValidationError",
    "DEFAULT_API_URL",
]
