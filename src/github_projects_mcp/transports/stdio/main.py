from __future__ import annotations

import asyncio
import logging
from typing import List, Tuple

from mcp.server.fastmcp import FastMCP

from github_projects_mcp.core.client import GitHubClient
from github_projects_mcp.core.context import (
    client_from_context,
    request_context,
    seed_from_env,
)
from github_projects_mcp.core.logging import setup_logging
from github_projects_mcp.core.registry import register_discovered_tools

SERVER_NAME = "github-projects-mcp"

log = logging.getLogger("github_projects_mcp.transports.stdio")


def create_app(client: GitHubClient) -> Tuple[FastMCP, List[str]]:
    """Build the FastMCP app with every project tool bound to ``client``."""
    app = FastMCP(SERVER_NAME)
    names = register_discovered_tools(app, client)
    return app, names


async def main() -> None:
    setup_logging()
    # one context for the whole stdio session, seeded from env / .env
    with request_context(seed_from_env(use_dotenv=True)) as ctx:
        client = client_from_context()
        app, names = create_app(client)
        log.info(
            "Serving %d tools over stdio against %s (request_id=%s)",
            len(names),
            ctx.base_url,
            ctx.request_id,
        )
        try:
            await app.run_stdio_async()
        finally:
            await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
