from __future__ import annotations

import asyncio

from github_projects_mcp.transports.stdio.main import main


def run() -> None:
    """Console entry point: serve the project tools over stdio."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
