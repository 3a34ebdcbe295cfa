"""github_projects_mcp package exports."""

from .core.client import GitHubClient
from .core.errors import (
    GitHubClientError,
    GitHubHTTPError,
    GitHubModelValidationError,
    GitHubParseError,
    ParameterError,
    PayloadValidationError,
)
from .core.registry import discover_tool_modules, register_discovered_tools
from .server import main as run_server

__all__ = [
    # Client
    "GitHubClient",
    # Exceptions
    "GitHubClientError",
    "GitHubHTTPError",
    "GitHubParseError",
    "GitHubModelValidationError",
    "ParameterError",
    "PayloadValidationError",
    # Server utilities
    "run_server",
    "discover_tool_modules",
    "register_discovered_tools",
]
