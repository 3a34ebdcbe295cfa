"""Core domain surface for github-projects-mcp (transport-agnostic)."""

from .client import DEFAULT_API_URL, GitHubClient, GitHubResponse
from .config import create_client_from_env, load_env_config
from .context import (
    MissingBaseUrlError,
    MissingTokenError,
    RequestContext,
    apply_request_context,
    client_from_context,
    ensure_request_id,
    get_context,
    request_context,
    reset_context,
    seed_from_env,
)
from .errors import (
    EncodingError,
    GitHubClientError,
    GitHubHTTPError,
    GitHubModelValidationError,
    GitHubParseError,
    ParameterError,
    PayloadValidationError,
)
from .filtering import SPECIAL_FIELD_DATA_TYPES, filter_special_types
from .options import (
    MAX_PROJECTS_PER_PAGE,
    FieldSelectionOptions,
    FilterQueryOptions,
    PaginationOptions,
    add_options,
)
from .pagination import PageInfo, build_page_info
from .registry import (
    discover_tool_modules,
    iter_tool_functions,
    register_discovered_tools,
)

__all__ = [
    # Client
    "GitHubClient",
    "GitHubResponse",
    "DEFAULT_API_URL",
    # Exceptions
    "GitHubClientError",
    "GitHubHTTPError",
    "GitHubParseError",
    "GitHubModelValidationError",
    "EncodingError",
    "ParameterError",
    "PayloadValidationError",
    # Request composition
    "MAX_PROJECTS_PER_PAGE",
    "PaginationOptions",
    "FilterQueryOptions",
    "FieldSelectionOptions",
    "add_options",
    "PageInfo",
    "build_page_info",
    "SPECIAL_FIELD_DATA_TYPES",
    "filter_special_types",
    # Config helpers
    "create_client_from_env",
    "load_env_config",
    # Registry helpers
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
    # Context
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
