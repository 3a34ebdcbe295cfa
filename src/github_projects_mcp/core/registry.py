"""
Tool discovery and registration.

A tool is any public coroutine defined in a public module of
``github_projects_mcp.core.tools`` whose first parameter is named ``client``.
The registered wrapper injects the client and publishes the remaining
parameters, so callers never see ``client`` in the tool schema.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import (
    Any,
    Callable,
    Iterator,
    List,
    Optional,
    Sequence,
    Union,
    get_origin,
    get_type_hints,
)

from .client import GitHubClient

log = logging.getLogger("github_projects_mcp.core.registry")

TOOLS_PACKAGE = "github_projects_mcp.core.tools"

ClientProvider = Callable[[], GitHubClient]


def discover_tool_modules(package_name: str = TOOLS_PACKAGE) -> List[ModuleType]:
    """Import every public module of ``package_name``; failures are logged."""
    package = importlib.import_module(package_name)
    found: List[ModuleType] = []

    for info in pkgutil.iter_modules(package.__path__, package.__name__ + "."):
        if info.name.rsplit(".", 1)[-1].startswith("_"):
            continue
        try:
            found.append(importlib.import_module(info.name))
        except Exception as exc:  # pragma: no cover - logged, not fatal
            log.error("Failed importing tool module %s: %s", info.name, exc)

    return found


def _skip_reason(func: Callable, module: ModuleType) -> Optional[str]:
    if func.__name__.startswith("_"):
        return "private"
    if func.__module__ != module.__name__:
        return "imported"
    params = list(inspect.signature(func).parameters.values())
    if not params or params[0].name != "client":
        return "first parameter must be 'client'"
    # pydantic cannot build a schema for Type[...] arguments
    if any(get_origin(p.annotation) is type for p in params[1:]):
        return "unsupported Type[...] annotation"
    return None


def iter_tool_functions(module: ModuleType) -> Iterator[Callable]:
    """Yield the coroutines of ``module`` that follow the tool convention."""
    for name, func in inspect.getmembers(module, inspect.iscoroutinefunction):
        reason = _skip_reason(func, module)
        if reason is None:
            yield func
        elif reason != "private":
            log.debug("Skipping %s.%s: %s", module.__name__, name, reason)


def _public_signature(func: Callable) -> inspect.Signature:
    # resolve string annotations (from __future__) before FastMCP inspects them
    hints = get_type_hints(func)
    sig = inspect.signature(func)
    params = [
        p.replace(annotation=hints.get(p.name, p.annotation))
        for p in list(sig.parameters.values())[1:]
    ]
    return sig.replace(
        parameters=params,
        return_annotation=hints.get("return", sig.return_annotation),
    )


def _bind_client(func: Callable, client_provider: ClientProvider) -> Callable:
    async def tool(*args: Any, **kwargs: Any) -> Any:
        return await func(client_provider(), *args, **kwargs)

    tool.__name__ = func.__name__
    tool.__qualname__ = func.__qualname__
    tool.__doc__ = func.__doc__
    tool.__module__ = func.__module__
    tool.__signature__ = _public_signature(func)  # type: ignore[attr-defined]
    return tool


def register_discovered_tools(
    app: Any,
    client: Union[ClientProvider, GitHubClient],
    modules: Optional[Sequence[ModuleType]] = None,
) -> List[str]:
    """Register every discovered tool on ``app`` (anything with ``.tool``).

    ``client`` is either a GitHubClient shared by all calls or a zero-arg
    callable resolved on each call. Returns the tool names in registration
    order; raises ValueError on a duplicate name.
    """
    if not hasattr(app, "tool"):
        raise TypeError("app must expose a 'tool' decorator")

    if isinstance(client, GitHubClient):
        shared = client

        def provider() -> GitHubClient:
            return shared

    else:
        provider = client

    if modules is None:
        modules = discover_tool_modules()

    names: List[str] = []
    for module in modules:
        for func in iter_tool_functions(module):
            if func.__name__ in names:
                raise ValueError(f"Duplicate tool name detected: {func.__name__}")
            app.tool(name=func.__name__)(_bind_client(func, provider))
            names.append(func.__name__)
            log.info("Registered tool: %s (%s)", func.__name__, module.__name__)

    return names


__all__ = [
    "TOOLS_PACKAGE",
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
]
