"""
Project tools. Every public coroutine here whose first parameter is
``client`` is registered as an MCP tool by core.registry.
"""

from .fields import get_project_field, list_project_fields
from .items import (
    add_project_item,
    delete_project_item,
    get_project_item,
    list_project_items,
    update_project_item,
)
from .projects import get_project, list_projects

__all__ = [
    "list_projects",
    "get_project",
    "list_project_fields",
    "get_project_field",
    "list_project_items",
    "get_project_item",
    "add_project_item",
    "update_project_item",
    "delete_project_item",
]
