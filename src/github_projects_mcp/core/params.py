"""Argument checks shared by the tool handlers. All raise ParameterError."""

from __future__ import annotations

from typing import Any, List, Optional

from .errors import ParameterError


def require_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ParameterError(f"parameter {name} is not of type string")
    if not value.strip():
        raise ParameterError(f"missing required parameter: {name}")
    return value.strip()


def optional_str(name: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParameterError(f"parameter {name} is not of type string")
    return value


def require_int(name: str, value: Any) -> int:
    if value is None:
        raise ParameterError(f"missing required parameter: {name}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParameterError(f"parameter {name} is not of type number")
    if isinstance(value, float) and not value.is_integer():
        raise ParameterError(f"parameter {name} must be a whole number")
    return int(value)


def require_positive_int(name: str, value: Any) -> int:
    number = require_int(name, value)
    if number < 1:
        raise ParameterError(f"parameter {name} must be >= 1")
    return number


def optional_str_list(name: str, value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ParameterError(f"parameter {name} is not of type array")
    out: List[str] = []
    for v in value:
        if not isinstance(v, str):
            raise ParameterError(f"parameter {name} must contain only strings")
        v = v.strip()
        if v:
            out.append(v)
    return out


def optional_page_size(name: str, value: Optional[Any], default: int) -> int:
    if value is None:
        return default
    return require_int(name, value)


__all__ = [
    "require_str",
    "optional_str",
    "require_int",
    "require_positive_int",
    "optional_str_list",
    "optional_page_size",
]
