#!/usr/bin/env python3
"""
Fail if core reaches outside its boundary.
Checks all Python files under src/github_projects_mcp/core/ for:
- imports of transport or server frameworks
- writes to stdout (print() or sys.stdout), which carries the stdio stream
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import List

REPO_ROOT = Path(__file__).resolve().parent.parent
CORE_DIR = REPO_ROOT / "src" / "github_projects_mcp" / "core"

FORBIDDEN_PREFIXES = (
    "fastapi",
    "starlette",
    "uvicorn",
    "mcp.server",
    "fastmcp",
    "github_projects_mcp.server",
    "github_projects_mcp.transports",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def _writes_stdout(node: ast.AST) -> bool:
    if isinstance(node, ast.Call) and isinstance(node.func, ast.Name):
        return node.func.id == "print"
    if isinstance(node, ast.Attribute) and node.attr == "stdout":
        return isinstance(node.value, ast.Name) and node.value.id == "sys"
    return False


def scan_file(path: Path) -> List[str]:
    errors: List[str] = []
    tree = ast.parse(path.read_text(), filename=str(path))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            mods = [alias.name for alias in node.names]
        elif isinstance(node, ast.ImportFrom) and node.level == 0:
            mods = [node.module or ""]
        else:
            mods = []

        for mod in mods:
            if mod and is_forbidden(mod):
                errors.append(f"{path}:{node.lineno}: forbidden import '{mod}'")

        if _writes_stdout(node):
            errors.append(f"{path}:{node.lineno}: core must not write to stdout")
    return errors


def main() -> int:
    violations: List[str] = []
    for py_file in sorted(CORE_DIR.rglob("*.py")):
        violations.extend(scan_file(py_file))

    for v in violations:
        print(v, file=sys.stderr)
    return 1 if violations else 0


if __name__ == "__main__":
    sys.exit(main())
