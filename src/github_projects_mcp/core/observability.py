from __future__ import annotations

import logging
from typing import Any, Dict

EVENT_LOGGER = "github_projects_mcp.observability"

# Attributes every LogRecord already carries; passing one in ``extra`` raises.
RESERVED_LOG_KEYS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}


def log_event(
    event: str,
    logger: logging.Logger | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """
    Emit one structured event. ``fields`` travel as LogRecord attributes so
    the logfmt formatter can render them; reserved names are dropped.
    """
    log = logger or logging.getLogger(EVENT_LOGGER)
    log.log(level, event, extra={"event": event, **_clean_fields(fields)})


__all__ = ["EVENT_LOGGER", "RESERVED_LOG_KEYS", "log_event"]
