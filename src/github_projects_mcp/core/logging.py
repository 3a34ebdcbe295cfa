import logging
import os
import re
import sys
from typing import IO, Any, List, Optional

LOG_LEVEL_ENV = "GITHUB_PROJECTS_MCP_LOG_LEVEL"

LOG_EXTRA_FIELDS = (
    "request_id",
    "tool",
    "method",
    "endpoint",
    "status",
    "duration_ms",
    "error_type",
)

# Libraries that log every request themselves; op_call already covers it.
NOISY_LOGGERS = ("httpx", "httpcore")

_NEEDS_QUOTES = re.compile(r'[\s="\\]')


def _logfmt_value(val: Any) -> str:
    if isinstance(val, bool):
        return str(val).lower()
    if isinstance(val, (int, float)):
        return str(val)
    s = str(val)
    if not s or _NEEDS_QUOTES.search(s):
        s = s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{s}"'
    return s


class LogfmtFormatter(logging.Formatter):
    """One ``key=value`` line per record; absent extras are skipped."""

    def format(self, record: logging.LogRecord) -> str:
        pairs: List[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        if msg:
            pairs.append(f"event={_logfmt_value(msg)}")

        pairs.extend(
            f"{key}={_logfmt_value(getattr(record, key))}"
            for key in LOG_EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )

        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(f"exc_type={record.exc_info[0].__name__}")

        return " ".join(pairs)


def setup_logging(
    level: Optional[str] = None, stream: Optional[IO[str]] = None
) -> None:
    """Route all logging through one logfmt handler on stderr.

    stdout carries the stdio MCP stream and must stay clean.
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "LOG_LEVEL_ENV"]
