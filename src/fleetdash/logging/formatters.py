"""
Log formatters for different output formats.

Backend calls log through ClientLogger, which attaches ``correlation_id``
and ``extra_context`` (method, endpoint, status) to each record. The JSON
formatter emits those as fields; the console formatter appends them to the
line so a request and its outcome can be matched by eye.
"""

import json
import logging
import traceback
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

CONSOLE_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _context_suffix(record: logging.LogRecord) -> str:
    parts = []
    correlation_id = getattr(record, "correlation_id", None)
    if correlation_id:
        parts.append(f"[{correlation_id}]")
    for key, value in getattr(record, "extra_context", {}).items():
        parts.append(f"{key}={value}")
    return " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, service_name: str = "fleetdash", version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
            "logger": record.name,
        }

        if hasattr(record, "correlation_id"):
            log_entry["correlation_id"] = record.correlation_id

        if hasattr(record, "extra_context"):
            log_entry.update(record.extra_context)

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


class ContextFormatter(logging.Formatter):
    """Human-readable line with the request context appended."""

    def __init__(self, fmt: str = CONSOLE_FORMAT, datefmt: str = CONSOLE_DATE_FORMAT):
        super().__init__(fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        suffix = _context_suffix(record)
        if not suffix:
            return line
        head, sep, rest = line.partition("\n")
        return f"{head} {suffix}{sep}{rest}"


def create_rich_handler() -> logging.Handler:
    """Rich handler on stderr; context is appended to the message."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(ContextFormatter("%(message)s"))
    return handler
