"""
Logger wrapper carrying a correlation ID and structured context.

Every backend call gets its own ClientLogger so that the request line, the
response line and any error for that call share one correlation ID.
"""

import logging
from typing import Any, Dict, Optional
from uuid import uuid4


class ClientLogger:
    """Thin wrapper over a stdlib logger that adds correlation and context."""

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())[:8]
        self.extra_context: Dict[str, Any] = {}

    def _log(self, level: int, msg: str, **kwargs):
        extra: Dict[str, Any] = {"correlation_id": self.correlation_id}
        context = dict(self.extra_context)
        context.update(kwargs)
        if context:
            extra["extra_context"] = context
        self.logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def with_context(self, **kwargs) -> "ClientLogger":
        """Create a copy of this logger with additional context."""
        new_logger = ClientLogger(self.logger.name, self.correlation_id)
        new_logger.extra_context = self.extra_context.copy()
        new_logger.extra_context.update(kwargs)
        return new_logger
