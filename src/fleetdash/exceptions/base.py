"""
Base exception classes for FleetDash.

Provides the foundational FleetDashError class that all other exceptions inherit from.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Context information for FleetDash exceptions."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    technical_details: Optional[str] = None
    correlation_id: Optional[str] = None


class FleetDashError(Exception):
    """Base exception for all FleetDash errors.

    Attributes:
        message: The error message, always a string
        help_text: Optional actionable guidance for the user
        error_code: Optional error code for programmatic handling
        correlation_id: Unique ID for tracking this error across logs
        context: Where the error happened (endpoint, status code, kind)
        technical_details: Technical information for debugging
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        context = context or ExceptionContext()
        self.message = message
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.context = dict(context.context)
        self.technical_details = context.technical_details
        self.correlation_id = context.correlation_id or str(uuid.uuid4())[:8]
        self.timestamp = datetime.now()
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        """Long, user-facing rendering with help and context."""
        parts = [self.message]
        if self.help_text:
            parts.append(f"Help: {self.help_text}")
        context_items = [f"{k}: {v}" for k, v in self.context.items() if v is not None]
        if context_items:
            parts.append(f"Context: {', '.join(context_items)}")
        parts.append(f"Error ID: {self.correlation_id}")
        return "\n\n".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured log records."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context,
            "help_text": self.help_text,
            "technical_details": self.technical_details,
        }
