"""
Backend API exceptions.

Every failure of a backend call surfaces as an ApiError subclass whose
``kind`` is set where the failure is detected. Callers branch on the
type or on ``kind``, never on the message text.
"""

from enum import Enum
from typing import Any, Dict, Optional

from .base import ExceptionContext, FleetDashError
from .templates import ErrorCodes, ErrorMessageTemplates, RecoverySuggestions


class ErrorKind(str, Enum):
    """Discriminant for API failures."""

    TIMEOUT = "timeout"
    AUTH = "auth"
    VALIDATION = "validation"
    HTTP = "http"
    NETWORK = "network"


class ApiError(FleetDashError):
    """Base class for failed backend calls."""

    kind: ErrorKind = ErrorKind.HTTP

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
        help_text: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        self.endpoint = endpoint
        self.status_code = status_code
        self.payload = payload or {}

        context: Dict[str, Any] = {"kind": self.kind.value}
        if endpoint:
            context["endpoint"] = endpoint
        if status_code is not None:
            context["status_code"] = status_code

        super().__init__(
            message,
            ExceptionContext(help_text=help_text, error_code=error_code, context=context),
        )


class RequestTimeoutError(ApiError):
    """Raised when the backend does not answer within the configured timeout."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, endpoint: Optional[str] = None, timeout_ms: Optional[int] = None):
        help_text = None
        if timeout_ms is not None:
            help_text = RecoverySuggestions.for_timeout(timeout_ms)[1]
        super().__init__(
            ErrorMessageTemplates.REQUEST_TIMEOUT,
            endpoint=endpoint,
            help_text=help_text,
            error_code=ErrorCodes.API_TIMEOUT,
        )
        self.timeout_ms = timeout_ms


class AuthenticationError(ApiError):
    """Raised on 401/403 responses; the stored token has already been cleared."""

    kind = ErrorKind.AUTH

    def __init__(
        self,
        message: Optional[str] = None,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message or ErrorMessageTemplates.AUTH_FAILED,
            endpoint=endpoint,
            status_code=status_code,
            payload=payload,
            help_text=RecoverySuggestions.for_auth_error()[0],
            error_code=ErrorCodes.API_AUTH_FAILED,
        )
        if status_code == 401:
            self.technical_details = "HTTP 401 Unauthorized - missing or expired token"
        elif status_code == 403:
            self.technical_details = "HTTP 403 Forbidden - token rejected for this resource"


class ValidationError(ApiError):
    """Raised on 400 responses."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: Optional[str] = None,
        endpoint: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message or ErrorMessageTemplates.INVALID_REQUEST,
            endpoint=endpoint,
            status_code=400,
            payload=payload,
            error_code=ErrorCodes.API_VALIDATION_FAILED,
        )


class HttpError(ApiError):
    """Raised on any other non-2xx response, or an unreadable 2xx JSON body."""

    kind = ErrorKind.HTTP

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            endpoint=endpoint,
            status_code=status_code,
            payload=payload,
            error_code=ErrorCodes.API_HTTP_ERROR,
        )

    @classmethod
    def from_status(
        cls,
        status_code: int,
        reason: Optional[str],
        endpoint: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> "HttpError":
        """Build from a status line; a string ``message`` in the payload wins."""
        message = (payload or {}).get("message")
        if not isinstance(message, str) or not message:
            message = ErrorMessageTemplates.HTTP_STATUS.format(status=status_code, reason=reason or "")
        return cls(message, endpoint=endpoint, status_code=status_code, payload=payload)


class NetworkError(ApiError):
    """Raised when the request never produced a response (DNS, refused, reset)."""

    kind = ErrorKind.NETWORK

    def __init__(self, endpoint: str, details: str, base_url: Optional[str] = None):
        help_text = RecoverySuggestions.for_network_error(base_url)[0] if base_url else None
        super().__init__(
            ErrorMessageTemplates.NETWORK_FAILURE.format(endpoint=endpoint, details=details),
            endpoint=endpoint,
            help_text=help_text,
            error_code=ErrorCodes.API_NETWORK_ERROR,
        )
        self.details = details
