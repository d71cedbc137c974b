"""
Standardized error message templates and error codes.

Keeps the user-facing wording of FleetDash errors in one place so the
client, the CLI and the tests agree on it.
"""

from typing import List


class ErrorMessageTemplates:
    """Standardized error message templates for consistent formatting."""

    # API error templates
    REQUEST_TIMEOUT = "Request timeout"
    AUTH_FAILED = "Authentication failed"
    INVALID_REQUEST = "Invalid request data"
    HTTP_STATUS = "HTTP {status}: {reason}"
    INVALID_JSON_BODY = "Invalid JSON in response from {endpoint}"
    NETWORK_FAILURE = "Network error while calling {endpoint}: {details}"
    SESSION_EXPIRED = "Your session has expired. Please login again."

    # Configuration error templates
    CONFIG_MISSING = "Missing required configuration: '{field}'"
    CONFIG_INVALID = "Invalid configuration for '{field}': got {value!r}, expected {expected}"


class ErrorCodes:
    """Error codes for programmatic handling."""

    API_TIMEOUT = "API_TIMEOUT"
    API_AUTH_FAILED = "API_AUTH_FAILED"
    API_VALIDATION_FAILED = "API_VALIDATION_FAILED"
    API_HTTP_ERROR = "API_HTTP_ERROR"
    API_NETWORK_ERROR = "API_NETWORK_ERROR"

    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_VALIDATION = "CONFIG_VALIDATION"


class RecoverySuggestions:
    """Standard recovery suggestions for common error scenarios."""

    @staticmethod
    def for_auth_error() -> List[str]:
        return [
            "Log in again: fleetdash login",
            "Check that your account is still active",
        ]

    @staticmethod
    def for_network_error(base_url: str) -> List[str]:
        return [
            f"Check that the backend at {base_url} is reachable",
            "Check firewall and proxy settings",
            "Run: fleetdash config set --base-url <url> if the address changed",
        ]

    @staticmethod
    def for_timeout(timeout_ms: int) -> List[str]:
        return [
            f"The backend did not answer within {timeout_ms} ms",
            "Raise the timeout with: fleetdash config set --timeout <ms>",
        ]
