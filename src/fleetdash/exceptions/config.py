"""
Configuration-related exceptions.
"""

from typing import Any, List, Optional

from .base import ExceptionContext, FleetDashError
from .templates import ErrorCodes, ErrorMessageTemplates


class ConfigurationError(FleetDashError):
    """Base exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        help_text: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(
            message, ExceptionContext(help_text=help_text, error_code=error_code)
        )


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        message = ErrorMessageTemplates.CONFIG_INVALID.format(
            field=field, value=value, expected=expected
        )
        help_text = f"Check the value of '{field}' in your configuration file or environment"
        super().__init__(message, help_text, ErrorCodes.CONFIG_INVALID)
        self.field = field
        self.value = value
        self.expected = expected


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, help_text: Optional[str] = None):
        message = ErrorMessageTemplates.CONFIG_MISSING.format(field=field)
        if not help_text:
            help_text = f"Please provide a value for '{field}' in your configuration file or environment variables"
        super().__init__(message, help_text, ErrorCodes.CONFIG_MISSING)
        self.field = field


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        help_text = "Please check your configuration file and fix the validation errors listed above"
        super().__init__(message, help_text, ErrorCodes.CONFIG_VALIDATION)
