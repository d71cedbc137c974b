"""
FleetDash Exception Hierarchy

Exception Hierarchy:
    FleetDashError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigurationError
    │   ├── MissingConfigurationError
    │   └── ConfigurationValidationError
    └── ApiError (kind: ErrorKind)
        ├── RequestTimeoutError
        ├── AuthenticationError
        ├── ValidationError
        ├── HttpError
        └── NetworkError

This package provides focused exception components:
- base: Core FleetDashError base class
- config: Configuration-related exceptions
- api: Backend call failures with a structured ErrorKind discriminant
- templates: Message templates, error codes and recovery suggestions
"""

from .api import (
    ApiError,
    AuthenticationError,
    ErrorKind,
    HttpError,
    NetworkError,
    RequestTimeoutError,
    ValidationError,
)
from .base import ExceptionContext, FleetDashError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)

__all__ = [
    # Base
    "FleetDashError",
    "ExceptionContext",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ConfigurationValidationError",
    # API
    "ApiError",
    "ErrorKind",
    "RequestTimeoutError",
    "AuthenticationError",
    "ValidationError",
    "HttpError",
    "NetworkError",
]
