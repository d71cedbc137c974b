"""
FleetDash: client for the vehicle inventory and maintenance dashboard API.

Architecture Overview:
- Services: DashboardClient, the facade over every backend endpoint
- Infrastructure: HTTP transport and token storage
- Core: configuration and session expiry handling
- Models: value types such as DateRange
- CLI: command-line access to the same client
- Shared: logging and the exception hierarchy
"""

__version__ = "0.1.0"

from .core.config import ApiConfig, ConfigManager, FleetDashConfig
from .exceptions import ApiError, ErrorKind, FleetDashError
from .models import DateRange
from .services import DashboardClient

__all__ = [
    "DashboardClient",
    "DateRange",
    "ApiConfig",
    "FleetDashConfig",
    "ConfigManager",
    "FleetDashError",
    "ApiError",
    "ErrorKind",
]
