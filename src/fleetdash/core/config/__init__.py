"""
Configuration management for FleetDash.

Usage:
    from fleetdash.core.config import ConfigManager

    config_manager = ConfigManager()
    config = config_manager.load_config()
    print(config.api.base_url, config.api.timeout)
"""

from fleetdash.exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)

from .manager import ConfigManager
from .models import (
    ApiConfig,
    FleetDashConfig,
    FleetDashSettings,
    LoggingConfig,
    LogLevel,
    StorageConfig,
)


def get_config_manager(config_file=None):
    """Get a config manager instance."""
    return ConfigManager(config_file)


__all__ = [
    "FleetDashConfig",
    "ApiConfig",
    "LoggingConfig",
    "StorageConfig",
    "LogLevel",
    "ConfigManager",
    "FleetDashSettings",
    "get_config_manager",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ConfigurationValidationError",
]
