"""
FleetDash Logging Package

- config: runtime logging configuration
- formatters: JSON, console and Rich output
- loggers: correlation-aware logger wrapper used per backend call
- manager: centralized handler setup
"""

from .config import LoggingConfig
from .formatters import ContextFormatter, StructuredFormatter
from .loggers import ClientLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "logging_manager",
    "ClientLogger",
    "get_logger",
    "StructuredFormatter",
    "ContextFormatter",
]
