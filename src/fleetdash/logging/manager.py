"""
Centralized logging configuration and management.

The LoggingManager owns the handlers it installs on the root logger, so a
reconfiguration (the CLI does one per invocation) replaces them without
touching handlers that a host application added itself.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from .config import LoggingConfig
from .formatters import ContextFormatter, StructuredFormatter, create_rich_handler
from .loggers import ClientLogger

DEFAULT_LOG_FILE = Path.home() / ".config" / "fleetdash" / "logs" / "fleetdash.log"

# Connection pool chatter is only useful when debugging the client itself
NOISY_LOGGERS = ("urllib3",)


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config = None
            self.handlers = []
            self._initialized = True

    def configure(self, config: LoggingConfig):
        """Replace this manager's handlers according to ``config``."""
        self.config = config

        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

        root_logger.setLevel(config.level)
        for output in config.output:
            handler = self._build_handler(output, config)
            handler.setLevel(config.level)
            root_logger.addHandler(handler)
            self.handlers.append(handler)

        logging.getLogger("fleetdash").setLevel(config.level)
        noisy_level = logging.DEBUG if config.level <= logging.DEBUG else logging.WARNING
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(noisy_level)

    def _build_handler(self, output: str, config: LoggingConfig) -> logging.Handler:
        if output == "file":
            return self._file_handler(config)
        if output != "console":
            raise ValueError(f"Unknown log output '{output}'")

        if config.format_type == "rich":
            return create_rich_handler()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._formatter(config))
        return handler

    def _file_handler(self, config: LoggingConfig) -> logging.Handler:
        """Rotating file handler; rich output falls back to plain lines."""
        path = Path(config.file_path) if config.file_path else DEFAULT_LOG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(self._formatter(config))
        return handler

    @staticmethod
    def _formatter(config: LoggingConfig) -> logging.Formatter:
        if config.format_type == "json":
            return StructuredFormatter(config.service_name, config.version)
        return ContextFormatter()

    def get_logger(
        self, name: str, correlation_id: Optional[str] = None
    ) -> ClientLogger:
        return ClientLogger(name, correlation_id)


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
