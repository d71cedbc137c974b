"""
Centralized error handling for the CLI.

Provides consistent error display, logging and exit codes across all commands.
"""

import functools
import logging
import sys

from rich.console import Console
from rich.markup import escape

from fleetdash.exceptions import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    ErrorKind,
    FleetDashError,
)

console = Console(stderr=True)
logger = logging.getLogger("fleetdash.cli.error")

EXIT_GENERAL = 1
EXIT_AUTH = 2
EXIT_CONFIG = 3
EXIT_UNREACHABLE = 4


def handle_cli_errors(func):
    """Decorator to handle all CLI errors with proper formatting and exit codes."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            _print_error("\nOperation cancelled by user", "yellow")
            sys.exit(EXIT_GENERAL)
        except AuthenticationError as e:
            _handle_authentication_error(e)
        except ConfigurationError as e:
            _handle_configuration_error(e)
        except ApiError as e:
            _handle_api_error(e)
        except FleetDashError as e:
            _print_error(f"Error: {e.message}")
            _print_details(e)
            sys.exit(EXIT_GENERAL)
    return wrapper


def _print_error(message: str, style: str = "red"):
    console.print(f"[{style}]{escape(message)}[/{style}]", highlight=False)


def _print_details(e: FleetDashError):
    if e.help_text:
        console.print(f"[blue]Help: {escape(e.help_text)}[/blue]", highlight=False)
    console.print(f"[dim]Error ID: {e.correlation_id}[/dim]", highlight=False)


def _handle_authentication_error(e: AuthenticationError):
    _print_error(f"Authentication failed: {e.message}")
    if e.technical_details:
        console.print(f"[dim]Details: {escape(e.technical_details)}[/dim]", highlight=False)
    _print_details(e)
    logger.error("Authentication error", extra={"extra_context": e.to_dict()})
    sys.exit(EXIT_AUTH)


def _handle_configuration_error(e: ConfigurationError):
    _print_error(f"Configuration error: {e.message}")
    _print_details(e)
    logger.error(f"Configuration error ({e.error_code}): {e.message}")
    sys.exit(EXIT_CONFIG)


def _handle_api_error(e: ApiError):
    label = {
        ErrorKind.TIMEOUT: "Timeout",
        ErrorKind.NETWORK: "Connection error",
        ErrorKind.VALIDATION: "Rejected request",
    }.get(e.kind, "Request failed")
    _print_error(f"{label}: {e.message}")
    _print_details(e)
    logger.error(f"API error ({e.kind.value}): {e.message}", extra={"extra_context": e.to_dict()})
    if e.kind in (ErrorKind.TIMEOUT, ErrorKind.NETWORK):
        sys.exit(EXIT_UNREACHABLE)
    sys.exit(EXIT_GENERAL)
