"""Configuration command."""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from fleetdash.core.config import ConfigManager

from ..context import get_config_manager
from ..error_handlers import handle_cli_errors

console = Console()


def show_configuration(config_manager: ConfigManager) -> None:
    config = config_manager.load_config()

    table = Table(title="FleetDash configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Config file", str(config_manager.config_file))
    table.add_row("API base URL", config.api.base_url)
    table.add_row("API timeout (ms)", str(config.api.timeout))
    table.add_row("Token file", str(config_manager.token_file()))
    table.add_row("Log level", config.logging.level.value)
    table.add_row("Log format", config.logging.format)
    console.print(table)


@click.group("config")
def config_group() -> None:
    """Show or change client settings."""


@config_group.command("show")
@click.pass_context
@handle_cli_errors
def show(ctx: click.Context) -> None:
    """Show the effective configuration (file plus environment)."""
    show_configuration(get_config_manager(ctx))


@config_group.command("set")
@click.option("--base-url", help="Backend base URL, e.g. https://fleet.example.com/api")
@click.option("--timeout", type=click.IntRange(min=1), help="Request timeout in milliseconds")
@click.pass_context
@handle_cli_errors
def set_values(ctx: click.Context, base_url: Optional[str], timeout: Optional[int]) -> None:
    """Persist API settings to the config file."""
    if base_url is None and timeout is None:
        raise click.UsageError("Nothing to set: pass --base-url and/or --timeout")

    config_manager = get_config_manager(ctx)
    config_manager.set_api_config(base_url=base_url, timeout=timeout)
    console.print(f"[green]Saved {config_manager.config_file}[/green]")
