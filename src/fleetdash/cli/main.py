"""FleetDash CLI main entry point."""

import logging
from pathlib import Path
from typing import Optional

import click

from fleetdash import __version__
from fleetdash.core.config import ConfigManager
from fleetdash.exceptions import ConfigurationError
from fleetdash.logging import LoggingConfig, configure_logging

from .commands import cars, config_group, login, logout, maintenance, report, summary, top_models


def setup_logging(config_manager: ConfigManager, verbose: int = 0) -> None:
    """Configure logging from the config file, raised by -v flags."""
    try:
        settings = config_manager.load_config().logging
        logging_config = LoggingConfig.from_settings(settings, version=__version__)
    except ConfigurationError as e:
        # The command itself reports the configuration error
        logging_config = LoggingConfig(level=logging.WARNING, version=__version__)
        logging.getLogger("fleetdash.cli").debug(f"Using default logging: {e.message}")

    if verbose:
        logging_config.level = min(logging_config.level, logging.DEBUG if verbose > 1 else logging.INFO)

    configure_logging(logging_config)


@click.group()
@click.version_option(version=__version__, prog_name="fleetdash")
@click.option(
    "--config", "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file path (default: ~/.config/fleetdash/config.toml)",
)
@click.option("--verbose", "-v", count=True, help="Increase verbosity (-v for INFO, -vv for DEBUG)")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: int) -> None:
    """FleetDash: command line access to the fleet dashboard API.

    \b
    Examples:
        fleetdash config set --base-url https://fleet.example.com/api
        fleetdash login -u admin
        fleetdash cars list -f make=Honda
        fleetdash report sales --start 2024-01-01
    """
    ctx.ensure_object(dict)
    config_manager = ConfigManager(config)
    ctx.obj["config_file"] = config
    ctx.obj["config_manager"] = config_manager
    ctx.obj["verbose"] = verbose

    setup_logging(config_manager, verbose)


cli.add_command(login)
cli.add_command(logout)
cli.add_command(summary)
cli.add_command(top_models)
cli.add_command(cars)
cli.add_command(maintenance)
cli.add_command(report)
cli.add_command(config_group)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
