"""Shared objects for CLI commands, stored on ``ctx.obj``."""

import click

from fleetdash.core.config import ConfigManager
from fleetdash.services import DashboardClient


def get_config_manager(ctx: click.Context) -> ConfigManager:
    obj = ctx.ensure_object(dict)
    if "config_manager" not in obj:
        obj["config_manager"] = ConfigManager(obj.get("config_file"))
    return obj["config_manager"]


def get_client(ctx: click.Context) -> DashboardClient:
    """One client per invocation, closed when the command finishes."""
    obj = ctx.ensure_object(dict)
    if "client" not in obj:
        client = DashboardClient.from_config_manager(get_config_manager(ctx))
        ctx.call_on_close(client.close)
        obj["client"] = client
    return obj["client"]
