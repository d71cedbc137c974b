"""Login and logout commands."""

import logging

import click
from rich.console import Console

from ..context import get_client
from ..error_handlers import handle_cli_errors

console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.option("--username", "-u", prompt=True, help="Account user name")
@click.option("--password", "-p", prompt=True, hide_input=True, help="Account password")
@click.pass_context
@handle_cli_errors
def login(ctx: click.Context, username: str, password: str) -> None:
    """Log in and store the session token.

    \b
    Examples:
        fleetdash login -u admin
    """
    client = get_client(ctx)
    response = client.login({"username": username, "password": password})

    if client.get_token():
        user = response.get("user") if isinstance(response, dict) else None
        name = user.get("username", username) if isinstance(user, dict) else username
        console.print(f"[green]Logged in as {name}[/green]")
    else:
        console.print("[yellow]Login answered without a token; no session stored[/yellow]")


@click.command()
@click.pass_context
@handle_cli_errors
def logout(ctx: click.Context) -> None:
    """End the session. The local token is removed even if the backend is unreachable."""
    get_client(ctx).logout()
    console.print("[green]Logged out[/green]")
