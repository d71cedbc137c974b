"""Dashboard, car and maintenance commands."""

from typing import Optional, Tuple

import click

from ..context import get_client
from ..error_handlers import handle_cli_errors
from ..output import console, print_payload


def parse_filters(filters: Tuple[str, ...]) -> dict:
    """Turn ``key=value`` options into a query parameter mapping."""
    params = {}
    for item in filters:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got '{item}'", param_hint="--filter")
        params[key.strip()] = value.strip()
    return params


@click.command()
@click.pass_context
@handle_cli_errors
def summary(ctx: click.Context) -> None:
    """Show the dashboard summary."""
    print_payload(get_client(ctx).get_dashboard_summary(), "Dashboard summary")


@click.command("top-models")
@click.pass_context
@handle_cli_errors
def top_models(ctx: click.Context) -> None:
    """Show the best selling models."""
    print_payload(get_client(ctx).get_top_sold_models(), "Top sold models")


@click.group()
def cars() -> None:
    """Browse and manage cars."""


@cars.command("list")
@click.option("--filter", "-f", "filters", multiple=True, help="Query filter as key=value (repeatable)")
@click.pass_context
@handle_cli_errors
def list_cars(ctx: click.Context, filters: Tuple[str, ...]) -> None:
    """List cars.

    \b
    Examples:
        fleetdash cars list
        fleetdash cars list -f make=Honda -f status=available
    """
    print_payload(get_client(ctx).get_cars(parse_filters(filters)), "Cars")


@cars.command("show")
@click.argument("car_id")
@click.pass_context
@handle_cli_errors
def show_car(ctx: click.Context, car_id: str) -> None:
    """Show one car."""
    print_payload(get_client(ctx).get_car(car_id))


@cars.command("delete")
@click.argument("car_id")
@click.confirmation_option(prompt="Delete this car?")
@click.pass_context
@handle_cli_errors
def delete_car(ctx: click.Context, car_id: str) -> None:
    """Delete a car."""
    get_client(ctx).delete_car(car_id)
    console.print(f"[green]Deleted car {car_id}[/green]")


@click.group()
def maintenance() -> None:
    """Browse maintenance records."""


@maintenance.command("list")
@click.option("--car", "car_id", help="Only records of this car")
@click.pass_context
@handle_cli_errors
def list_maintenance(ctx: click.Context, car_id: Optional[str]) -> None:
    """List maintenance records."""
    client = get_client(ctx)
    if car_id:
        payload = client.get_maintenance_records(car_id)
    else:
        payload = client.get_all_maintenance_records()
    print_payload(payload, "Maintenance records")


@maintenance.command("show")
@click.argument("record_id")
@click.pass_context
@handle_cli_errors
def show_maintenance(ctx: click.Context, record_id: str) -> None:
    """Show one maintenance record."""
    print_payload(get_client(ctx).get_maintenance_record(record_id))


@maintenance.command("categories")
@click.pass_context
@handle_cli_errors
def categories(ctx: click.Context) -> None:
    """List maintenance categories."""
    print_payload(get_client(ctx).get_maintenance_categories(), "Maintenance categories")
