"""Report command."""

from datetime import datetime
from typing import Optional

import click

from fleetdash.constants import REPORT_KINDS
from fleetdash.models import DateRange

from ..context import get_client
from ..error_handlers import handle_cli_errors
from ..output import print_payload


@click.command()
@click.argument("kind", type=click.Choice(REPORT_KINDS))
@click.option("--start", type=click.DateTime(formats=["%Y-%m-%d"]), help="Start date (YYYY-MM-DD)")
@click.option("--end", type=click.DateTime(formats=["%Y-%m-%d"]), help="End date (YYYY-MM-DD)")
@click.pass_context
@handle_cli_errors
def report(ctx: click.Context, kind: str, start: Optional[datetime], end: Optional[datetime]) -> None:
    """Fetch an inventory, sales, maintenance or profit report.

    \b
    Examples:
        fleetdash report sales
        fleetdash report profit --start 2024-01-01 --end 2024-03-31
    """
    if start and end and start > end:
        raise click.BadParameter("--start must not be after --end", param_hint="--start")

    date_range = DateRange(
        start=start.date() if start else None,
        end=end.date() if end else None,
    )
    print_payload(get_client(ctx).get_report(kind, date_range), f"{kind.capitalize()} report")
