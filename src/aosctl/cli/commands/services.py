"""Background service commands."""

import click

from aosctl.cli.error_boundary import cli_error_boundary
from aosctl.cli.output import render_table
from aosctl.core.context import AosContext
from aosctl.core.service_tier import service_statuses, start_services, stop_services


def _names_or_default(names: tuple[str, ...]) -> list[str] | None:
    if not names:
        return None
    return list(names)


@click.group("services")
def services_group() -> None:
    """Control the deployment's background services."""
    pass


@services_group.command("stop")
@click.argument("names", nargs=-1)
@click.pass_obj
@cli_error_boundary
def services_stop(ctx: AosContext, names: tuple[str, ...]) -> None:
    """Stop services in order and wait for each to exit.

    NAMES defaults to the configured service list.
    """
    stop_services(ctx, _names_or_default(names))


@services_group.command("start")
@click.argument("names", nargs=-1)
@click.pass_obj
@cli_error_boundary
def services_start(ctx: AosContext, names: tuple[str, ...]) -> None:
    """Signal services to start in order.

    NAMES defaults to the configured service list.
    """
    start_services(ctx, _names_or_default(names))


@services_group.command("status")
@click.argument("names", nargs=-1)
@click.pass_obj
@cli_error_boundary
def services_status(ctx: AosContext, names: tuple[str, ...]) -> None:
    """Show the status of each service."""
    rows = [
        (name, status.value if status is not None else "Not installed")
        for name, status in service_statuses(ctx, _names_or_default(names))
    ]
    render_table("Services", ["Service", "Status"], rows)
