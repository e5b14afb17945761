"""Whole-deployment stop and start commands."""

import click

from aosctl.cli.error_boundary import cli_error_boundary
from aosctl.core.context import AosContext
from aosctl.core.lifecycle import start_deployment, stop_deployment
from aosctl.core.service_tier import ServiceAction, ServiceOutcome

_SITE_OPTION_HELP = "Site name (default: AosService, then AosWebApplication)."


def _summarize(ctx: AosContext, outcomes: list[ServiceOutcome], verb: str) -> None:
    changed = [
        o.name for o in outcomes if o.action in (ServiceAction.STOPPED, ServiceAction.STARTED)
    ]
    missing = [o.name for o in outcomes if o.action == ServiceAction.MISSING]
    ctx.feedback.success(f"✓ Deployment {verb} ({len(changed)} service(s) changed)")
    if missing:
        ctx.feedback.warning(f"Not installed: {', '.join(missing)}")


@click.command("stop")
@click.option("--site", "site_name", help=_SITE_OPTION_HELP)
@click.pass_obj
@cli_error_boundary
def stop_cmd(ctx: AosContext, site_name: str | None) -> None:
    """Stop the web tier, then the background services."""
    outcomes = stop_deployment(ctx, site_name)
    _summarize(ctx, outcomes, "stopped")


@click.command("start")
@click.option("--site", "site_name", help=_SITE_OPTION_HELP)
@click.pass_obj
@cli_error_boundary
def start_cmd(ctx: AosContext, site_name: str | None) -> None:
    """Start the background services, then the web tier."""
    outcomes = start_deployment(ctx, site_name)
    _summarize(ctx, outcomes, "started")
