"""Web tier commands."""

import click

from aosctl.cli.error_boundary import cli_error_boundary
from aosctl.cli.output import machine_output
from aosctl.core.context import AosContext
from aosctl.core.web_tier import (
    deployment_site,
    restart_web_server,
    start_web_tier,
    stop_web_tier,
)

_SITE_OPTION_HELP = (
    "Site name (default: the remembered WebsiteName, else AosService, then AosWebApplication)."
)


@click.group("web")
def web_group() -> None:
    """Control the deployment's web site and the web server."""
    pass


@web_group.command("stop")
@click.option("--site", "site_name", help=_SITE_OPTION_HELP)
@click.pass_obj
@cli_error_boundary
def web_stop(ctx: AosContext, site_name: str | None) -> None:
    """Stop the site and kill lightweight web host processes."""
    stop_web_tier(ctx, site_name)


@web_group.command("start")
@click.option("--site", "site_name", help=_SITE_OPTION_HELP)
@click.pass_obj
@cli_error_boundary
def web_start(ctx: AosContext, site_name: str | None) -> None:
    """Start the web server if it is down, then the site."""
    start_web_tier(ctx, site_name)


@web_group.command("restart-server")
@click.pass_obj
@cli_error_boundary
def web_restart_server(ctx: AosContext) -> None:
    """Stop and start the whole web server."""
    restart_web_server(ctx)


@web_group.command("state")
@click.option("--site", "site_name", help=_SITE_OPTION_HELP)
@click.pass_obj
@cli_error_boundary
def web_state(ctx: AosContext, site_name: str | None) -> None:
    """Print the site's state ("None" when the web server is down)."""
    site = deployment_site(ctx, site_name)
    state = ctx.web_server.get_site_state(site.name)
    machine_output(f"{site.name}\t{state.value if state is not None else 'None'}")
