import logging
import os

import click

from aosctl.cli.commands.bootstrap import bootstrap_cmd
from aosctl.cli.commands.config import config_group
from aosctl.cli.commands.lifecycle import start_cmd, stop_cmd
from aosctl.cli.commands.services import services_group
from aosctl.cli.commands.settings import settings_group
from aosctl.cli.commands.web import web_group
from aosctl.cli.output import user_output
from aosctl.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "AOSCTL_DEBUG"


def _configure_logging(verbose: bool) -> None:
    # Enable debug logging if -v is passed or AOSCTL_DEBUG is set
    if verbose or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="aosctl")
@click.option("--dry-run", is_flag=True, help="Print mutating actions instead of running them.")
@click.option("-q", "--quiet", is_flag=True, help="Only print warnings and errors.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, dry_run: bool, quiet: bool, verbose: bool) -> None:
    """Control an AOS deployment and bootstrap build machines."""
    _configure_logging(verbose)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run, quiet=quiet)
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None


cli.add_command(bootstrap_cmd)
cli.add_command(config_group)
cli.add_command(services_group)
cli.add_command(settings_group)
cli.add_command(start_cmd)
cli.add_command(stop_cmd)
cli.add_command(web_group)


def main() -> None:
    """CLI entry point used by the `aosctl` console script."""
    cli()
