"""Machine bootstrap command."""

from pathlib import PureWindowsPath

import click

from aosctl.cli.error_boundary import cli_error_boundary
from aosctl.core.bootstrap import (
    DEFAULT_LOCALE,
    DEFAULT_TIME_ZONE,
    BootstrapOptions,
    bootstrap_machine,
)
from aosctl.core.context import AosContext


@click.command("bootstrap")
@click.option("--system-drive", default="C:", show_default=True, help="Windows system drive.")
@click.option(
    "--service-drive", default="C:", show_default=True, help="Drive for repos and temp files."
)
@click.option(
    "--repo-dir", default=None, help="Repository directory [default: <service drive>\\Repos]."
)
@click.option(
    "--time-zone", default=DEFAULT_TIME_ZONE, show_default=True, help="Windows time zone id."
)
@click.option("--locale", default=DEFAULT_LOCALE, show_default=True, help="System locale.")
@click.option(
    "--install-software", is_flag=True, help="Install Chocolatey and the configured packages."
)
@click.pass_obj
@cli_error_boundary
def bootstrap_cmd(
    ctx: AosContext,
    system_drive: str,
    service_drive: str,
    repo_dir: str | None,
    time_zone: str,
    locale: str,
    install_software: bool,
) -> None:
    """Prepare a developer or build machine."""
    options = BootstrapOptions(
        system_drive=system_drive,
        service_drive=service_drive,
        repo_dir=PureWindowsPath(repo_dir) if repo_dir else None,
        time_zone=time_zone,
        locale=locale,
        install_software=install_software,
        packages=ctx.config.packages,
    )
    bootstrap_machine(ctx, options)
