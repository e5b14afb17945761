"""Tool configuration commands."""

from dataclasses import fields

import click

from aosctl.cli.error_boundary import cli_error_boundary
from aosctl.cli.output import render_table
from aosctl.core.context import AosContext


@click.group("config")
def config_group() -> None:
    """Show or create the aosctl configuration file."""
    pass


@config_group.command("show")
@click.pass_obj
@cli_error_boundary
def config_show(ctx: AosContext) -> None:
    """Show the effective configuration."""
    source = str(ctx.config_ops.path()) if ctx.config_ops.exists() else "defaults"
    rows = []
    for f in fields(ctx.config):
        value = getattr(ctx.config, f.name)
        if isinstance(value, tuple):
            value = ", ".join(value)
        rows.append((f.name, str(value)))
    render_table(f"Configuration ({source})", ["Key", "Value"], rows)


@config_group.command("init")
@click.option("--force", is_flag=True, help="Overwrite values in an existing file.")
@click.pass_obj
@cli_error_boundary
def config_init(ctx: AosContext, force: bool) -> None:
    """Write the current configuration to the config file."""
    path = ctx.config_ops.path()
    if ctx.config_ops.exists() and not force:
        raise FileExistsError(f"{path} already exists. Use --force to overwrite.")
    ctx.config_ops.save(ctx.config)
    ctx.feedback.success(f"✓ Wrote {path}")
