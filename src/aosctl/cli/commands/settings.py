"""Deployment settings commands."""

import click

from aosctl.cli.ensure import Ensure
from aosctl.cli.error_boundary import cli_error_boundary
from aosctl.cli.output import machine_output, render_table
from aosctl.core.context import AosContext
from aosctl.core.deployment_settings import DeploymentSettings
from aosctl.core.settings_store import SettingKey
from aosctl.core.site_resolver import resolve_site


def _deployment_settings(ctx: AosContext) -> DeploymentSettings:
    return DeploymentSettings(ctx.settings, ctx.web_server, site_names=ctx.config.site_names)


@click.group("settings")
def settings_group() -> None:
    """Read and write remembered deployment settings."""
    pass


@settings_group.command("get")
@click.argument("key")
@click.option(
    "--stored-only",
    is_flag=True,
    help="Only read the settings store; skip discovery from IIS and web.config.",
)
@click.pass_obj
@cli_error_boundary
def settings_get(ctx: AosContext, key: str, stored_only: bool) -> None:
    """Print a setting, discovering it when it is not stored.

    KEY is one of: InstallPath, BackupPath, ServerUrl, WebsiteName,
    DatabaseName, DatabaseServer, BinariesPath, MetadataPath, PackagesPath.
    """
    setting = SettingKey.from_name(key)
    if stored_only:
        value = ctx.settings.get(setting)
    else:
        value = _deployment_settings(ctx).value(setting)
    machine_output(Ensure.not_none(value, f"{setting.value} is not set"))


@settings_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
@cli_error_boundary
def settings_set(ctx: AosContext, key: str, value: str) -> None:
    """Remember a setting."""
    setting = SettingKey.from_name(key)
    Ensure.truthy(value.strip(), "Setting value must not be empty")
    _deployment_settings(ctx).remember(setting, value)
    ctx.feedback.success(f"✓ {setting.value} = {value}")


@settings_group.command("delete")
@click.argument("key")
@click.pass_obj
@cli_error_boundary
def settings_delete(ctx: AosContext, key: str) -> None:
    """Forget a setting so it is discovered again."""
    setting = SettingKey.from_name(key)
    ctx.settings.delete(setting)
    ctx.feedback.success(f"✓ Removed {setting.value}")


@settings_group.command("list")
@click.pass_obj
@cli_error_boundary
def settings_list(ctx: AosContext) -> None:
    """Show every stored setting."""
    stored = ctx.settings.list_all()
    if not stored:
        ctx.feedback.info(f"No settings stored in {ctx.settings.location()}")
        return
    rows = [(key.value, stored[key]) for key in SettingKey if key in stored]
    render_table(f"Settings ({ctx.settings.location()})", ["Setting", "Value"], rows)


@settings_group.command("resolve-site")
@click.option("--site", "site_name", help="Explicit site name to look up.")
@click.option("--remember", is_flag=True, help="Store the resolved name and path.")
@click.pass_obj
@cli_error_boundary
def settings_resolve_site(ctx: AosContext, site_name: str | None, remember: bool) -> None:
    """Find the deployment's site and print its name and physical path."""
    site = resolve_site(ctx.web_server, site_name, default_names=ctx.config.site_names)
    machine_output(f"{site.name}\t{site.physical_path}")
    if remember:
        settings = _deployment_settings(ctx)
        settings.remember(SettingKey.WEBSITE_NAME, site.name)
        settings.remember(SettingKey.INSTALL_PATH, str(site.physical_path))
