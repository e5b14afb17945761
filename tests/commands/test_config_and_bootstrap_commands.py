"""Tests for the config and bootstrap commands."""

from pathlib import Path, PureWindowsPath

from click.testing import CliRunner

from aosctl.cli.cli import cli
from aosctl.core.context import AosContext
from aosctl.core.machine import FakeMachine
from aosctl.core.tool_config import FilesystemToolConfigOps, InMemoryToolConfigOps, ToolConfig


def test_config_show_lists_defaults() -> None:
    ctx = AosContext.for_test(config_ops=InMemoryToolConfigOps())

    result = CliRunner().invoke(cli, ["config", "show"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "defaults" in result.output
    assert "lightweight_host_process" in result.output
    assert "iisexpress" in result.output


def test_config_init_writes_file(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    ctx = AosContext.for_test(config_ops=FilesystemToolConfigOps(path))

    result = CliRunner().invoke(cli, ["config", "init"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert FilesystemToolConfigOps(path).load() == ToolConfig()


def test_config_init_refuses_to_overwrite() -> None:
    ctx = AosContext.for_test(config_ops=InMemoryToolConfigOps(ToolConfig()))

    result = CliRunner().invoke(cli, ["config", "init"], obj=ctx)

    assert result.exit_code == 1
    assert "already exists. Use --force to overwrite." in result.output


def test_bootstrap_command_installs_configured_packages() -> None:
    machine = FakeMachine(existing_directories={PureWindowsPath("C:\\"), PureWindowsPath("K:\\")})
    ctx = AosContext.for_test(machine=machine, config=ToolConfig(packages=("git", "7zip")))

    result = CliRunner().invoke(
        cli, ["bootstrap", "--service-drive", "K", "--install-software"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert machine.installed_packages == ["git", "7zip"]
    assert machine.created_directories == [
        PureWindowsPath(r"K:\Repos"),
        PureWindowsPath(r"K:\Temp"),
    ]


def test_bootstrap_command_rejects_bad_drive() -> None:
    ctx = AosContext.for_test()

    result = CliRunner().invoke(cli, ["bootstrap", "--system-drive", "CD"], obj=ctx)

    assert result.exit_code == 1
    assert "Invalid drive 'CD'" in result.output


def test_bootstrap_command_missing_drive() -> None:
    ctx = AosContext.for_test()

    result = CliRunner().invoke(cli, ["bootstrap", "--service-drive", "Z:"], obj=ctx)

    assert result.exit_code == 1
    assert "Drive not found: Z:" in result.output
