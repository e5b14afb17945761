"""Tests for RealMachine command construction."""

import pytest

from aosctl.core.command_runner import FakeCommandRunner
from aosctl.core.errors import UnexpectedExitCodeError
from aosctl.core.machine import RealMachine


def test_get_time_zone_reads_id() -> None:
    runner = FakeCommandRunner(results={"Get-TimeZone": (0, ["W. Europe Standard Time"])})

    assert RealMachine(runner).get_time_zone() == "W. Europe Standard Time"


def test_set_time_zone_quotes_id() -> None:
    runner = FakeCommandRunner()

    RealMachine(runner).set_time_zone("W. Europe Standard Time")

    assert "Set-TimeZone -Id 'W. Europe Standard Time'" in runner.calls[0][-1]


def test_set_system_locale_sets_culture_too() -> None:
    runner = FakeCommandRunner()

    RealMachine(runner).set_system_locale("en-US")

    script = runner.calls[0][-1]
    assert "Set-WinSystemLocale -SystemLocale 'en-US'" in script
    assert "Set-Culture -CultureInfo 'en-US'" in script


def test_packages_install_in_groups_of_ten() -> None:
    runner = FakeCommandRunner()
    packages = [f"pkg{i}" for i in range(12)]

    RealMachine(runner).install_packages(packages)

    assert len(runner.calls) == 2
    assert runner.calls[0][:4] == ("choco", "install", "-y", "--no-progress")
    assert runner.calls[0][4:] == tuple(packages[:10])
    assert runner.calls[1][4:] == ("pkg10", "pkg11")


def test_reboot_required_counts_as_success() -> None:
    runner = FakeCommandRunner(results={"choco install": (3010, [])})

    RealMachine(runner).install_packages(["sysinternals"])


def test_failed_package_install_raises() -> None:
    runner = FakeCommandRunner(results={"choco install": (1, ["Package not found"])})

    with pytest.raises(UnexpectedExitCodeError, match="Package not found"):
        RealMachine(runner).install_packages(["nosuchpackage"])
