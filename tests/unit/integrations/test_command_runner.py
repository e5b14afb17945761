"""Tests for the command runner and exit-code policy."""

import sys

import pytest

from aosctl.core.command_runner import (
    CommandResult,
    FakeCommandRunner,
    RealCommandRunner,
    ensure_success,
    powershell_command,
    quote_ps,
    run_powershell,
)
from aosctl.core.errors import UnexpectedExitCodeError


def test_real_runner_captures_output_and_exit_code() -> None:
    runner = RealCommandRunner()

    result = runner.run(
        [sys.executable, "-c", "import sys; print('one'); print('two'); sys.exit(3)"],
        operation_context="run a script",
    )

    assert result.exit_code == 3
    assert result.stdout_lines == ["one", "two"]
    assert not result.succeeded


def test_real_runner_reports_missing_program() -> None:
    runner = RealCommandRunner()

    with pytest.raises(RuntimeError, match="Command not found while trying to stop IIS"):
        runner.run(["definitely-not-a-real-program-aosctl"], operation_context="stop IIS")


def test_ensure_success_accepts_listed_codes() -> None:
    result = CommandResult(command=("choco", "install"), exit_code=3010)

    assert ensure_success(result, success_codes=(0, 3010)) is result


def test_ensure_success_rejects_other_codes() -> None:
    result = CommandResult(
        command=("iisreset.exe", "/stop"), exit_code=1, stdout_lines=["Access denied"]
    )

    with pytest.raises(UnexpectedExitCodeError) as exc_info:
        ensure_success(result)

    assert exc_info.value.exit_code == 1
    assert exc_info.value.command == ("iisreset.exe", "/stop")
    assert "Access denied" in str(exc_info.value)


def test_powershell_command_is_non_interactive() -> None:
    argv = powershell_command("Get-Service")

    assert argv == ["powershell.exe", "-NoProfile", "-NonInteractive", "-Command", "Get-Service"]


def test_quote_ps_doubles_single_quotes() -> None:
    assert quote_ps("O'Brien") == "'O''Brien'"


def test_run_powershell_requires_success() -> None:
    runner = FakeCommandRunner(results={"Stop-Website": (1, ["Cannot find site"])})

    with pytest.raises(UnexpectedExitCodeError, match="Cannot find site"):
        run_powershell(runner, "Stop-Website -Name 'X'", operation_context="stop site X")


def test_fake_runner_first_matching_fragment_wins() -> None:
    runner = FakeCommandRunner(
        results={
            "WaitForStatus": (2, []),
            "Get-Service": (0, ["Running"]),
        }
    )

    waited = runner.run(
        powershell_command("Get-Service x; $s.WaitForStatus()"), operation_context="w"
    )
    queried = runner.run(powershell_command("Get-Service x"), operation_context="q")
    other = runner.run(["iisreset.exe", "/start"], operation_context="start IIS")

    assert waited.exit_code == 2
    assert queried.stdout == "Running"
    assert other.exit_code == 0
    assert len(runner.calls) == 3


def test_fake_runner_missing_program() -> None:
    runner = FakeCommandRunner(missing_programs={"choco"})

    with pytest.raises(RuntimeError, match="install git"):
        runner.run(["choco", "install", "git"], operation_context="install git")

    assert runner.calls == []
