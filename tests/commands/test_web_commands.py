"""Tests for the web command group."""

from click.testing import CliRunner

from aosctl.cli.cli import cli
from aosctl.core.command_runner import FakeCommandRunner
from aosctl.core.context import AosContext
from aosctl.core.settings_store import InMemorySettingsStore, SettingKey
from aosctl.core.webserver import FakeWebServer, RealWebServer, SiteState
from tests.test_utils.deployment import AOS_WEBROOT, aos_web_server


def test_web_stop_and_start() -> None:
    web = aos_web_server(SiteState.STARTED)
    ctx = AosContext.for_test(web_server=web)
    runner = CliRunner()

    stop = runner.invoke(cli, ["web", "stop"], obj=ctx)
    start = runner.invoke(cli, ["web", "start"], obj=ctx)

    assert stop.exit_code == 0, stop.output
    assert start.exit_code == 0, start.output
    assert web.actions == ["stop_site:AosService", "start_site:AosService"]


def test_web_state_prints_state() -> None:
    ctx = AosContext.for_test(web_server=aos_web_server(SiteState.STOPPING))

    result = CliRunner().invoke(cli, ["web", "state"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "AosService\tStopping" in result.output


def test_web_state_reports_remembered_site() -> None:
    web = FakeWebServer(
        sites={"AosService": AOS_WEBROOT, "CustomAos": AOS_WEBROOT},
        site_states={"CustomAos": SiteState.STOPPED},
    )
    settings = InMemorySettingsStore({SettingKey.WEBSITE_NAME: "CustomAos"})
    ctx = AosContext.for_test(web_server=web, settings=settings)

    result = CliRunner().invoke(cli, ["web", "state"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "CustomAos\tStopped" in result.output


def test_web_state_with_server_down() -> None:
    ctx = AosContext.for_test(web_server=aos_web_server(server_running=False))

    result = CliRunner().invoke(cli, ["web", "state"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "AosService\tNone" in result.output


def test_web_restart_server() -> None:
    web = aos_web_server()
    ctx = AosContext.for_test(web_server=web)

    result = CliRunner().invoke(cli, ["web", "restart-server"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert web.actions == ["stop_server", "start_server"]


def test_web_restart_server_failure_shows_exit_code() -> None:
    """Test that an iisreset failure surfaces as an error, not a traceback."""
    runner = FakeCommandRunner(results={"iisreset.exe /stop": (5, ["Access denied"])})
    ctx = AosContext.for_test(runner=runner, web_server=RealWebServer(runner))

    result = CliRunner().invoke(cli, ["web", "restart-server"], obj=ctx)

    assert result.exit_code == 1
    assert "Command exited with code 5: iisreset.exe /stop" in result.output
    assert runner.calls == [("iisreset.exe", "/stop")]
