"""Tests for stopping and starting the web tier."""

import pytest

from aosctl.core.context import AosContext
from aosctl.core.errors import NotFoundError, WaitTimeoutError
from aosctl.core.settings_store import InMemorySettingsStore, SettingKey
from aosctl.core.time import FakeTime
from aosctl.core.tool_config import ToolConfig
from aosctl.core.user_feedback import FakeUserFeedback
from aosctl.core.web_tier import restart_web_server, start_web_tier, stop_web_tier
from aosctl.core.webserver import FakeWebServer, SiteState
from tests.test_utils.deployment import AOS_WEBROOT, aos_web_server


def test_start_with_server_down_starts_server_then_site() -> None:
    """The site state is re-read after starting the server."""
    web = aos_web_server(SiteState.STOPPED, server_running=False)
    ctx = AosContext.for_test(web_server=web)

    start_web_tier(ctx)

    assert web.actions == ["start_server", "start_site:AosService"]
    assert web.get_site_state("AosService") == SiteState.STARTED


def test_start_with_server_down_and_site_autostarting() -> None:
    """A site that comes up with the server is not started a second time."""
    web = aos_web_server(SiteState.STARTED, server_running=False)
    ctx = AosContext.for_test(web_server=web)

    start_web_tier(ctx)

    assert web.actions == ["start_server"]


def test_start_is_idempotent() -> None:
    web = aos_web_server(SiteState.STARTED)
    feedback = FakeUserFeedback()
    ctx = AosContext.for_test(web_server=web, feedback=feedback)

    start_web_tier(ctx)

    assert web.actions == []
    assert "Site AosService is already started" in feedback.text()


def test_start_stopped_site_with_server_up() -> None:
    web = aos_web_server(SiteState.STOPPED)
    ctx = AosContext.for_test(web_server=web)

    start_web_tier(ctx)

    assert web.actions == ["start_site:AosService"]


def test_stop_stops_site_and_kills_lightweight_hosts() -> None:
    web = aos_web_server(SiteState.STARTED, processes={"iisexpress": [311, 312]})
    ctx = AosContext.for_test(web_server=web)

    stop_web_tier(ctx)

    assert web.actions == ["stop_site:AosService", "kill_process:311", "kill_process:312"]
    assert web.get_site_state("AosService") == SiteState.STOPPED
    assert web.list_processes("iisexpress") == []


def test_stop_already_stopped_only_kills_hosts() -> None:
    """Stopping twice is harmless; lightweight hosts are still cleaned up."""
    web = aos_web_server(SiteState.STOPPED, processes={"iisexpress": [400]})
    ctx = AosContext.for_test(web_server=web)

    stop_web_tier(ctx)

    assert web.actions == ["kill_process:400"]


def test_stop_with_server_down_counts_as_stopped() -> None:
    web = aos_web_server(SiteState.STARTED, server_running=False)
    ctx = AosContext.for_test(web_server=web)

    stop_web_tier(ctx)

    assert web.actions == []


def test_stop_kills_only_configured_host_process() -> None:
    web = aos_web_server(
        SiteState.STOPPED, processes={"iisexpress": [1], "w3wp": [2], "devhost": [3]}
    )
    ctx = AosContext.for_test(web_server=web, config=ToolConfig(lightweight_host_process="devhost"))

    stop_web_tier(ctx)

    assert web.killed_pids == [3]


def test_stuck_site_times_out_after_polling() -> None:
    """A site that never leaves STOPPING is polled until the deadline passes."""
    web = aos_web_server(SiteState.STARTED, stuck_sites={"AosService"})
    time = FakeTime()
    config = ToolConfig(web_stop_timeout_seconds=10.0, poll_interval_seconds=2.0)
    ctx = AosContext.for_test(web_server=web, time=time, config=config)

    with pytest.raises(WaitTimeoutError) as exc_info:
        stop_web_tier(ctx)

    assert exc_info.value.subject == "site AosService"
    assert exc_info.value.timeout_seconds == 10.0
    assert time.sleep_calls == [2.0, 2.0, 2.0, 2.0, 2.0]
    # Processes are not killed when the site fails to stop
    assert web.killed_pids == []


def test_stop_does_not_sleep_when_site_stops_immediately() -> None:
    web = aos_web_server(SiteState.STARTED)
    time = FakeTime()
    ctx = AosContext.for_test(web_server=web, time=time)

    stop_web_tier(ctx)

    assert time.sleep_calls == []


def test_explicit_site_name_is_used() -> None:
    web = aos_web_server(SiteState.STOPPED, site_name="Foo")
    ctx = AosContext.for_test(web_server=web)

    start_web_tier(ctx, "Foo")

    assert web.actions == ["start_site:Foo"]


def _remembered_custom_site(custom_state: SiteState) -> tuple[AosContext, FakeWebServer]:
    web = FakeWebServer(
        sites={"AosService": AOS_WEBROOT, "CustomAos": AOS_WEBROOT},
        site_states={"AosService": SiteState.STARTED, "CustomAos": custom_state},
    )
    settings = InMemorySettingsStore({SettingKey.WEBSITE_NAME: "CustomAos"})
    return AosContext.for_test(web_server=web, settings=settings), web


def test_stop_uses_remembered_website_name() -> None:
    """A remembered site is stopped even when a default site also exists."""
    ctx, web = _remembered_custom_site(SiteState.STARTED)

    stop_web_tier(ctx)

    assert web.actions == ["stop_site:CustomAos"]
    assert web.get_site_state("AosService") == SiteState.STARTED


def test_start_uses_remembered_website_name() -> None:
    ctx, web = _remembered_custom_site(SiteState.STOPPED)

    start_web_tier(ctx)

    assert web.actions == ["start_site:CustomAos"]


def test_explicit_site_name_wins_over_remembered_one() -> None:
    ctx, web = _remembered_custom_site(SiteState.STARTED)

    stop_web_tier(ctx, "AosService")

    assert web.actions == ["stop_site:AosService"]
    assert web.get_site_state("CustomAos") == SiteState.STARTED


def test_unresolvable_site_fails_before_any_action() -> None:
    web = FakeWebServer(server_running=False)
    ctx = AosContext.for_test(web_server=web)

    with pytest.raises(NotFoundError):
        start_web_tier(ctx)

    assert web.actions == []


def test_restart_web_server_stops_then_starts() -> None:
    web = aos_web_server()
    ctx = AosContext.for_test(web_server=web)

    restart_web_server(ctx)

    assert web.actions == ["stop_server", "start_server"]
    assert web.server_running
