"""Start and stop the deployment's web tier.

The web tier is the deployment's site inside the shared web server plus any
lightweight development web host (IIS Express) running beside it. Both
directions are idempotent: a site already in the desired state is left
alone.
"""

import logging

from aosctl.core.context import AosContext
from aosctl.core.errors import WaitTimeoutError
from aosctl.core.settings_store import SettingKey
from aosctl.core.site_resolver import resolve_site
from aosctl.core.webserver import SiteInfo, SiteState

logger = logging.getLogger(__name__)


def deployment_site(ctx: AosContext, site_name: str | None = None) -> SiteInfo:
    """Resolve the deployment's site.

    An explicit name wins, then the remembered WebsiteName setting, then the
    configured default site names in order.

    Raises:
        NotFoundError: If no candidate site exists
    """
    name = site_name or ctx.settings.get(SettingKey.WEBSITE_NAME)
    return resolve_site(ctx.web_server, name, default_names=ctx.config.site_names)


def stop_web_tier(ctx: AosContext, site_name: str | None = None) -> None:
    """Stop the deployment's site and kill any lightweight web host processes.

    Stopping is verified by polling the site state until it reports STOPPED.
    A server that reports no state at all is already down, which counts as
    stopped.

    Raises:
        NotFoundError: If the site cannot be resolved
        WaitTimeoutError: If the site does not stop within web_stop_timeout_seconds
    """
    site = deployment_site(ctx, site_name)
    state = ctx.web_server.get_site_state(site.name)
    logger.debug("Site %s state before stop: %s", site.name, state)

    if state is None or state == SiteState.STOPPED:
        ctx.feedback.info(f"Site {site.name} is already stopped")
    else:
        ctx.feedback.info(f"Stopping site {site.name}...")
        ctx.web_server.stop_site(site.name)
        _wait_for_site_stopped(ctx, site.name)
        ctx.feedback.success(f"✓ Site {site.name} stopped")

    _kill_lightweight_hosts(ctx)


def start_web_tier(ctx: AosContext, site_name: str | None = None) -> None:
    """Start the shared web server if it is down, then the deployment's site.

    The site state is queried again after starting the server, so the
    decision to start the site reflects the server's fresh state.

    Raises:
        NotFoundError: If the site cannot be resolved
        UnexpectedExitCodeError: If the server control tool fails
    """
    site = deployment_site(ctx, site_name)
    state = ctx.web_server.get_site_state(site.name)
    logger.debug("Site %s state before start: %s", site.name, state)

    if state is None:
        ctx.feedback.info("Web server is not running, starting it...")
        ctx.web_server.start_server()
        state = ctx.web_server.get_site_state(site.name)
        logger.debug("Site %s state after server start: %s", site.name, state)

    if state == SiteState.STARTED:
        ctx.feedback.info(f"Site {site.name} is already started")
        return

    ctx.feedback.info(f"Starting site {site.name}...")
    ctx.web_server.start_site(site.name)
    ctx.feedback.success(f"✓ Site {site.name} started")


def restart_web_server(ctx: AosContext) -> None:
    """Stop and start the whole web server.

    Raises:
        UnexpectedExitCodeError: If either server control call fails
    """
    ctx.feedback.info("Stopping web server...")
    ctx.web_server.stop_server()
    ctx.feedback.info("Starting web server...")
    ctx.web_server.start_server()
    ctx.feedback.success("✓ Web server restarted")


def _wait_for_site_stopped(ctx: AosContext, site_name: str) -> None:
    timeout = ctx.config.web_stop_timeout_seconds
    deadline = ctx.time.monotonic() + timeout
    while True:
        state = ctx.web_server.get_site_state(site_name)
        if state is None or state == SiteState.STOPPED:
            return
        if ctx.time.monotonic() >= deadline:
            raise WaitTimeoutError(f"site {site_name}", "stop", timeout)
        logger.debug("Site %s is %s, polling again", site_name, state.value)
        ctx.time.sleep(ctx.config.poll_interval_seconds)


def _kill_lightweight_hosts(ctx: AosContext) -> None:
    process_name = ctx.config.lightweight_host_process
    pids = ctx.web_server.list_processes(process_name)
    if not pids:
        logger.debug("No %s processes running", process_name)
        return
    for pid in pids:
        ctx.feedback.info(f"Killing {process_name} process {pid}")
        ctx.web_server.kill_process(pid)
