"""No-op wrapper for web server operations."""

from aosctl.cli.output import user_output
from aosctl.core.webserver.abc import SiteInfo, SiteState, WebServer


class DryRunWebServer(WebServer):
    """Wrapper that reports mutating operations instead of executing them.

    Read-only operations are delegated to the wrapped implementation.

    Usage:
        real_web = RealWebServer(runner)
        noop_web = DryRunWebServer(real_web)

        # Prints instead of running Stop-Website
        noop_web.stop_site("AosService")
    """

    def __init__(self, wrapped: WebServer) -> None:
        """Create a dry-run wrapper around a WebServer implementation.

        Args:
            wrapped: The WebServer implementation to wrap (usually RealWebServer)
        """
        self._wrapped = wrapped
        self._stopped_sites: set[str] = set()

    # Read-only operations: delegate to wrapped implementation

    def get_site(self, name: str) -> SiteInfo | None:
        return self._wrapped.get_site(name)

    def get_site_state(self, name: str) -> SiteState | None:
        # Report the state a real stop would have produced so stop polling ends
        if name in self._stopped_sites:
            return SiteState.STOPPED
        return self._wrapped.get_site_state(name)

    def list_processes(self, process_name: str) -> list[int]:
        return self._wrapped.list_processes(process_name)

    # Mutating operations: print dry-run message instead of executing

    def start_site(self, name: str) -> None:
        user_output(f"[DRY RUN] Would run: Start-Website {name}")

    def stop_site(self, name: str) -> None:
        self._stopped_sites.add(name)
        user_output(f"[DRY RUN] Would run: Stop-Website {name}")

    def start_server(self) -> None:
        user_output("[DRY RUN] Would run: iisreset /start")

    def stop_server(self) -> None:
        user_output("[DRY RUN] Would run: iisreset /stop")

    def kill_process(self, pid: int) -> None:
        user_output(f"[DRY RUN] Would run: Stop-Process -Id {pid} -Force")
