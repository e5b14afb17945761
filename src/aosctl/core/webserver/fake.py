"""In-memory fake implementation of WebServer for testing."""

from pathlib import Path

from aosctl.core.errors import NotFoundError
from aosctl.core.webserver.abc import SiteInfo, SiteState, WebServer


class FakeWebServer(WebServer):
    """In-memory fake that simulates IIS and its sites.

    All state is provided via constructor using keyword arguments.

    - While server_running is False, get_site_state() returns None for every
      site and start_site() fails, like IIS with W3SVC stopped.
    - Sites listed in stuck_sites stay STOPPING after stop_site().
    - actions records every mutating call in order for sequencing assertions.

    Example:
        web = FakeWebServer(
            sites={"AosService": Path(r"C:\\AOSService\\webroot")},
            site_states={"AosService": SiteState.STOPPED},
            server_running=False,
        )
    """

    def __init__(
        self,
        *,
        sites: dict[str, Path] | None = None,
        site_states: dict[str, SiteState] | None = None,
        server_running: bool = True,
        processes: dict[str, list[int]] | None = None,
        stuck_sites: set[str] | None = None,
    ) -> None:
        """Create fake with pre-configured sites.

        Args:
            sites: Mapping of site name -> physical path
            site_states: Mapping of site name -> state (default STARTED)
            server_running: Whether the web server itself is up
            processes: Mapping of process image name -> running pids
            stuck_sites: Sites that never finish stopping
        """
        self._sites = dict(sites or {})
        self._site_states = {name: SiteState.STARTED for name in self._sites}
        self._site_states.update(site_states or {})
        self._server_running = server_running
        self._processes = {name: list(pids) for name, pids in (processes or {}).items()}
        self._stuck_sites = stuck_sites or set()
        self._actions: list[str] = []
        self._killed_pids: list[int] = []
        self._state_queries = 0

    @property
    def actions(self) -> list[str]:
        """Mutating calls in order, e.g. "start_server" or "stop_site:AosService"."""
        return self._actions.copy()

    @property
    def killed_pids(self) -> list[int]:
        """Process ids passed to kill_process()."""
        return self._killed_pids.copy()

    @property
    def server_running(self) -> bool:
        return self._server_running

    @property
    def state_queries(self) -> int:
        """Number of get_site_state() calls made."""
        return self._state_queries

    def get_site(self, name: str) -> SiteInfo | None:
        if name not in self._sites:
            return None
        return SiteInfo(name=name, physical_path=self._sites[name])

    def get_site_state(self, name: str) -> SiteState | None:
        self._state_queries += 1
        if not self._server_running:
            return None
        return self._site_states.get(name)

    def start_site(self, name: str) -> None:
        self._require(name)
        if not self._server_running:
            raise RuntimeError(f"Failed to start site {name}: web server is not running")
        self._actions.append(f"start_site:{name}")
        self._site_states[name] = SiteState.STARTED

    def stop_site(self, name: str) -> None:
        self._require(name)
        self._actions.append(f"stop_site:{name}")
        if name in self._stuck_sites:
            self._site_states[name] = SiteState.STOPPING
        else:
            self._site_states[name] = SiteState.STOPPED

    def start_server(self) -> None:
        self._actions.append("start_server")
        self._server_running = True

    def stop_server(self) -> None:
        self._actions.append("stop_server")
        self._server_running = False

    def list_processes(self, process_name: str) -> list[int]:
        return list(self._processes.get(process_name, []))

    def kill_process(self, pid: int) -> None:
        self._actions.append(f"kill_process:{pid}")
        self._killed_pids.append(pid)
        for pids in self._processes.values():
            if pid in pids:
                pids.remove(pid)

    def _require(self, name: str) -> None:
        if name not in self._sites:
            raise NotFoundError("Site", name)
