"""Web server (IIS) operations interface.

Architecture:
- WebServer: Abstract base class defining the interface
- RealWebServer: Production implementation using WebAdministration and iisreset
- FakeWebServer: In-memory implementation for tests
- DryRunWebServer: Wrapper that turns mutations into no-ops
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SiteState(Enum):
    """State of a site hosted by the web server."""

    STARTED = "Started"
    STOPPED = "Stopped"
    STARTING = "Starting"
    STOPPING = "Stopping"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, raw: str) -> "SiteState":
        """Map an IIS state name onto SiteState, UNKNOWN if unrecognized."""
        normalized = raw.strip().lower()
        for state in cls:
            if state.value.lower() == normalized:
                return state
        return cls.UNKNOWN


@dataclass(frozen=True)
class SiteInfo:
    """A site registered with the web server."""

    name: str
    physical_path: Path


class WebServer(ABC):
    """Abstract interface for web server operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def get_site(self, name: str) -> SiteInfo | None:
        """Look up a site by exact name.

        Returns:
            SiteInfo, or None if no site has that name
        """
        ...

    @abstractmethod
    def get_site_state(self, name: str) -> SiteState | None:
        """Get the current state of a site.

        Returns:
            The site state, or None when the web server reports no state at all
            (the server itself is down)
        """
        ...

    @abstractmethod
    def start_site(self, name: str) -> None:
        """Start a single site."""
        ...

    @abstractmethod
    def stop_site(self, name: str) -> None:
        """Signal a single site to stop."""
        ...

    @abstractmethod
    def start_server(self) -> None:
        """Start the whole web server.

        Raises:
            UnexpectedExitCodeError: If the server control tool reports failure
        """
        ...

    @abstractmethod
    def stop_server(self) -> None:
        """Stop the whole web server.

        Raises:
            UnexpectedExitCodeError: If the server control tool reports failure
        """
        ...

    @abstractmethod
    def list_processes(self, process_name: str) -> list[int]:
        """List ids of running processes with the given image name."""
        ...

    @abstractmethod
    def kill_process(self, pid: int) -> None:
        """Forcefully terminate a process, with no graceful shutdown."""
        ...
