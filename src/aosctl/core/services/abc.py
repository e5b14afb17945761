"""OS service control interface.

Architecture:
- ServiceControl: Abstract base class defining the interface
- RealServiceControl: Production implementation driving PowerShell
- FakeServiceControl: In-memory implementation for tests
- DryRunServiceControl: Wrapper that turns mutations into no-ops
"""

from abc import ABC, abstractmethod
from enum import Enum


class ServiceStatus(Enum):
    """Status of an installed OS service."""

    RUNNING = "Running"
    STOPPED = "Stopped"
    START_PENDING = "StartPending"
    STOP_PENDING = "StopPending"
    PAUSED = "Paused"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, raw: str) -> "ServiceStatus":
        """Map a Windows status name onto ServiceStatus, UNKNOWN if unrecognized."""
        normalized = raw.strip().replace(" ", "").lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status
        return cls.UNKNOWN


class ServiceControl(ABC):
    """Abstract interface for OS service operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def get_status(self, name: str) -> ServiceStatus | None:
        """Get the current status of a service.

        Returns:
            The service status, or None if no such service is installed
        """
        ...

    @abstractmethod
    def start(self, name: str) -> None:
        """Signal a service to start without waiting for it to be running."""
        ...

    @abstractmethod
    def stop(self, name: str) -> None:
        """Signal a service to stop without waiting for it to be stopped."""
        ...

    @abstractmethod
    def wait_for_status(self, name: str, status: ServiceStatus, timeout_seconds: float) -> None:
        """Block until the service reaches status.

        Raises:
            WaitTimeoutError: If the status is not reached within timeout_seconds
        """
        ...

    @abstractmethod
    def get_process_id(self, name: str) -> int | None:
        """Get the id of the process hosting a service.

        Returns:
            Process id, or None if the service has no running process
        """
        ...

    @abstractmethod
    def wait_for_process_exit(self, pid: int, timeout_seconds: float) -> None:
        """Block until the process exits. Returns at once if it is already gone.

        Raises:
            WaitTimeoutError: If the process is still alive after timeout_seconds
        """
        ...
