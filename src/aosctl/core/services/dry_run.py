"""No-op wrapper for service control."""

from aosctl.cli.output import user_output
from aosctl.core.services.abc import ServiceControl, ServiceStatus


class DryRunServiceControl(ServiceControl):
    """Wrapper that reports mutating operations instead of executing them.

    Read-only operations are delegated to the wrapped implementation. Waits
    return immediately since nothing was signalled.
    """

    def __init__(self, wrapped: ServiceControl) -> None:
        """Create a dry-run wrapper around a ServiceControl implementation.

        Args:
            wrapped: The ServiceControl implementation to wrap (usually RealServiceControl)
        """
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    def get_status(self, name: str) -> ServiceStatus | None:
        return self._wrapped.get_status(name)

    def get_process_id(self, name: str) -> int | None:
        return self._wrapped.get_process_id(name)

    # Mutating operations: print dry-run message instead of executing

    def start(self, name: str) -> None:
        user_output(f"[DRY RUN] Would run: Start-Service {name}")

    def stop(self, name: str) -> None:
        user_output(f"[DRY RUN] Would run: Stop-Service {name}")

    def wait_for_status(self, name: str, status: ServiceStatus, timeout_seconds: float) -> None:
        user_output(
            f"[DRY RUN] Would wait up to {timeout_seconds:g}s for {name} to be {status.value}"
        )

    def wait_for_process_exit(self, pid: int, timeout_seconds: float) -> None:
        user_output(f"[DRY RUN] Would wait up to {timeout_seconds:g}s for process {pid} to exit")
