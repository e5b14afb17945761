"""In-memory fake implementation of ServiceControl for testing."""

from aosctl.core.errors import NotFoundError, WaitTimeoutError
from aosctl.core.services.abc import ServiceControl, ServiceStatus


class FakeServiceControl(ServiceControl):
    """In-memory fake that simulates the service state machine.

    All state is provided via constructor using keyword arguments.

    - stop() moves a service to STOPPED, or to STOP_PENDING if it is listed in
      hung_services (its wait_for_status then times out).
    - start() moves a service to RUNNING.
    - Process ids listed in lingering_pids never exit.

    Example:
        services = FakeServiceControl(
            statuses={"DynamicsAxBatch": ServiceStatus.RUNNING},
            process_ids={"DynamicsAxBatch": 4242},
        )
        services.stop("DynamicsAxBatch")
        assert services.stop_calls == ["DynamicsAxBatch"]
    """

    def __init__(
        self,
        *,
        statuses: dict[str, ServiceStatus] | None = None,
        process_ids: dict[str, int] | None = None,
        hung_services: set[str] | None = None,
        lingering_pids: set[int] | None = None,
    ) -> None:
        """Create fake with pre-configured services.

        Args:
            statuses: Mapping of installed service name -> current status
            process_ids: Mapping of service name -> hosting process id
            hung_services: Services that never finish stopping
            lingering_pids: Process ids that never exit
        """
        self._statuses = dict(statuses or {})
        self._process_ids = dict(process_ids or {})
        self._hung_services = hung_services or set()
        self._lingering_pids = lingering_pids or set()
        self._start_calls: list[str] = []
        self._stop_calls: list[str] = []
        self._wait_calls: list[tuple[str, ServiceStatus, float]] = []
        self._process_wait_calls: list[tuple[int, float]] = []

    @property
    def start_calls(self) -> list[str]:
        """Service names passed to start(), in order."""
        return self._start_calls.copy()

    @property
    def stop_calls(self) -> list[str]:
        """Service names passed to stop(), in order."""
        return self._stop_calls.copy()

    @property
    def wait_calls(self) -> list[tuple[str, ServiceStatus, float]]:
        """(name, status, timeout) tuples passed to wait_for_status()."""
        return self._wait_calls.copy()

    @property
    def process_wait_calls(self) -> list[tuple[int, float]]:
        """(pid, timeout) tuples passed to wait_for_process_exit()."""
        return self._process_wait_calls.copy()

    def get_status(self, name: str) -> ServiceStatus | None:
        return self._statuses.get(name)

    def start(self, name: str) -> None:
        self._require(name)
        self._start_calls.append(name)
        self._statuses[name] = ServiceStatus.RUNNING

    def stop(self, name: str) -> None:
        self._require(name)
        self._stop_calls.append(name)
        if name in self._hung_services:
            self._statuses[name] = ServiceStatus.STOP_PENDING
        else:
            self._statuses[name] = ServiceStatus.STOPPED

    def wait_for_status(self, name: str, status: ServiceStatus, timeout_seconds: float) -> None:
        self._require(name)
        self._wait_calls.append((name, status, timeout_seconds))
        if self._statuses[name] != status:
            raise WaitTimeoutError(f"service {name}", f"reach {status.value}", timeout_seconds)

    def get_process_id(self, name: str) -> int | None:
        return self._process_ids.get(name)

    def wait_for_process_exit(self, pid: int, timeout_seconds: float) -> None:
        self._process_wait_calls.append((pid, timeout_seconds))
        if pid in self._lingering_pids:
            raise WaitTimeoutError(f"process {pid}", "exit", timeout_seconds)

    def _require(self, name: str) -> None:
        # Mirrors Start-Service/Stop-Service failing on an unknown name
        if name not in self._statuses:
            raise NotFoundError("Service", name)
