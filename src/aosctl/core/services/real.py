"""Production service control using PowerShell cmdlets."""

import logging

from aosctl.core.command_runner import CommandRunner, quote_ps, run_powershell
from aosctl.core.command_runner.abc import ensure_success, powershell_command
from aosctl.core.errors import WaitTimeoutError
from aosctl.core.services.abc import ServiceControl, ServiceStatus

logger = logging.getLogger(__name__)

# Exit code our wait scripts use to report an expired timeout
_TIMEOUT_EXIT_CODE = 2


class RealServiceControl(ServiceControl):
    """Service control through Get-Service/Start-Service/Stop-Service.

    Waiting is done inside PowerShell with ServiceController.WaitForStatus and
    Process.WaitForExit, so a single process spans the whole bounded wait.
    """

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def get_status(self, name: str) -> ServiceStatus | None:
        script = (
            f"$s = Get-Service -Name {quote_ps(name)} -ErrorAction SilentlyContinue; "
            "if ($s) { $s.Status.ToString() }"
        )
        result = run_powershell(self._runner, script, operation_context=f"query service {name}")
        raw = result.stdout.strip()
        if not raw:
            return None
        return ServiceStatus.parse(raw)

    def start(self, name: str) -> None:
        run_powershell(
            self._runner,
            f"Start-Service -Name {quote_ps(name)} -ErrorAction Stop",
            operation_context=f"start service {name}",
        )

    def stop(self, name: str) -> None:
        run_powershell(
            self._runner,
            f"Stop-Service -Name {quote_ps(name)} -Force -NoWait -ErrorAction Stop",
            operation_context=f"stop service {name}",
        )

    def wait_for_status(self, name: str, status: ServiceStatus, timeout_seconds: float) -> None:
        script = (
            f"$s = Get-Service -Name {quote_ps(name)} -ErrorAction Stop; "
            "try { "
            f"$s.WaitForStatus({quote_ps(status.value)}, "
            f"[TimeSpan]::FromSeconds({timeout_seconds:g})) "
            "} catch [System.ServiceProcess.TimeoutException] "
            f"{{ exit {_TIMEOUT_EXIT_CODE} }}"
        )
        result = self._runner.run(
            powershell_command(script),
            operation_context=f"wait for service {name} to be {status.value}",
        )
        if result.exit_code == _TIMEOUT_EXIT_CODE:
            raise WaitTimeoutError(f"service {name}", f"reach {status.value}", timeout_seconds)
        ensure_success(result)

    def get_process_id(self, name: str) -> int | None:
        script = (
            "$svc = Get-CimInstance -ClassName Win32_Service "
            f"-Filter \"Name={quote_ps(name)}\"; "
            "if ($svc) { $svc.ProcessId }"
        )
        result = run_powershell(
            self._runner, script, operation_context=f"get process id of service {name}"
        )
        raw = result.stdout.strip()
        if not raw.isdigit():
            logger.debug("No process id reported for service %s: %r", name, raw)
            return None
        pid = int(raw)
        # Win32_Service reports 0 for services without a running process
        if pid == 0:
            return None
        return pid

    def wait_for_process_exit(self, pid: int, timeout_seconds: float) -> None:
        timeout_ms = int(timeout_seconds * 1000)
        script = (
            f"$p = Get-Process -Id {pid} -ErrorAction SilentlyContinue; "
            f"if ($p -and -not $p.WaitForExit({timeout_ms})) {{ exit {_TIMEOUT_EXIT_CODE} }}"
        )
        result = self._runner.run(
            powershell_command(script), operation_context=f"wait for process {pid} to exit"
        )
        if result.exit_code == _TIMEOUT_EXIT_CODE:
            raise WaitTimeoutError(f"process {pid}", "exit", timeout_seconds)
        ensure_success(result)
