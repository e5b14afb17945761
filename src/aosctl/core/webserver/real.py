"""Production web server control using IIS tooling."""

import logging
from pathlib import Path

from aosctl.core.command_runner import CommandRunner, ensure_success, quote_ps, run_powershell
from aosctl.core.webserver.abc import SiteInfo, SiteState, WebServer

logger = logging.getLogger(__name__)

_IMPORT_WEBADMIN = "Import-Module WebAdministration -ErrorAction Stop; "


class RealWebServer(WebServer):
    """IIS control through the WebAdministration module and iisreset.exe."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def get_site(self, name: str) -> SiteInfo | None:
        # Get-Website -Name matches loosely on some hosts, so filter by exact name
        script = (
            _IMPORT_WEBADMIN
            + f"$s = Get-Website | Where-Object {{ $_.Name -eq {quote_ps(name)} }} "
            "| Select-Object -First 1; "
            "if ($s) { $s.Name; [Environment]::ExpandEnvironmentVariables($s.PhysicalPath) }"
        )
        result = run_powershell(self._runner, script, operation_context=f"look up site {name}")
        lines = [line.strip() for line in result.stdout_lines if line.strip()]
        if len(lines) < 2:
            return None
        return SiteInfo(name=lines[0], physical_path=Path(lines[1]))

    def get_site_state(self, name: str) -> SiteState | None:
        script = (
            _IMPORT_WEBADMIN
            + f"$st = Get-WebsiteState -Name {quote_ps(name)} -ErrorAction SilentlyContinue; "
            "if ($st) { $st.Value }"
        )
        result = run_powershell(
            self._runner, script, operation_context=f"query state of site {name}"
        )
        raw = result.stdout.strip()
        if not raw:
            return None
        return SiteState.parse(raw)

    def start_site(self, name: str) -> None:
        run_powershell(
            self._runner,
            _IMPORT_WEBADMIN + f"Start-Website -Name {quote_ps(name)}",
            operation_context=f"start site {name}",
        )

    def stop_site(self, name: str) -> None:
        run_powershell(
            self._runner,
            _IMPORT_WEBADMIN + f"Stop-Website -Name {quote_ps(name)}",
            operation_context=f"stop site {name}",
        )

    def start_server(self) -> None:
        result = self._runner.run(["iisreset.exe", "/start"], operation_context="start IIS")
        ensure_success(result)

    def stop_server(self) -> None:
        result = self._runner.run(["iisreset.exe", "/stop"], operation_context="stop IIS")
        ensure_success(result)

    def list_processes(self, process_name: str) -> list[int]:
        script = (
            f"Get-Process -Name {quote_ps(process_name)} -ErrorAction SilentlyContinue "
            "| ForEach-Object { $_.Id }"
        )
        result = run_powershell(
            self._runner, script, operation_context=f"list {process_name} processes"
        )
        lines = (raw.strip() for raw in result.stdout_lines)
        pids = [int(line) for line in lines if line.isdigit()]
        logger.debug("Running %s processes: %s", process_name, pids)
        return pids

    def kill_process(self, pid: int) -> None:
        run_powershell(
            self._runner,
            f"Stop-Process -Id {pid} -Force -ErrorAction Stop",
            operation_context=f"kill process {pid}",
        )
