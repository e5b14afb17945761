"""Production machine setup using PowerShell and Chocolatey."""

import logging
import os
import shutil
from pathlib import Path, PureWindowsPath

from aosctl.core.command_runner import CommandRunner, ensure_success, quote_ps, run_powershell
from aosctl.core.machine.abc import Machine

logger = logging.getLogger(__name__)

CHOCOLATEY_INSTALL_SCRIPT = (
    "[System.Net.ServicePointManager]::SecurityProtocol = "
    "[System.Net.ServicePointManager]::SecurityProtocol -bor 3072; "
    "iex ((New-Object System.Net.WebClient).DownloadString("
    "'https://community.chocolatey.org/install.ps1'))"
)
CHOCOLATEY_BIN = r"C:\ProgramData\chocolatey\bin"

# Install packages in groups to keep command lines short
PACKAGE_GROUP_SIZE = 10

# choco: 0 = success, 1641/3010 = success with reboot initiated/required
CHOCO_SUCCESS_CODES = (0, 1641, 3010)


class RealMachine(Machine):
    """Machine setup through PowerShell cmdlets and choco.exe."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def get_time_zone(self) -> str:
        result = run_powershell(
            self._runner, "(Get-TimeZone).Id", operation_context="read time zone"
        )
        return result.stdout.strip()

    def set_time_zone(self, time_zone: str) -> None:
        run_powershell(
            self._runner,
            f"Set-TimeZone -Id {quote_ps(time_zone)} -ErrorAction Stop",
            operation_context=f"set time zone to {time_zone}",
        )

    def set_system_locale(self, locale: str) -> None:
        run_powershell(
            self._runner,
            f"Set-WinSystemLocale -SystemLocale {quote_ps(locale)}; "
            f"Set-Culture -CultureInfo {quote_ps(locale)}",
            operation_context=f"set system locale to {locale}",
        )

    def directory_exists(self, path: PureWindowsPath) -> bool:
        return Path(str(path)).is_dir()

    def create_directory(self, path: PureWindowsPath) -> None:
        Path(str(path)).mkdir(parents=True, exist_ok=True)

    def is_package_manager_installed(self) -> bool:
        return shutil.which("choco") is not None

    def install_package_manager(self) -> None:
        run_powershell(
            self._runner, CHOCOLATEY_INSTALL_SCRIPT, operation_context="install Chocolatey"
        )
        # The installer updates the machine PATH, not this process's PATH
        if CHOCOLATEY_BIN not in os.environ.get("PATH", ""):
            os.environ["PATH"] = os.environ.get("PATH", "") + os.pathsep + CHOCOLATEY_BIN

    def install_packages(self, packages: list[str]) -> None:
        for i in range(0, len(packages), PACKAGE_GROUP_SIZE):
            group = packages[i : i + PACKAGE_GROUP_SIZE]
            logger.debug("Installing package group: %s", ", ".join(group))
            result = self._runner.run(
                ["choco", "install", "-y", "--no-progress", *group],
                operation_context=f"install {', '.join(group)}",
            )
            ensure_success(result, success_codes=CHOCO_SUCCESS_CODES)
