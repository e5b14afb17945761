"""No-op wrapper for machine setup operations."""

from pathlib import PureWindowsPath

from aosctl.cli.output import user_output
from aosctl.core.machine.abc import Machine


class DryRunMachine(Machine):
    """Wrapper that reports setup steps instead of executing them."""

    def __init__(self, wrapped: Machine) -> None:
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    def get_time_zone(self) -> str:
        return self._wrapped.get_time_zone()

    def directory_exists(self, path: PureWindowsPath) -> bool:
        return self._wrapped.directory_exists(path)

    def is_package_manager_installed(self) -> bool:
        return self._wrapped.is_package_manager_installed()

    # Mutating operations: print dry-run message instead of executing

    def set_time_zone(self, time_zone: str) -> None:
        user_output(f"[DRY RUN] Would run: Set-TimeZone -Id {time_zone}")

    def set_system_locale(self, locale: str) -> None:
        user_output(f"[DRY RUN] Would run: Set-WinSystemLocale {locale}")

    def create_directory(self, path: PureWindowsPath) -> None:
        user_output(f"[DRY RUN] Would create directory {path}")

    def install_package_manager(self) -> None:
        user_output("[DRY RUN] Would install Chocolatey")

    def install_packages(self, packages: list[str]) -> None:
        user_output(f"[DRY RUN] Would run: choco install -y {' '.join(packages)}")
