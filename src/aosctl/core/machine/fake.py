"""In-memory fake implementation of Machine for testing."""

from pathlib import PureWindowsPath

from aosctl.core.errors import UnexpectedExitCodeError
from aosctl.core.machine.abc import Machine


class FakeMachine(Machine):
    """In-memory fake that records setup operations.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        time_zone: str = "UTC",
        existing_directories: set[PureWindowsPath] | None = None,
        package_manager_installed: bool = False,
        failing_packages: set[str] | None = None,
    ) -> None:
        """Create fake with pre-configured machine state.

        Args:
            time_zone: Current time zone id
            existing_directories: Directories that already exist (default: C:\\ only)
            package_manager_installed: Whether choco is already available
            failing_packages: Packages whose installation fails with exit code 1
        """
        self._time_zone = time_zone
        self._locale: str | None = None
        self._directories = (
            set(existing_directories)
            if existing_directories is not None
            else {PureWindowsPath("C:\\")}
        )
        self._package_manager_installed = package_manager_installed
        self._failing_packages = failing_packages or set()
        self._created_directories: list[PureWindowsPath] = []
        self._installed_packages: list[str] = []
        self._package_manager_installs = 0

    @property
    def locale(self) -> str | None:
        return self._locale

    @property
    def created_directories(self) -> list[PureWindowsPath]:
        return self._created_directories.copy()

    @property
    def installed_packages(self) -> list[str]:
        return self._installed_packages.copy()

    @property
    def package_manager_installs(self) -> int:
        return self._package_manager_installs

    def get_time_zone(self) -> str:
        return self._time_zone

    def set_time_zone(self, time_zone: str) -> None:
        self._time_zone = time_zone

    def set_system_locale(self, locale: str) -> None:
        self._locale = locale

    def directory_exists(self, path: PureWindowsPath) -> bool:
        return path in self._directories

    def create_directory(self, path: PureWindowsPath) -> None:
        self._directories.add(path)
        self._created_directories.append(path)

    def is_package_manager_installed(self) -> bool:
        return self._package_manager_installed

    def install_package_manager(self) -> None:
        self._package_manager_installs += 1
        self._package_manager_installed = True

    def install_packages(self, packages: list[str]) -> None:
        for package in packages:
            if package in self._failing_packages:
                raise UnexpectedExitCodeError(("choco", "install", "-y", package), 1)
            self._installed_packages.append(package)
