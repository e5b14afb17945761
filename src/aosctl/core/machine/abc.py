"""Machine setup operations interface.

Covers the host-level steps of bootstrapping a developer/build machine: time
zone, system locale, directories and software installation through the
Chocolatey package manager.
"""

from abc import ABC, abstractmethod
from pathlib import PureWindowsPath


class Machine(ABC):
    """Abstract interface for machine setup operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def get_time_zone(self) -> str:
        """Get the id of the current time zone (e.g. "UTC")."""
        ...

    @abstractmethod
    def set_time_zone(self, time_zone: str) -> None:
        """Set the machine time zone by id."""
        ...

    @abstractmethod
    def set_system_locale(self, locale: str) -> None:
        """Set the system locale and the user culture (e.g. "en-US")."""
        ...

    @abstractmethod
    def directory_exists(self, path: PureWindowsPath) -> bool:
        """Check whether a directory exists."""
        ...

    @abstractmethod
    def create_directory(self, path: PureWindowsPath) -> None:
        """Create a directory and any missing parents."""
        ...

    @abstractmethod
    def is_package_manager_installed(self) -> bool:
        """Check whether the package manager is available on PATH."""
        ...

    @abstractmethod
    def install_package_manager(self) -> None:
        """Install the package manager.

        Raises:
            UnexpectedExitCodeError: If the installer fails
        """
        ...

    @abstractmethod
    def install_packages(self, packages: list[str]) -> None:
        """Install packages unattended.

        Raises:
            UnexpectedExitCodeError: If the package manager reports failure
        """
        ...
