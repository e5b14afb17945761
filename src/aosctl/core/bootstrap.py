"""Developer/build machine bootstrap.

Steps run in a fixed order and the first failure aborts the rest:

1. time zone
2. system locale
3. repo and temp directories on the service drive
4. optionally, the package manager and the standard software packages
"""

import logging
from dataclasses import dataclass
from pathlib import PureWindowsPath

from aosctl.core.context import AosContext
from aosctl.core.errors import NotFoundError
from aosctl.core.tool_config import DEFAULT_PACKAGES

logger = logging.getLogger(__name__)

DEFAULT_TIME_ZONE = "W. Europe Standard Time"
DEFAULT_LOCALE = "en-US"


def normalize_drive(drive: str) -> str:
    """Normalize "c", "C:" or "C:\\" to "C:".

    Raises:
        ValueError: If drive is not a single drive letter
    """
    letter = drive.strip().rstrip("\\/").rstrip(":")
    if len(letter) != 1 or not letter.isalpha():
        raise ValueError(f"Invalid drive '{drive}'. Expected a drive letter such as 'C:'")
    return f"{letter.upper()}:"


@dataclass(frozen=True)
class BootstrapOptions:
    """Inputs of a bootstrap run. Drives are normalized on construction."""

    system_drive: str = "C:"
    service_drive: str = "C:"
    repo_dir: PureWindowsPath | None = None
    time_zone: str = DEFAULT_TIME_ZONE
    locale: str = DEFAULT_LOCALE
    install_software: bool = False
    packages: tuple[str, ...] = DEFAULT_PACKAGES

    def __post_init__(self) -> None:
        object.__setattr__(self, "system_drive", normalize_drive(self.system_drive))
        object.__setattr__(self, "service_drive", normalize_drive(self.service_drive))

    @property
    def system_root(self) -> PureWindowsPath:
        return PureWindowsPath(f"{self.system_drive}\\")

    @property
    def service_root(self) -> PureWindowsPath:
        return PureWindowsPath(f"{self.service_drive}\\")

    @property
    def resolved_repo_dir(self) -> PureWindowsPath:
        if self.repo_dir is not None:
            return self.repo_dir
        return self.service_root / "Repos"

    @property
    def temp_dir(self) -> PureWindowsPath:
        return self.service_root / "Temp"


def bootstrap_machine(ctx: AosContext, options: BootstrapOptions) -> list[str]:
    """Run the bootstrap steps and return the names of the steps performed.

    Steps whose target state already holds are skipped and not returned.

    Raises:
        NotFoundError: If the system or service drive does not exist
        UnexpectedExitCodeError: If a setup tool fails
    """
    performed: list[str] = []

    for drive_root in (options.system_root, options.service_root):
        if not ctx.machine.directory_exists(drive_root):
            raise NotFoundError("Drive", str(drive_root))

    current_zone = ctx.machine.get_time_zone()
    if current_zone != options.time_zone:
        ctx.feedback.info(f"Setting time zone to {options.time_zone} (was {current_zone})")
        ctx.machine.set_time_zone(options.time_zone)
        performed.append("time-zone")
    else:
        logger.debug("Time zone already %s", current_zone)

    ctx.feedback.info(f"Setting system locale to {options.locale}")
    ctx.machine.set_system_locale(options.locale)
    performed.append("locale")

    for directory in (options.resolved_repo_dir, options.temp_dir):
        if ctx.machine.directory_exists(directory):
            logger.debug("Directory %s already exists", directory)
            continue
        ctx.feedback.info(f"Creating {directory}")
        ctx.machine.create_directory(directory)
        performed.append(f"directory:{directory}")

    if options.install_software:
        if not ctx.machine.is_package_manager_installed():
            ctx.feedback.info("Installing Chocolatey...")
            ctx.machine.install_package_manager()
            performed.append("package-manager")
        if options.packages:
            ctx.feedback.info(f"Installing {', '.join(options.packages)}...")
            ctx.machine.install_packages(list(options.packages))
            performed.append("packages")

    ctx.feedback.success("✓ Machine bootstrap complete")
    return performed
