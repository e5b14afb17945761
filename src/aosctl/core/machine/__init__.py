"""Machine setup operations subpackage."""

from aosctl.core.machine.abc import Machine
from aosctl.core.machine.dry_run import DryRunMachine
from aosctl.core.machine.fake import FakeMachine
from aosctl.core.machine.real import RealMachine

__all__ = ["DryRunMachine", "FakeMachine", "Machine", "RealMachine"]
