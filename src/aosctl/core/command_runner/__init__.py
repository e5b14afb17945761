"""External command execution subpackage."""

from aosctl.core.command_runner.abc import (
    CommandResult,
    CommandRunner,
    ensure_success,
    powershell_command,
    quote_ps,
    run_powershell,
)
from aosctl.core.command_runner.fake import FakeCommandRunner
from aosctl.core.command_runner.real import RealCommandRunner

__all__ = [
    "CommandResult",
    "CommandRunner",
    "FakeCommandRunner",
    "RealCommandRunner",
    "ensure_success",
    "powershell_command",
    "quote_ps",
    "run_powershell",
]
