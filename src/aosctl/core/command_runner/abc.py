"""External command execution interface.

Every integration that shells out (PowerShell, iisreset, choco) goes through a
CommandRunner so exit-code policy can be tested without the real tools.

Architecture:
- CommandRunner: Abstract base class defining the interface
- RealCommandRunner: Production implementation using subprocess
- FakeCommandRunner: Scripted in-memory implementation for tests
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from aosctl.core.errors import UnexpectedExitCodeError

POWERSHELL = ("powershell.exe", "-NoProfile", "-NonInteractive", "-Command")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a finished external command."""

    command: tuple[str, ...]
    exit_code: int
    stdout_lines: list[str] = field(default_factory=list)
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def stdout(self) -> str:
        return "\n".join(self.stdout_lines)


class CommandRunner(ABC):
    """Abstract interface for running external commands.

    Implementations never raise for a non-zero exit code; callers decide
    which codes count as success via ensure_success().
    """

    @abstractmethod
    def run(self, command: Sequence[str], *, operation_context: str) -> CommandResult:
        """Run a command to completion and capture its output.

        Args:
            command: Program and arguments
            operation_context: Human-readable description used in error messages

        Returns:
            CommandResult with exit code and captured output

        Raises:
            RuntimeError: If the program could not be launched
        """
        ...


def ensure_success(result: CommandResult, *, success_codes: Sequence[int] = (0,)) -> CommandResult:
    """Return result unchanged if its exit code is in success_codes.

    Raises:
        UnexpectedExitCodeError: If the exit code is not a success code
    """
    if result.exit_code not in success_codes:
        output = "\n".join(part for part in (result.stdout, result.stderr) if part)
        raise UnexpectedExitCodeError(result.command, result.exit_code, output)
    return result


def powershell_command(script: str) -> list[str]:
    """Build the argv that runs a PowerShell snippet non-interactively."""
    return [*POWERSHELL, script]


def run_powershell(runner: CommandRunner, script: str, *, operation_context: str) -> CommandResult:
    """Run a PowerShell snippet and require a zero exit code."""
    result = runner.run(powershell_command(script), operation_context=operation_context)
    return ensure_success(result)


def quote_ps(value: str) -> str:
    """Quote a value as a single-quoted PowerShell string literal."""
    return "'" + value.replace("'", "''") + "'"
