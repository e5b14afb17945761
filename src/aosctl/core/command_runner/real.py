"""Real command execution using subprocess."""

import logging
import subprocess
from collections.abc import Sequence

from aosctl.core.command_runner.abc import CommandResult, CommandRunner

logger = logging.getLogger(__name__)


class RealCommandRunner(CommandRunner):
    """Production implementation using subprocess.run().

    Output is decoded as UTF-8 with replacement so localized tool output
    never aborts a run.
    """

    def run(self, command: Sequence[str], *, operation_context: str) -> CommandResult:
        """Run command and capture output without checking the exit code.

        Raises:
            RuntimeError: If the command binary is not found
        """
        logger.debug("Running command to %s: %s", operation_context, " ".join(command))
        try:
            completed = subprocess.run(
                list(command),
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError as e:
            cmd_str = " ".join(str(arg) for arg in command)
            error_msg = f"Command not found while trying to {operation_context}: {command[0]}"
            error_msg += f"\nFull command: {cmd_str}"
            raise RuntimeError(error_msg) from e

        logger.debug("Command exited with %d", completed.returncode)
        return CommandResult(
            command=tuple(command),
            exit_code=completed.returncode,
            stdout_lines=completed.stdout.splitlines() if completed.stdout else [],
            stderr=completed.stderr.strip() if completed.stderr else "",
        )
