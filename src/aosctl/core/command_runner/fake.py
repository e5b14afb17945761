"""Fake command runner for testing without launching processes."""

from collections.abc import Sequence

from aosctl.core.command_runner.abc import CommandResult, CommandRunner


class FakeCommandRunner(CommandRunner):
    """In-memory fake that returns scripted results and records calls.

    Results are keyed by a fragment of the command line; the first key found
    in the space-joined command wins. Unmatched commands succeed with empty
    output.

    Example:
        runner = FakeCommandRunner(results={"iisreset.exe /stop": (1, ["Access denied"])})
        result = runner.run(["iisreset.exe", "/stop"], operation_context="stop IIS")
        assert result.exit_code == 1
    """

    def __init__(
        self,
        *,
        results: dict[str, tuple[int, list[str]]] | None = None,
        missing_programs: set[str] | None = None,
    ) -> None:
        """Create fake with scripted results.

        Args:
            results: Mapping of command-line fragment -> (exit_code, stdout_lines)
            missing_programs: Program names that behave as if not installed
        """
        self._results = results or {}
        self._missing_programs = missing_programs or set()
        self._calls: list[tuple[str, ...]] = []

    @property
    def calls(self) -> list[tuple[str, ...]]:
        """Commands that were run, in order.

        This property is for test assertions only.
        """
        return self._calls.copy()

    def run(self, command: Sequence[str], *, operation_context: str) -> CommandResult:
        argv = tuple(command)
        if argv and argv[0] in self._missing_programs:
            msg = f"Command not found while trying to {operation_context}: {argv[0]}"
            raise RuntimeError(msg)

        self._calls.append(argv)
        command_line = " ".join(argv)
        for fragment, (exit_code, stdout_lines) in self._results.items():
            if fragment in command_line:
                return CommandResult(
                    command=argv, exit_code=exit_code, stdout_lines=list(stdout_lines)
                )
        return CommandResult(command=argv, exit_code=0)
