"""Error kinds raised by aosctl operations.

Three kinds of failure exist:

- NotFoundError: a named resource (service, site, setting, web.config key) is
  missing. Most callers log and skip; it is fatal only when it is the last
  fallback of a discovery chain.
- WaitTimeoutError: a bounded wait for a status or process exit expired.
- UnexpectedExitCodeError: an external tool returned a non-success code.

None of these are retried. They propagate to the CLI error boundary, which
prints them and exits with code 1. A failure mid-sequence leaves the machine
in whatever state the completed steps produced.
"""


class AosctlError(Exception):
    """Base class for all aosctl errors shown to the operator."""


class NotFoundError(AosctlError):
    """A requested named resource does not exist."""

    def __init__(self, kind: str, name: str, detail: str | None = None) -> None:
        self.kind = kind
        self.name = name
        message = f"{kind} not found: {name}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class WaitTimeoutError(AosctlError):
    """A bounded wait did not complete in time."""

    def __init__(self, subject: str, target: str, timeout_seconds: float) -> None:
        self.subject = subject
        self.target = target
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Timed out after {timeout_seconds:g}s waiting for {subject} to {target}")


class UnexpectedExitCodeError(AosctlError):
    """An external command finished with a code outside its success set."""

    def __init__(self, command: tuple[str, ...], exit_code: int, output: str = "") -> None:
        self.command = command
        self.exit_code = exit_code
        self.output = output
        message = f"Command exited with code {exit_code}: {' '.join(command)}"
        if output.strip():
            message += f"\n{output.strip()}"
        super().__init__(message)
