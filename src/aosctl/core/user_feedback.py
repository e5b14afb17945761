"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from aosctl.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Controllers call ctx.feedback instead of threading a 'quiet' boolean
    through every signature.

    Mode behavior:
        Interactive mode (quiet=False):
            - info() → outputs to stderr
            - success() → outputs to stderr with green styling
            - warning() → outputs to stderr with yellow styling

        Quiet mode (quiet=True):
            - info(), success() → suppressed
            - warning() → still shown
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet mode (only warnings shown)."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))


class FakeUserFeedback(UserFeedback):
    """Records messages for test assertions instead of printing them."""

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    @property
    def messages(self) -> list[tuple[str, str]]:
        """(level, message) tuples in the order they were emitted."""
        return self._messages.copy()

    def text(self) -> str:
        """All messages joined by newlines, for substring assertions."""
        return "\n".join(message for _level, message in self._messages)

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))
