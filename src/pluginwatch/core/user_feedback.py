"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from pluginwatch.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Hook handlers report through ctx.feedback instead of writing to a stream
    directly, so the host (or the CLI's JSON mode) decides what is shown.

    Interactive mode:
        - info() → stderr
        - warning() → stderr, yellow
        - error() → stderr, red

    Suppressed mode (machine-readable output on stdout):
        - info() and warning() → suppressed
        - error() → stderr, red
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback used while emitting JSON (only errors shown)."""

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
