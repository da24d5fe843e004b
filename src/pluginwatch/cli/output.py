"""Output utilities for CLI commands with clear intent.

user_output() is for human-facing messages and goes to stderr.
machine_output() is for data meant to be parsed or piped and goes to stdout.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Output informational message for human users (stderr)."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Output structured data for machine or script consumption (stdout)."""
    click.echo(message, nl=nl)
