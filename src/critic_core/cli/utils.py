"""CLI utility functions and error handling.

This module provides shared utilities for the critic CLI:
- Exit code constants
- Error, warning and success output helpers

Errors are written as plain text to stderr with a non-zero exit code, so
the CLI can gate CI pipelines on the score.

Example:
    from critic_core.cli.utils import error_exit, ExitCode

    if not config_path.exists():
        error_exit(
            "Configuration file not found",
            exit_code=ExitCode.CONFIGURATION_ERROR,
            path=str(config_path),
        )
"""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from typing import NoReturn


class ExitCode(IntEnum):
    """Standard exit codes for critic commands."""

    SUCCESS = 0
    """Command completed successfully."""

    GENERAL_ERROR = 1
    """General error (catch-all for failures)."""

    USAGE_ERROR = 2
    """Invalid usage (bad arguments, missing required options)."""

    CONFIGURATION_ERROR = 3
    """Configuration file missing or invalid."""

    ANALYSIS_ERROR = 4
    """A source module could not be analysed."""

    SCORE_BELOW_MINIMUM = 5
    """Aggregate score is below the configured minimum."""


def error(message: str, **context: str | int | float | bool | None) -> None:
    """Print an error message to stderr.

    Args:
        message: Error message to display.
        **context: Optional context key-value pairs to include.

    Example:
        error("Analysis failed", path="src/broken.py")
        # Output: Error: Analysis failed (path=src/broken.py)
    """
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items() if v is not None)
        full_message = f"Error: {message} ({context_str})"
    else:
        full_message = f"Error: {message}"

    click.echo(full_message, err=True)


def error_exit(
    message: str,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    **context: str | int | float | bool | None,
) -> NoReturn:
    """Print an error message to stderr and exit with a code.

    Raises:
        SystemExit: Always exits with the specified code.
    """
    error(message, **context)
    sys.exit(exit_code)


def warn(message: str, **context: str | int | float | bool | None) -> None:
    """Print a warning message to stderr."""
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items() if v is not None)
        full_message = f"Warning: {message} ({context_str})"
    else:
        full_message = f"Warning: {message}"

    click.echo(full_message, err=True)


def success(message: str) -> None:
    """Print a result message to stdout."""
    click.echo(message)


__all__ = [
    "ExitCode",
    "error",
    "error_exit",
    "success",
    "warn",
]
