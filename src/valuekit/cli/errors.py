# topmark:header:start
#
#   project      : ValueKit
#   file         : errors.py
#   file_relpath : src/valuekit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ValueKit CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. They prefer the project console when one is present in the Click
context (see `show()`), and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from valuekit.cli.exit_codes import ExitCode


class ValuekitCliError(click.ClickException):
    """Base class for all ValueKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ValuekitUsageError(ValuekitCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ValuekitUnsupportedArchError(ValuekitCliError):
    """Error for architecture names that are not in the alias table."""

    exit_code = ExitCode.UNSUPPORTED_ARCH


class ValuekitConfigError(ValuekitCliError):
    """Error for inconsistent built-in tables."""

    exit_code = ExitCode.CONFIG_ERROR


class ValuekitUnexpectedError(ValuekitCliError):
    """Error for unexpected failures (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
