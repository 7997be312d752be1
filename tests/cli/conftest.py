# topmark:header:start
#
#   project      : ValueKit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ValueKit through Click's test runner."""

from __future__ import annotations

from collections.abc import Sequence

from click.testing import CliRunner, Result

from valuekit.cli.exit_codes import ExitCode
from valuekit.cli.main import cli


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    env: dict[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["arch", "amd64"]``.
        env (dict[str, str | None] | None): Extra environment variables for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "arch", "amd64"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_UNSUPPORTED_ARCH(result: Result) -> None:
    """Assert that the command exited with UNSUPPORTED_ARCH (code 69).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.UNSUPPORTED_ARCH, result.output
