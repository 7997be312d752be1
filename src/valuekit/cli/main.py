# topmark:header:start
#
#   project      : ValueKit
#   file         : main.py
#   file_relpath : src/valuekit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueKit Click CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read them back through `valuekit.cli.cmd_common`.
"""

from __future__ import annotations

from typing import Any

import click

from valuekit.cli.commands.aliases import aliases_command
from valuekit.cli.commands.arch import arch_command
from valuekit.cli.commands.version import version_command
from valuekit.cli.console import ClickConsole
from valuekit.cli.errors import ValuekitUnexpectedError
from valuekit.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from valuekit.cli.utils import ColorMode, resolve_color_mode
from valuekit.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    setup_logging(level=resolve_env_log_level())

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


class ValuekitGroup(click.Group):
    """Click group that reports unhandled exceptions as `UNEXPECTED_ERROR`.

    Click's own exceptions (usage errors, `ValuekitCliError`, `Exit`, `Abort`)
    pass through unchanged.
    """

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the group, mapping unhandled exceptions to `ValuekitUnexpectedError`."""
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as exc:
            logger.debug("Unhandled exception in command", exc_info=True)
            raise ValuekitUnexpectedError(f"Unexpected error: {exc}") from exc


@click.group(
    cls=ValuekitGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ValueKit CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ValueKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    logger.debug("verbosity=%s color=%s", ctx.obj["verbosity_level"], ctx.obj["color_enabled"])

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'valuekit arch [NAME]' to describe a processor.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(arch_command)

cli.add_command(aliases_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
