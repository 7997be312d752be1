# topmark:header:start
#
#   project      : ValueKit
#   file         : version.py
#   file_relpath : src/valuekit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueKit `version` command.

Prints the current ValueKit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from valuekit.cli.cmd_common import get_console, get_effective_verbosity
from valuekit.cli.options import common_format_option
from valuekit.cli.utils import OutputFormat
from valuekit.constants import VALUEKIT_VERSION

if TYPE_CHECKING:
    from valuekit.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ValueKit.",
)
@common_format_option
def version_command(
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of ValueKit.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": VALUEKIT_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# ValueKit Version\n")
        console.print(f"**ValueKit version: {VALUEKIT_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("ValueKit version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(VALUEKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(VALUEKIT_VERSION, bold=True))
