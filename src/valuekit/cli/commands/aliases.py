# topmark:header:start
#
#   project      : ValueKit
#   file         : aliases.py
#   file_relpath : src/valuekit/cli/commands/aliases.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueKit `aliases` command.

Lists the architecture alias table, grouped by processor.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from valuekit.arch import ArchRegistry, Family
from valuekit.cli.cmd_common import get_console
from valuekit.cli.errors import ValuekitConfigError, ValuekitUsageError
from valuekit.cli.options import common_format_option
from valuekit.cli.utils import OutputFormat
from valuekit.core.errors import ConfigurationIntegrityError

if TYPE_CHECKING:
    from valuekit.arch import AliasGroup
    from valuekit.cli.console import ConsoleLike


@click.command(
    name="aliases",
    help="List the architecture aliases known to ValueKit.",
)
@click.option(
    "--family",
    "family_name",
    type=str,
    default=None,
    help=f"Only list one family ({', '.join(f.key for f in Family)}).",
)
@common_format_option
def aliases_command(
    *,
    family_name: str | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """List the architecture alias table.

    Args:
        family_name (str | None): Optional family filter, parsed with `Family.parse`.
        output_format (OutputFormat | None): Output format (default, json, markdown).

    Raises:
        ValuekitUsageError: If ``family_name`` is not a known family.
        ValuekitConfigError: If the built-in alias table is inconsistent.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    family: Family | None = None
    if family_name is not None:
        family = Family.parse(family_name)
        if family is None:
            raise ValuekitUsageError(f"Unknown processor family: {family_name!r}")

    try:
        groups: list[AliasGroup] = list(ArchRegistry.iter_groups(family))
    except ConfigurationIntegrityError as exc:
        raise ValuekitConfigError(str(exc)) from exc

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        payload = [{**g.processor.to_dict(), "aliases": list(g.aliases)} for g in groups]
        console.print(json.dumps(payload))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Architecture aliases\n")
        console.print("| Processor | Aliases |")
        console.print("| --- | --- |")
        for g in groups:
            console.print(f"| {g.processor.label} | {', '.join(f'`{a}`' for a in g.aliases)} |")
    else:
        width: int = max((len(g.processor.label) for g in groups), default=0)
        for g in groups:
            label: str = console.styled(g.processor.label.ljust(width), bold=True)
            console.print(f"{label} : {', '.join(g.aliases)}")
