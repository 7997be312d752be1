# topmark:header:start
#
#   project      : ValueKit
#   file         : arch.py
#   file_relpath : src/valuekit/cli/commands/arch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueKit `arch` command.

Describes the processor registered for an architecture alias, or for the host
when no alias is given.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from valuekit.arch import ArchRegistry, host_os_arch
from valuekit.cli.cmd_common import get_console, get_effective_verbosity
from valuekit.cli.errors import ValuekitConfigError, ValuekitUnsupportedArchError
from valuekit.cli.options import common_format_option
from valuekit.cli.utils import OutputFormat
from valuekit.config.logging import get_logger
from valuekit.core.errors import ConfigurationIntegrityError

if TYPE_CHECKING:
    from valuekit.arch import ProcessorDescriptor
    from valuekit.cli.console import ConsoleLike

logger = get_logger(__name__)


@click.command(
    name="arch",
    help="Describe the processor for NAME (default: the host architecture).",
)
@click.argument("name", required=False)
@common_format_option
def arch_command(
    *,
    name: str | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Describe the processor registered for an architecture alias.

    Args:
        name (str | None): Architecture alias; the host architecture if omitted.
        output_format (OutputFormat | None): Output format (default, json, markdown).

    Raises:
        ValuekitUnsupportedArchError: If the alias is unknown or the host reports none.
        ValuekitConfigError: If the built-in alias table is inconsistent.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    arch_name: str | None = name if name is not None else host_os_arch()
    if arch_name is None:
        raise ValuekitUnsupportedArchError("Unable to determine the host architecture.")

    try:
        processor: ProcessorDescriptor | None = ArchRegistry.lookup(arch_name)
        aliases: tuple[str, ...] = (
            ArchRegistry.aliases_for(processor) if processor is not None else ()
        )
    except ConfigurationIntegrityError as exc:
        raise ValuekitConfigError(str(exc)) from exc

    if processor is None:
        logger.info("No processor registered for %r", arch_name)
        raise ValuekitUnsupportedArchError(f"Unknown architecture: {arch_name!r}")

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        payload: dict[str, object] = {"name": arch_name, **processor.to_dict()}
        if vlevel > 0:
            payload["aliases"] = list(aliases)
        console.print(json.dumps(payload))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Processor\n")
        console.print("| Name | Family | Bitness | Aliases |")
        console.print("| --- | --- | --- | --- |")
        console.print(
            f"| `{arch_name}` | {processor.family.label} | {processor.bitness.label} "
            f"| {', '.join(f'`{a}`' for a in aliases)} |"
        )
    elif vlevel < 0:
        console.print(processor.label)
    else:
        console.print(f"{arch_name}: {console.styled(processor.label, bold=True)}")
        if vlevel > 0:
            console.print(f"    bitness : {processor.bitness.label}")
            console.print(f"    family  : {processor.family.label}")
            console.print(f"    aliases : {', '.join(aliases)}")
