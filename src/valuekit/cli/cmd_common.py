# topmark:header:start
#
#   project      : ValueKit
#   file         : cmd_common.py
#   file_relpath : src/valuekit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by ValueKit subcommands."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import click

from valuekit.cli.console import ClickConsole

if TYPE_CHECKING:
    from valuekit.cli.console import ConsoleLike


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 if unset)."""
    obj = ctx.obj or {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, creating a plain one if absent."""
    ctx.ensure_object(dict)
    console = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return cast("ConsoleLike", console)
