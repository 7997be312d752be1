# topmark:header:start
#
#   project      : ValueKit
#   file         : utils.py
#   file_relpath : src/valuekit/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output format and color helpers for the ValueKit CLI."""

from __future__ import annotations

import os
import sys
from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable).
      MARKDOWN: A Markdown document (tables).

    Notes:
      - ``JSON`` must not include ANSI color.
      - Use with `EnumChoiceParam` to parse ``--format`` from Click.
    """

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"


class ColorMode(Enum):
    """User intent for colorized terminal output.

    Members:
      AUTO: Enable color only when appropriate (typically when stdout is a TTY).
      ALWAYS: Force-enable color regardless of TTY status.
      NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
      1. **Machine formats**: If `output_format` is JSON, return False.
      2. **CLI override**: If `cli_mode` is `ALWAYS` → True; if `NEVER` → False.
      3. **Environment**:
         - `FORCE_COLOR` (set and not equal to `"0"`) → True
         - `NO_COLOR` (set to any value) → False
      4. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
      cli_mode: Parsed `ColorMode` value from `--color`; `None` means “not provided”.
      output_format: Output format, if already known.
      stdout_isatty: Optional override for TTY detection. When `None`, the function
        calls `sys.stdout.isatty()`.

    Returns:
      True if ANSI color should be enabled; False otherwise.

    Examples:
      >>> resolve_color_mode(cli_mode=ColorMode.NEVER, output_format=None)
      False
      >>> resolve_color_mode(cli_mode=None, output_format=OutputFormat.JSON)
      False
    """
    if output_format is OutputFormat.JSON:
        return False

    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        isatty = getattr(sys.stdout, "isatty", None)
        stdout_isatty = bool(isatty()) if callable(isatty) else False
    return stdout_isatty
