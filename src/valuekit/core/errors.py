# topmark:header:start
#
#   project      : ValueKit
#   file         : errors.py
#   file_relpath : src/valuekit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the ValueKit core.

These are plain exceptions; the CLI translates them into Click exceptions with
exit codes (see [`valuekit.cli.errors`][valuekit.cli.errors]).
"""

from __future__ import annotations


class ValuekitError(Exception):
    """Base class for all ValueKit core errors."""


class ConfigurationIntegrityError(ValuekitError, RuntimeError):
    """A built-in table is internally inconsistent (e.g., a duplicate alias).

    Raised while building the architecture alias map. It signals an authoring
    defect in the table itself and is not retryable.
    """
