# topmark:header:start
#
#   project      : ValueKit
#   file         : exit_codes.py
#   file_relpath : src/valuekit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ValueKit CLI.

ValueKit aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ValueKit CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        UNSUPPORTED_ARCH: The architecture name is not in the alias table, or
            the host did not report one. Mirrors BSD ``EX_UNAVAILABLE (69)``.
        CONFIG_ERROR: A built-in table is inconsistent. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    UNSUPPORTED_ARCH = 69  # EX_UNAVAILABLE
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
