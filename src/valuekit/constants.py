# topmark:header:start
#
#   project      : ValueKit
#   file         : constants.py
#   file_relpath : src/valuekit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueKit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

VALUEKIT_VERSION: str = get_version("valuekit")

# Environment variables consulted at runtime
ENV_LOG_LEVEL: str = "VALUEKIT_LOG_LEVEL"
ENV_OS_ARCH: str = "VALUEKIT_OS_ARCH"
