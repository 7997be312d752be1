# topmark:header:start
#
#   project      : ValueKit
#   file         : __init__.py
#   file_relpath : src/valuekit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueKit CLI subcommands."""

from __future__ import annotations
