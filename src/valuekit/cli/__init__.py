# topmark:header:start
#
#   project      : ValueKit
#   file         : __init__.py
#   file_relpath : src/valuekit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for ValueKit."""

from __future__ import annotations
