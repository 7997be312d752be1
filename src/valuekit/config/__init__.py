# topmark:header:start
#
#   project      : ValueKit
#   file         : __init__.py
#   file_relpath : src/valuekit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for ValueKit.

ValueKit has no configuration files. Its runtime knobs are environment
variables (see [`valuekit.constants`][valuekit.constants]) and the logging
setup in [`valuekit.config.logging`][valuekit.config.logging].
"""

from __future__ import annotations
