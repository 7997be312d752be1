# topmark:header:start
#
#   project      : ValueKit
#   file         : __init__.py
#   file_relpath : src/valuekit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across ValueKit.

Included modules:

- ``errors``
  Exception types raised by the core (no Click dependency).

- ``enum_mixins``
  Typing-friendly Enum utilities (keyed string enums with labels and
  parse aliases) that remain independent of CLI rendering.

Design goals:

- Keep this package free of UI dependencies and side effects.
- Prefer small, well-typed helpers over framework-specific utilities.
"""

from __future__ import annotations
