# topmark:header:start
#
#   project      : ValueKit
#   file         : __init__.py
#   file_relpath : src/valuekit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueKit package.

ValueKit is a small value-object toolkit. It provides ordered pairs and
triples in immutable and mutable flavours, and a registry that maps platform
architecture aliases (``"amd64"``, ``"i686"``, ``"ppc64"``...) to a structured
processor descriptor. A thin Click CLI exposes the registry.
"""

from __future__ import annotations
