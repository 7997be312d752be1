# topmark:header:start
#
#   project      : ValueKit
#   file         : __init__.py
#   file_relpath : tests/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for core helpers."""
