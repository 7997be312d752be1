# topmark:header:start
#
#   project      : ValueKit
#   file         : __main__.py
#   file_relpath : src/valuekit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ValueKit via ``python -m valuekit``.

Delegates directly to :func:`valuekit.cli.main.cli`, so the module interface and
the ``valuekit`` console script share a single entry point.

Examples:
    Describe the host processor::

        python -m valuekit arch
"""

from __future__ import annotations

from valuekit.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
