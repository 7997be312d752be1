# topmark:header:start
#
#   project      : ValueKit
#   file         : host.py
#   file_relpath : src/valuekit/arch/host.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host architecture identifier provider.

The registry treats the returned string as opaque; this module is the only
place that talks to the platform.
"""

from __future__ import annotations

import os
import platform

from valuekit.config.logging import ValuekitLogger, get_logger
from valuekit.constants import ENV_OS_ARCH

logger: ValuekitLogger = get_logger(__name__)


def host_os_arch() -> str | None:
    """Return the host architecture identifier, or None if unavailable.

    ``VALUEKIT_OS_ARCH`` wins when set to a non-empty value and is returned
    verbatim. Otherwise ``platform.machine()`` is used, lower-cased because some
    platforms report upper-case names (Windows reports ``"AMD64"``).

    Returns:
        str | None: The identifier, or None when the platform reports nothing.
    """
    override: str | None = os.environ.get(ENV_OS_ARCH)
    if override:
        logger.debug("Using %s override: %r", ENV_OS_ARCH, override)
        return override

    machine: str = platform.machine()
    if not machine:
        logger.warning("platform.machine() returned an empty string")
        return None
    return machine.lower()
