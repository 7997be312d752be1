# topmark:header:start
#
#   project      : ValueKit
#   file         : __init__.py
#   file_relpath : src/valuekit/arch/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Architecture alias registry.

Most users only need the facade:

```python
from valuekit.arch import ArchRegistry

cpu = ArchRegistry.lookup("amd64")
assert cpu is not None and cpu.is_64_bit and cpu.is_x86
host = ArchRegistry.lookup_default()  # None on unknown hosts
```
"""

from __future__ import annotations

from .host import host_os_arch
from .processor import Bitness, Family, ProcessorDescriptor
from .registry import ALIAS_GROUPS, AliasGroup, ArchRegistry, build_alias_map

__all__ = [
    "ALIAS_GROUPS",
    "AliasGroup",
    "ArchRegistry",
    "Bitness",
    "Family",
    "ProcessorDescriptor",
    "build_alias_map",
    "host_os_arch",
]
