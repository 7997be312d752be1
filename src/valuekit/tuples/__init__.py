# topmark:header:start
#
#   project      : ValueKit
#   file         : __init__.py
#   file_relpath : src/valuekit/tuples/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered pairs and triples in immutable and mutable flavours.

```python
from valuekit.tuples import Pair, Triple

assert Pair.of(1, "a") < Pair.of(1, "b") < Pair.of(2, "a")
assert str(Triple.of(1, None, "x")) == "(1,None,x)"
```
"""

from __future__ import annotations

from .base import PairLike, TripleLike, TupleLike
from .pair import MutablePair, Pair
from .triple import MutableTriple, Triple

__all__ = [
    "MutablePair",
    "MutableTriple",
    "Pair",
    "PairLike",
    "Triple",
    "TripleLike",
    "TupleLike",
]
