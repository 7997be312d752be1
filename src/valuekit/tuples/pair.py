# topmark:header:start
#
#   project      : ValueKit
#   file         : pair.py
#   file_relpath : src/valuekit/tuples/pair.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Two-slot tuples: immutable `Pair` and mutable `MutablePair`.

Both satisfy [`PairLike`][valuekit.tuples.base.PairLike], including the
key/value view (``key`` is the left slot, ``value`` the right slot), and
compare equal whenever their current slot values are equal.

Example:
    ```python
    from valuekit.tuples import MutablePair, Pair

    p = MutablePair.of("k", "old")
    assert p.set_value("new") == "old"
    assert p == Pair.of("k", "new")
    assert str(p) == "(k,new)"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Final, Generic, TypeVar

from valuekit.tuples.base import SlotValueMixin

L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True, eq=False)
class Pair(SlotValueMixin, Generic[L, R]):
    """Immutable ordered pair.

    Attributes:
        left (L | None): Left slot (also the key).
        right (R | None): Right slot (also the value).
    """

    left: L | None
    right: R | None

    arity: ClassVar[int] = 2

    @classmethod
    def of(cls, left: L | None, right: R | None) -> Pair[L, R]:
        """Create a pair from two values (either may be None)."""
        return cls(left, right)

    @classmethod
    def from_item(cls, item: tuple[L, R]) -> Pair[L, R]:
        """Create a pair from a ``(key, value)`` item, e.g. from ``dict.items()``."""
        left, right = item
        return cls(left, right)

    @staticmethod
    def null_pair() -> Pair[Any, Any]:
        """Return the shared pair of two None values."""
        return _NULL_PAIR

    def get_left(self) -> L | None:
        """Return the left slot."""
        return self.left

    def get_right(self) -> R | None:
        """Return the right slot."""
        return self.right

    @property
    def key(self) -> L | None:
        """The left slot."""
        return self.left

    @property
    def value(self) -> R | None:
        """The right slot."""
        return self.right

    def get_key(self) -> L | None:
        """Return the left slot."""
        return self.left

    def get_value(self) -> R | None:
        """Return the right slot."""
        return self.right

    def to_tuple(self) -> tuple[L | None, R | None]:
        """Return ``(left, right)``."""
        return (self.left, self.right)

    def to_mutable(self) -> MutablePair[L, R]:
        """Return a new `MutablePair` holding the same values."""
        return MutablePair(self.left, self.right)


_NULL_PAIR: Final[Pair[Any, Any]] = Pair(None, None)


@dataclass(eq=False)
class MutablePair(SlotValueMixin, Generic[L, R]):
    """Mutable ordered pair.

    Slots may be replaced at any time; their types may not. Instances are not
    synchronized: sharing one across threads needs external locking.

    Attributes:
        left (L | None): Left slot (also the key).
        right (R | None): Right slot (also the value).
    """

    left: L | None = None
    right: R | None = None

    arity: ClassVar[int] = 2

    @classmethod
    def of(cls, left: L | None, right: R | None) -> MutablePair[L, R]:
        """Create a mutable pair from two values (either may be None)."""
        return cls(left, right)

    @classmethod
    def from_item(cls, item: tuple[L, R]) -> MutablePair[L, R]:
        """Create a mutable pair from a ``(key, value)`` item."""
        left, right = item
        return cls(left, right)

    def get_left(self) -> L | None:
        """Return the left slot."""
        return self.left

    def set_left(self, left: L | None) -> None:
        """Replace the left slot."""
        self.left = left

    def get_right(self) -> R | None:
        """Return the right slot."""
        return self.right

    def set_right(self, right: R | None) -> None:
        """Replace the right slot."""
        self.right = right

    @property
    def key(self) -> L | None:
        """The left slot."""
        return self.left

    @property
    def value(self) -> R | None:
        """The right slot."""
        return self.right

    def get_key(self) -> L | None:
        """Return the left slot."""
        return self.left

    def get_value(self) -> R | None:
        """Return the right slot."""
        return self.right

    def set_value(self, value: R | None) -> R | None:
        """Replace the right slot.

        Args:
            value (R | None): The new right value.

        Returns:
            R | None: The previous right value.
        """
        previous: R | None = self.right
        self.right = value
        return previous

    def to_tuple(self) -> tuple[L | None, R | None]:
        """Return ``(left, right)``."""
        return (self.left, self.right)

    def to_immutable(self) -> Pair[L, R]:
        """Return an immutable snapshot of the current values."""
        return Pair(self.left, self.right)
