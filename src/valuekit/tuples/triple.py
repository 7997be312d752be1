# topmark:header:start
#
#   project      : ValueKit
#   file         : triple.py
#   file_relpath : src/valuekit/tuples/triple.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Three-slot tuples: immutable `Triple` and mutable `MutableTriple`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Final, Generic, TypeVar

from valuekit.tuples.base import SlotValueMixin

L = TypeVar("L")
M = TypeVar("M")
R = TypeVar("R")


@dataclass(frozen=True, eq=False)
class Triple(SlotValueMixin, Generic[L, M, R]):
    """Immutable ordered triple.

    Attributes:
        left (L | None): Left slot.
        middle (M | None): Middle slot.
        right (R | None): Right slot.
    """

    left: L | None
    middle: M | None
    right: R | None

    arity: ClassVar[int] = 3

    @classmethod
    def of(cls, left: L | None, middle: M | None, right: R | None) -> Triple[L, M, R]:
        """Create a triple from three values (any may be None)."""
        return cls(left, middle, right)

    @staticmethod
    def null_triple() -> Triple[Any, Any, Any]:
        """Return the shared triple of three None values."""
        return _NULL_TRIPLE

    def get_left(self) -> L | None:
        """Return the left slot."""
        return self.left

    def get_middle(self) -> M | None:
        """Return the middle slot."""
        return self.middle

    def get_right(self) -> R | None:
        """Return the right slot."""
        return self.right

    def to_tuple(self) -> tuple[L | None, M | None, R | None]:
        """Return ``(left, middle, right)``."""
        return (self.left, self.middle, self.right)

    def to_mutable(self) -> MutableTriple[L, M, R]:
        """Return a new `MutableTriple` holding the same values."""
        return MutableTriple(self.left, self.middle, self.right)


_NULL_TRIPLE: Final[Triple[Any, Any, Any]] = Triple(None, None, None)


@dataclass(eq=False)
class MutableTriple(SlotValueMixin, Generic[L, M, R]):
    """Mutable ordered triple.

    Not synchronized; see [`MutablePair`][valuekit.tuples.pair.MutablePair].

    Attributes:
        left (L | None): Left slot.
        middle (M | None): Middle slot.
        right (R | None): Right slot.
    """

    left: L | None = None
    middle: M | None = None
    right: R | None = None

    arity: ClassVar[int] = 3

    @classmethod
    def of(cls, left: L | None, middle: M | None, right: R | None) -> MutableTriple[L, M, R]:
        """Create a mutable triple from three values (any may be None)."""
        return cls(left, middle, right)

    def get_left(self) -> L | None:
        """Return the left slot."""
        return self.left

    def set_left(self, left: L | None) -> None:
        """Replace the left slot."""
        self.left = left

    def get_middle(self) -> M | None:
        """Return the middle slot."""
        return self.middle

    def set_middle(self, middle: M | None) -> None:
        """Replace the middle slot."""
        self.middle = middle

    def get_right(self) -> R | None:
        """Return the right slot."""
        return self.right

    def set_right(self, right: R | None) -> None:
        """Replace the right slot."""
        self.right = right

    def to_tuple(self) -> tuple[L | None, M | None, R | None]:
        """Return ``(left, middle, right)``."""
        return (self.left, self.middle, self.right)

    def to_immutable(self) -> Triple[L, M, R]:
        """Return an immutable snapshot of the current values."""
        return Triple(self.left, self.middle, self.right)
