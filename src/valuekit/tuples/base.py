# topmark:header:start
#
#   project      : ValueKit
#   file         : base.py
#   file_relpath : src/valuekit/tuples/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Contracts and shared value behaviour for pairs and triples.

The concrete tuple types ([`Pair`][valuekit.tuples.pair.Pair],
[`MutablePair`][valuekit.tuples.pair.MutablePair],
[`Triple`][valuekit.tuples.triple.Triple],
[`MutableTriple`][valuekit.tuples.triple.MutableTriple]) are independent
classes. What they have in common is expressed as:

* runtime-checkable protocols (`TupleLike`, `PairLike`, `TripleLike`), and
* `SlotValueMixin`, a stateless mixin deriving equality, hashing, ordering and
  formatting from `to_tuple()`.

Ordering policy:
    Slots are compared left to right using their natural ordering. ``None``
    sorts before any present value; two ``None`` slots compare equal. Equal
    slots tie without being ordered, so equal unorderable values (dicts) are
    fine. Unequal slots need a total order: values that do not support ``<``
    propagate Python's ``TypeError``, and unequal values that are neither
    smaller nor greater (disjoint sets) raise ``TypeError`` too, so that
    ``compare_to() == 0`` always agrees with ``==``.

String policy:
    ``str()`` renders ``(a,b)`` / ``(a,b,c)`` with each slot passed through
    ``str()`` (so ``None`` renders as ``None``); ``repr()`` is the dataclass
    repr of the concrete class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

L_co = TypeVar("L_co", covariant=True)
M_co = TypeVar("M_co", covariant=True)
R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class TupleLike(Protocol):
    """Anything with a fixed arity that can expose its slots as a tuple."""

    arity: ClassVar[int]

    def to_tuple(self) -> tuple[Any, ...]:
        """Return the current slot values in order."""
        ...


@runtime_checkable
class PairLike(TupleLike, Protocol[L_co, R_co]):
    """Read contract shared by `Pair` and `MutablePair`."""

    @property
    def left(self) -> L_co | None:
        """Left slot."""
        ...

    @property
    def right(self) -> R_co | None:
        """Right slot."""
        ...

    def get_left(self) -> L_co | None:
        """Return the left slot."""
        ...

    def get_right(self) -> R_co | None:
        """Return the right slot."""
        ...

    def get_key(self) -> L_co | None:
        """Return the left slot (key view)."""
        ...

    def get_value(self) -> R_co | None:
        """Return the right slot (value view)."""
        ...


@runtime_checkable
class TripleLike(TupleLike, Protocol[L_co, M_co, R_co]):
    """Read contract shared by `Triple` and `MutableTriple`."""

    @property
    def left(self) -> L_co | None:
        """Left slot."""
        ...

    @property
    def middle(self) -> M_co | None:
        """Middle slot."""
        ...

    @property
    def right(self) -> R_co | None:
        """Right slot."""
        ...

    def get_left(self) -> L_co | None:
        """Return the left slot."""
        ...

    def get_middle(self) -> M_co | None:
        """Return the middle slot."""
        ...

    def get_right(self) -> R_co | None:
        """Return the right slot."""
        ...


def compare_slots(lhs: Sequence[Any], rhs: Sequence[Any]) -> int:
    """Compare two slot sequences lexicographically.

    Args:
        lhs (Sequence[Any]): Left-hand slot values.
        rhs (Sequence[Any]): Right-hand slot values.

    Returns:
        int: Negative if ``lhs`` sorts first, positive if ``rhs`` does, 0 otherwise.

    Raises:
        TypeError: If two unequal slot values are not ordered by ``<``.
    """
    for a, b in zip(lhs, rhs, strict=False):
        if a is b or a == b:
            continue
        # None sorts first
        if a is None:
            return -1
        if b is None:
            return 1
        if a < b:
            return -1
        if b < a:
            return 1
        raise TypeError(f"Unordered slot values: {a!r} and {b!r}")
    return len(lhs) - len(rhs)


def format_slots(values: Sequence[Any]) -> str:
    """Render slot values as ``(a,b[,c])``."""
    return "(" + ",".join(str(v) for v in values) + ")"


class SlotValueMixin:
    """Stateless value behaviour for fixed-arity tuples.

    Concrete classes provide ``arity`` and ``to_tuple()``; everything else is
    derived from the *current* slot values. Peers are any `TupleLike` of the
    same arity, so mutable and immutable flavours compare and hash alike.

    Note:
        Mutable tuples hash by their current values. Do not mutate one while
        it is a dict key or set member.
    """

    __slots__ = ()

    arity: ClassVar[int]

    def to_tuple(self) -> tuple[Any, ...]:
        """Return the current slot values in order."""
        raise NotImplementedError

    def _peer_slots(self, other: object) -> tuple[Any, ...] | None:
        if isinstance(other, TupleLike) and other.arity == self.arity:
            return other.to_tuple()
        return None

    def compare_to(self, other: TupleLike) -> int:
        """Compare with another tuple of the same arity.

        Args:
            other (TupleLike): The tuple to compare against.

        Returns:
            int: Negative, zero or positive as ``self`` sorts before, equal to,
            or after ``other``.

        Raises:
            TypeError: If ``other`` is not a tuple of the same arity, or if two
                unequal slot values are not ordered by ``<``.
        """
        peer: tuple[Any, ...] | None = self._peer_slots(other)
        if peer is None:
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        return compare_slots(self.to_tuple(), peer)

    def __eq__(self, other: object) -> bool:
        peer: tuple[Any, ...] | None = self._peer_slots(other)
        if peer is None:
            return NotImplemented
        return self.to_tuple() == peer

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __lt__(self, other: object) -> bool:
        peer: tuple[Any, ...] | None = self._peer_slots(other)
        if peer is None:
            return NotImplemented
        return compare_slots(self.to_tuple(), peer) < 0

    def __le__(self, other: object) -> bool:
        peer: tuple[Any, ...] | None = self._peer_slots(other)
        if peer is None:
            return NotImplemented
        return compare_slots(self.to_tuple(), peer) <= 0

    def __gt__(self, other: object) -> bool:
        peer: tuple[Any, ...] | None = self._peer_slots(other)
        if peer is None:
            return NotImplemented
        return compare_slots(self.to_tuple(), peer) > 0

    def __ge__(self, other: object) -> bool:
        peer: tuple[Any, ...] | None = self._peer_slots(other)
        if peer is None:
            return NotImplemented
        return compare_slots(self.to_tuple(), peer) >= 0

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return self.arity

    def __str__(self) -> str:
        return format_slots(self.to_tuple())

    def format(self, template: str) -> str:
        """Render the slots with ``str.format``.

        Positional fields ``{0}``, ``{1}`` (and ``{2}`` for triples) refer to the
        slots in order, e.g. ``Pair.of("k", 1).format("{0}={1}") == "k=1"``.

        Args:
            template (str): A ``str.format`` template.

        Returns:
            str: The rendered text.
        """
        return template.format(*self.to_tuple())
