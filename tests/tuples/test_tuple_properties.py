# topmark:header:start
#
#   project      : ValueKit
#   file         : test_tuple_properties.py
#   file_relpath : tests/tuples/test_tuple_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the tuple contract.

Asserts that accessors return what was stored, that setters always win, and
that ordering is a consistent total order over optional ints.
"""

from __future__ import annotations

from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from tests.strategies_valuekit import ANY_SLOTS, s_int_pairs, s_int_triples
from valuekit.tuples import MutablePair, MutableTriple, Pair, Triple


@given(left=ANY_SLOTS, right=ANY_SLOTS)
def test_pair_accessors_return_stored_values(left: Any, right: Any) -> None:
    """Pair.of(a, b) returns a and b, including None."""
    p: Pair[Any, Any] = Pair.of(left, right)
    assert p.get_left() == left
    assert p.get_right() == right
    assert MutablePair.of(left, right) == p


@given(initial=ANY_SLOTS, updates=st.lists(ANY_SLOTS, max_size=5))
def test_last_set_left_wins(initial: Any, updates: list[Any]) -> None:
    """After any sequence of set_left calls, get_left returns the last value."""
    p: MutablePair[Any, Any] = MutablePair.of(initial, "fixed")
    t: MutableTriple[Any, Any, Any] = MutableTriple.of(initial, initial, "fixed")
    for value in updates:
        p.set_left(value)
        t.set_middle(value)
    expected: Any = updates[-1] if updates else initial
    assert p.get_left() == expected
    assert t.get_middle() == expected
    assert p.get_right() == "fixed"
    assert t.get_right() == "fixed"


@given(a=s_int_pairs(), b=s_int_pairs())
def test_pair_compare_is_antisymmetric(
    a: tuple[int | None, int | None], b: tuple[int | None, int | None]
) -> None:
    """sign(a.compare_to(b)) == -sign(b.compare_to(a)), and 0 iff equal."""
    pa: Pair[int, int] = Pair.from_item(a)
    pb: Pair[int, int] = Pair.from_item(b)
    ab: int = pa.compare_to(pb)
    ba: int = pb.compare_to(pa)
    assert (ab > 0) - (ab < 0) == -((ba > 0) - (ba < 0))
    assert (ab == 0) == (pa == pb)


@given(items=st.lists(s_int_triples(), max_size=12))
def test_sorting_is_consistent_with_compare_to(
    items: list[tuple[int | None, int | None, int | None]],
) -> None:
    """Sorted triples are pairwise non-decreasing under compare_to."""
    triples: list[Triple[int, int, int]] = sorted(Triple.of(*t) for t in items)
    for lo, hi in zip(triples, triples[1:], strict=False):
        assert lo.compare_to(hi) <= 0
        assert lo <= hi


@given(a=s_int_triples())
def test_equal_triples_hash_equal(a: tuple[int | None, int | None, int | None]) -> None:
    """Equal values hash alike regardless of flavour."""
    assert hash(Triple.of(*a)) == hash(MutableTriple.of(*a))
