# topmark:header:start
#
#   project      : ValueKit
#   file         : test_pair.py
#   file_relpath : tests/tuples/test_pair.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Pair` and `MutablePair`."""

from __future__ import annotations

import dataclasses

import pytest

from tests.conftest import parametrize
from valuekit.tuples import MutablePair, Pair, PairLike, TripleLike


@parametrize("cls", [Pair, MutablePair])
def test_accessors_return_constructor_values(cls: type[Pair[object, object]]) -> None:
    """of(a, b) exposes a as left/key and b as right/value."""
    p = cls.of(1, "a")
    assert p.left == 1 and p.get_left() == 1
    assert p.right == "a" and p.get_right() == "a"
    assert p.key == 1 and p.get_key() == 1
    assert p.value == "a" and p.get_value() == "a"


@parametrize("cls", [Pair, MutablePair])
def test_none_slots_are_allowed(cls: type[Pair[object, object]]) -> None:
    """Either slot may be None."""
    p = cls.of(None, None)
    assert p.get_left() is None
    assert p.get_right() is None
    assert str(p) == "(None,None)"


def test_pair_is_immutable() -> None:
    """Pair slots cannot be reassigned."""
    p = Pair.of(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.left = 3  # type: ignore[misc]


def test_mutable_pair_setters() -> None:
    """set_left/set_right replace slots unconditionally."""
    p: MutablePair[object, object] = MutablePair()
    assert p.to_tuple() == (None, None)
    p.set_left("x")
    p.set_right(2)
    assert p.get_left() == "x" and p.get_right() == 2
    p.set_left(None)
    assert p.get_left() is None


def test_set_value_returns_previous_right() -> None:
    """set_value sets the right slot and returns the old one."""
    p = MutablePair.of("k", "old")
    assert p.set_value("new") == "old"
    assert p.get_right() == "new"
    assert p.set_value(None) == "new"
    assert p.value is None


def test_equality_across_flavours() -> None:
    """Mutable and immutable pairs with equal values are equal and hash alike."""
    assert Pair.of(1, "a") == Pair.of(1, "a")
    assert MutablePair.of(1, "a") == Pair.of(1, "a")
    assert Pair.of(1, "a") == MutablePair.of(1, "a")
    assert hash(MutablePair.of(1, "a")) == hash(Pair.of(1, "a")) == hash((1, "a"))
    assert Pair.of(1, "a") != Pair.of(1, "b")


def test_not_equal_to_other_shapes() -> None:
    """Pairs are never equal to builtins or triples."""
    from valuekit.tuples import Triple

    assert Pair.of(1, 2) != (1, 2)
    assert Pair.of(1, 2) != [1, 2]
    assert Pair.of(None, None) != Triple.of(None, None, None)
    assert Pair.of(1, 2) != None  # noqa: E711


def test_mutable_pair_equality_follows_mutation() -> None:
    """Equality is computed from current values."""
    p = MutablePair.of(1, "a")
    q = Pair.of(1, "b")
    assert p != q
    p.set_right("b")
    assert p == q


def test_protocol_membership() -> None:
    """Both flavours satisfy PairLike; neither is a TripleLike."""
    assert isinstance(Pair.of(1, 2), PairLike)
    assert isinstance(MutablePair.of(1, 2), PairLike)
    assert not isinstance(Pair.of(1, 2), TripleLike)


def test_string_forms() -> None:
    """str() is '(left,right)'; format() uses positional fields."""
    assert str(Pair.of(1, "a")) == "(1,a)"
    assert str(MutablePair.of("k", None)) == "(k,None)"
    assert Pair.of("k", 1).format("{0}={1}") == "k=1"
    assert repr(Pair.of(1, "a")) == "Pair(left=1, right='a')"
    assert repr(MutablePair.of(1, "a")) == "MutablePair(left=1, right='a')"


def test_unpacking_and_len() -> None:
    """Pairs unpack like tuples and report arity 2."""
    left, right = Pair.of("k", "v")
    assert (left, right) == ("k", "v")
    assert len(MutablePair.of(1, 2)) == 2


def test_from_item_and_conversions() -> None:
    """from_item builds from dict items; to_mutable/to_immutable copy values."""
    pairs = sorted(Pair.from_item(item) for item in {"b": 2, "a": 1}.items())
    assert pairs == [Pair.of("a", 1), Pair.of("b", 2)]

    frozen = Pair.of(1, 2)
    thawed = frozen.to_mutable()
    thawed.set_left(9)
    assert frozen.left == 1
    assert thawed.to_immutable() == Pair.of(9, 2)
    assert isinstance(thawed.to_immutable(), Pair)
    assert MutablePair.from_item(("k", "v")) == Pair.of("k", "v")


def test_null_pair_is_shared() -> None:
    """null_pair() returns one shared all-None instance."""
    assert Pair.null_pair() is Pair.null_pair()
    assert Pair.null_pair() == Pair.of(None, None)


def test_pairs_as_dict_keys() -> None:
    """Immutable pairs are usable as dictionary keys."""
    index = {Pair.of("x86", 32): "i386"}
    assert index[Pair.of("x86", 32)] == "i386"
    assert index[MutablePair.of("x86", 32)] == "i386"
