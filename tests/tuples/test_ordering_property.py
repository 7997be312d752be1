# topmark:header:start
#
#   project      : ValueKit
#   file         : test_ordering_property.py
#   file_relpath : tests/tuples/test_ordering_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Long-running ordering properties over text slots.

Sorting pairs with optional text slots must agree with sorting the raw tuples
using a key that places ``None`` first.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from tests.strategies_valuekit import TEXT_SLOTS
from valuekit.tuples import MutablePair, Pair

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


def _none_first(value: str | None) -> tuple[bool, str]:
    return (value is not None, value or "")


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=300,
)
@given(items=st.lists(st.tuples(TEXT_SLOTS, TEXT_SLOTS), max_size=20))
def test_text_pairs_sort_like_none_first_tuples(
    items: list[tuple[str | None, str | None]],
) -> None:
    """Pair ordering equals tuple ordering with None sorted first."""
    got: list[tuple[str | None, str | None]] = [
        p.to_tuple() for p in sorted(Pair.from_item(i) for i in items)
    ]
    expected: list[tuple[str | None, str | None]] = sorted(
        items, key=lambda t: (_none_first(t[0]), _none_first(t[1]))
    )
    assert got == expected


@settings(deadline=None, max_examples=300)
@given(left=TEXT_SLOTS, right=TEXT_SLOTS)
def test_mixed_flavours_compare_equal(left: str | None, right: str | None) -> None:
    """Mutable and immutable pairs with equal slots are equal and tie in ordering."""
    frozen: Pair[str, str] = Pair.of(left, right)
    mutable: MutablePair[str, str] = MutablePair.of(left, right)
    assert frozen == mutable
    assert frozen.compare_to(mutable) == 0
    assert hash(frozen) == hash(mutable)
    assert not frozen < mutable
