import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.ordered_set import OrderedSet

VALUES = [1, 10, 2, 7, 2]


def test_iteration_is_sorted_and_unique():
    s = OrderedSet(VALUES)
    assert list(s) == sorted(set(VALUES))
    assert len(s) == len(set(VALUES))


def test_find_by_order_ends():
    s = OrderedSet(VALUES)
    assert s.find_by_order(0) == min(VALUES)
    assert s.find_by_order(len(s) - 1) == max(VALUES)


def test_order_of_key_counts_strictly_smaller():
    s = OrderedSet(VALUES)
    assert s.order_of_key(7) == 2


def test_order_of_key_beyond_maximum_is_length():
    s = OrderedSet(VALUES)
    assert s.order_of_key(max(VALUES) + 1) == len(s)
    assert s.order_of_key(min(VALUES)) == 0


@pytest.mark.parametrize("k", [-1, 4, 100])
def test_find_by_order_out_of_range(k):
    s = OrderedSet(VALUES)
    with pytest.raises(IndexError):
        s.find_by_order(k)


def test_add_and_discard():
    s = OrderedSet()
    s.add(5)
    s.add(5)
    s.add(3)
    assert list(s) == [3, 5]
    s.discard(5)
    assert 5 not in s
    assert 3 in s
    s.discard(42)
    assert len(s) == 1


@given(st.lists(st.integers(), min_size=1))
def test_rank_and_select_are_inverse(values):
    s = OrderedSet(values)
    for k in range(len(s)):
        assert s.order_of_key(s.find_by_order(k)) == k