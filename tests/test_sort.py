from itertools import permutations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.sort import (
    find_max,
    find_min,
    is_sorted,
    solve,
    sort_five,
    sort_three,
    turk_sort,
)
from pushswap.stacks import Operation, Stacks

INT_MIN = -2147483648
INT_MAX = 2147483647


def _replay(values, operations):
    stacks = Stacks(values)
    for op in operations:
        assert stacks.apply(op)
    return stacks


def test_is_sorted_empty_is_false():
    assert is_sorted(Stacks([]).a) is False


def test_is_sorted_single_is_true():
    assert is_sorted(Stacks([42]).a) is True


def test_is_sorted_detects_order():
    assert is_sorted(Stacks([1, 2, 3]).a) is True
    assert is_sorted(Stacks([1, 3, 2]).a) is False


def test_find_min_and_max_return_nodes_of_stack():
    stacks = Stacks([3, 1, 2])
    smallest = find_min(stacks.a)
    largest = find_max(stacks.a)
    assert smallest.value == 1
    assert largest.value == 3
    assert smallest is stacks.a[1]
    assert largest is stacks.a[0]


def test_find_on_empty_returns_none():
    assert find_min([]) is None
    assert find_max([]) is None


def test_solve_two_elements_swaps():
    assert solve([2, 1]) == [Operation.SA]


def test_solve_three_reversed():
    assert solve([3, 2, 1]) == [Operation.RA, Operation.SA]


def test_solve_three_max_in_middle():
    assert solve([2, 3, 1]) == [Operation.RRA]


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4, 5, 6, 7]) == []
    assert solve([5]) == []
    assert solve([]) == []


def test_solve_rejects_duplicates():
    with pytest.raises(ValueError):
        solve([1, 2, 2])


@pytest.mark.parametrize("values", list(permutations([10, 20, 30])))
def test_sort_three_all_permutations(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.values_a() == [10, 20, 30]
    assert len(stacks.operations) <= 2


def test_sort_three_rejects_four():
    with pytest.raises(ValueError):
        sort_three(Stacks([4, 3, 2, 1]))


@pytest.mark.parametrize("values", list(permutations([5, 1, 4, 2, 3])))
def test_sort_five_all_permutations(values):
    stacks = Stacks(values)
    sort_five(stacks)
    assert stacks.values_a() == [1, 2, 3, 4, 5]
    assert stacks.values_b() == []
    assert _replay(values, stacks.operations).values_a() == [1, 2, 3, 4, 5]


def test_sort_five_rejects_two():
    with pytest.raises(ValueError):
        sort_five(Stacks([2, 1]))


def test_turk_sort_rejects_four():
    with pytest.raises(ValueError):
        turk_sort(Stacks([4, 1, 3, 2]))


def test_turk_sort_hundred_values():
    values = [(i * 37) % 101 - 50 for i in range(100)]
    stacks = Stacks(values)
    turk_sort(stacks)
    assert stacks.values_a() == sorted(values)
    assert stacks.values_b() == []


def test_solve_handles_int_limits():
    values = [INT_MAX, 0, INT_MIN, -1, 1, 7]
    ops = solve(values)
    assert _replay(values, ops).values_a() == sorted(values)


@settings(max_examples=80, deadline=None)
@given(
    st.lists(
        st.integers(min_value=INT_MIN, max_value=INT_MAX),
        unique=True,
        min_size=1,
        max_size=60,
    )
)
def test_solve_always_sorts(values):
    ops = solve(values)
    stacks = _replay(values, ops)
    assert stacks.values_a() == sorted(values)
    assert stacks.values_b() == []


@settings(max_examples=40, deadline=None)
@given(st.lists(st.integers(-1000, 1000), unique=True, min_size=2, max_size=30))
def test_solve_is_empty_exactly_for_sorted_input(values):
    ops = solve(values)
    assert (ops == []) == (values == sorted(values))