"""Sorting strategies that solve the puzzle with the stack operations."""

from __future__ import annotations

from itertools import pairwise
from typing import Deque, Iterable

from pushswap.stacks import Node, Operation, Stacks


def is_sorted(nodes: Iterable[Node]) -> bool:
    """Whether the nodes are in ascending order; an empty stack is not sorted."""
    values = [node.value for node in nodes]
    if not values:
        return False
    return all(first <= second for first, second in pairwise(values))


def find_min(nodes: Iterable[Node]) -> Node | None:
    """The first node holding the smallest value, or None when empty."""
    return min(nodes, key=lambda node: node.value, default=None)


def find_max(nodes: Iterable[Node]) -> Node | None:
    """The first node holding the largest value, or None when empty."""
    return max(nodes, key=lambda node: node.value, default=None)


def _set_index(stack: Deque[Node]) -> None:
    size = len(stack)
    median = size // 2
    for index, node in enumerate(stack):
        node.index = index
        node.above_median = index <= median
        node.cost = index if node.above_median else size - index


def _set_targets_a(a: Deque[Node], b: Deque[Node]) -> None:
    for node in a:
        smaller = [candidate for candidate in b if candidate.value < node.value]
        node.target = find_max(smaller) if smaller else find_max(b)


def _analyse_costs_a(a: Deque[Node], b: Deque[Node]) -> None:
    size_a = len(a)
    size_b = len(b)
    for node in a:
        node.cost = node.index if node.above_median else size_a - node.index
        target = node.target
        node.cost += target.index if target.above_median else size_b - target.index


def _set_cheapest(stack: Deque[Node]) -> None:
    if not stack:
        return
    for node in stack:
        node.cheapest = False
    min(stack, key=lambda node: node.cost).cheapest = True


def _prepare_a(a: Deque[Node], b: Deque[Node]) -> None:
    _set_index(a)
    _set_index(b)
    _set_targets_a(a, b)
    _analyse_costs_a(a, b)
    _set_cheapest(a)


def _prepare_b(a: Deque[Node], b: Deque[Node]) -> None:
    _set_index(a)
    _set_index(b)
    top = b[0]
    larger = [candidate for candidate in a if candidate.value > top.value]
    top.target = find_min(larger) if larger else find_min(a)


def _rotate_to_top(
    stacks: Stacks,
    stack: Deque[Node],
    target: Node,
    forward: Operation,
    backward: Operation,
) -> None:
    while stack[0] is not target:
        stacks.apply(forward if target.above_median else backward)


def _rotate_both(stacks: Stacks, cheapest: Node) -> None:
    a, b = stacks.a, stacks.b
    target = cheapest.target
    while a[0] is not cheapest and b[0] is not target:
        if cheapest.above_median and target.above_median:
            stacks.apply(Operation.RR)
        elif not cheapest.above_median and not target.above_median:
            stacks.apply(Operation.RRR)
        else:
            break
    _set_index(a)
    _set_index(b)


def _bring_cheapest_up(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    cheapest = next(node for node in a if node.cheapest)
    if a[0] is not cheapest and b[0] is not cheapest.target:
        _rotate_both(stacks, cheapest)
    _rotate_to_top(stacks, a, cheapest, Operation.RA, Operation.RRA)
    _rotate_to_top(stacks, b, cheapest.target, Operation.RB, Operation.RRB)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most three elements in place."""
    a = stacks.a
    if len(a) > 3:
        raise ValueError("sort_three handles at most three elements")
    if len(a) < 2:
        return
    if len(a) == 2:
        stacks.apply(Operation.SA)
        return
    largest = find_max(a)
    if a[0].value == largest.value:
        stacks.apply(Operation.RA)
    elif a[1].value == largest.value:
        stacks.apply(Operation.RRA)
    if a[0].value > a[1].value:
        stacks.apply(Operation.SA)


def sort_five(stacks: Stacks) -> None:
    """Sort ``a`` by pushing its minima to ``b`` until three remain."""
    a = stacks.a
    if len(a) < 3:
        raise ValueError("sort_five needs at least three elements")
    while len(a) != 3:
        smallest = find_min(a)
        position = a.index(smallest)
        while position <= 3 and a[0] is not smallest:
            stacks.apply(Operation.RA)
        while position > 3 and a[0] is not smallest:
            stacks.apply(Operation.RRA)
        stacks.apply(Operation.PB)
    sort_three(stacks)
    while stacks.b:
        stacks.apply(Operation.PA)


def turk_sort(stacks: Stacks) -> None:
    """Sort ``a`` by cheapest-move insertion through ``b``."""
    a, b = stacks.a, stacks.b
    if len(a) < 5:
        raise ValueError("turk_sort needs at least five elements")
    stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)
    while len(a) != 3:
        _prepare_a(a, b)
        _bring_cheapest_up(stacks)
        stacks.apply(Operation.PB)
    sort_three(stacks)
    while b:
        _prepare_b(a, b)
        _rotate_to_top(stacks, a, b[0].target, Operation.RA, Operation.RRA)
        stacks.apply(Operation.PA)
    _set_index(a)
    _rotate_to_top(stacks, a, find_min(a), Operation.RA, Operation.RRA)


def solve(values: Iterable[int]) -> list[Operation]:
    """The operations that sort ``values``, chosen by the size of the input."""
    numbers = list(values)
    if len(set(numbers)) != len(numbers):
        raise ValueError("values must be distinct")
    stacks = Stacks(numbers)
    if numbers and not is_sorted(stacks.a):
        if len(numbers) <= 3:
            sort_three(stacks)
        elif len(numbers) <= 5:
            sort_five(stacks)
        else:
            turk_sort(stacks)
    return stacks.operations