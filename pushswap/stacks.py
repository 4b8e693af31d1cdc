"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, Iterable


class Operation(str, Enum):
    """An instruction of the puzzle; its value is the text that is printed."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Node:
    """One element of a stack, with the bookkeeping the sorter attaches to it."""

    value: int
    index: int = 0
    cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target: Node | None = None


def _swap(stack: Deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)
    return True


def _rotate(stack: Deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: Deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _push(source: Deque[Node], destination: Deque[Node]) -> bool:
    if not source:
        return False
    destination.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its first element.

    Every operation that takes effect is appended to ``operations``.  A
    single-stack operation on a stack with too few elements does nothing and
    is not recorded; the combined operations ``ss``, ``rr`` and ``rrr`` are
    always recorded.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: Deque[Node] = deque(Node(value) for value in values)
        self.b: Deque[Node] = deque()
        self.operations: list[Operation] = []
        self._handlers: dict[Operation, Callable[[], bool]] = {
            Operation.SA: lambda: _swap(self.a),
            Operation.SB: lambda: _swap(self.b),
            Operation.SS: lambda: self._both(_swap),
            Operation.PA: lambda: _push(self.b, self.a),
            Operation.PB: lambda: _push(self.a, self.b),
            Operation.RA: lambda: _rotate(self.a),
            Operation.RB: lambda: _rotate(self.b),
            Operation.RR: lambda: self._both(_rotate),
            Operation.RRA: lambda: _reverse_rotate(self.a),
            Operation.RRB: lambda: _reverse_rotate(self.b),
            Operation.RRR: lambda: self._both(_reverse_rotate),
        }

    def _both(self, action: Callable[[Deque[Node]], bool]) -> bool:
        action(self.a)
        action(self.b)
        return True

    def apply(self, op: Operation | str) -> bool:
        """Perform ``op``; return whether it was carried out and recorded."""
        operation = Operation(op)
        done = self._handlers[operation]()
        if done:
            self.operations.append(operation)
        return done

    def values_a(self) -> list[int]:
        """The values of stack ``a`` from top to bottom."""
        return [node.value for node in self.a]

    def values_b(self) -> list[int]:
        """The values of stack ``b`` from top to bottom."""
        return [node.value for node in self.b]