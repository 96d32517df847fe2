"""Stacks of integer nodes and the machine that runs push_swap operations on them."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from itertools import islice
from operator import attrgetter
from typing import Callable, Iterable, Iterator, List, Optional, TextIO


@dataclass(eq=False)
class Node:
    """One element of a stack, with the bookkeeping the sorting algorithm needs."""

    value: int
    index: int = 0
    cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target: Optional["Node"] = None


class Stack:
    """A stack of nodes whose top is the first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def values(self) -> List[int]:
        """Return the values from top to bottom."""
        return [node.value for node in self._nodes]

    def top(self) -> Optional[Node]:
        """Return the top node, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def push(self, node: Node) -> None:
        """Put a node on top of the stack."""
        self._nodes.appendleft(node)

    def pop(self) -> Node:
        """Remove and return the top node."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def swap(self) -> None:
        """Exchange the two top nodes; does nothing with fewer than two."""
        if len(self._nodes) < 2:
            return
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(1)

    def min_node(self) -> Optional[Node]:
        """Return the first node holding the smallest value, or None."""
        return min(self._nodes, key=attrgetter("value"), default=None)

    def max_node(self) -> Optional[Node]:
        """Return the first node holding the largest value, or None."""
        return max(self._nodes, key=attrgetter("value"), default=None)

    def is_sorted(self) -> bool:
        """Tell whether values strictly increase from top to bottom."""
        return all(
            upper.value < lower.value
            for upper, lower in zip(self._nodes, islice(self._nodes, 1, None))
        )

    def set_index(self) -> None:
        """Number the nodes from the top and mark those in the upper half."""
        median = len(self._nodes) // 2
        for position, node in enumerate(self._nodes):
            node.index = position
            node.above_median = position <= median


class Operation(enum.Enum):
    """The instructions a machine understands, valued by their printed name."""

    SA = "sa"
    SB = "sb"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


def _transfer(source: Stack, destination: Stack) -> None:
    if len(source):
        destination.push(source.pop())


_ACTIONS: dict[Operation, Callable[["Machine"], None]] = {
    Operation.SA: lambda m: m.a.swap(),
    Operation.SB: lambda m: m.b.swap(),
    Operation.PA: lambda m: _transfer(m.b, m.a),
    Operation.PB: lambda m: _transfer(m.a, m.b),
    Operation.RA: lambda m: m.a.rotate(),
    Operation.RB: lambda m: m.b.rotate(),
    Operation.RR: lambda m: (m.a.rotate(), m.b.rotate()),
    Operation.RRA: lambda m: m.a.reverse_rotate(),
    Operation.RRB: lambda m: m.b.reverse_rotate(),
    Operation.RRR: lambda m: (m.a.reverse_rotate(), m.b.reverse_rotate()),
}


class Machine:
    """Two stacks, a and b, that change only through named operations."""

    def __init__(self, values: Iterable[int] = (), output: Optional[TextIO] = None) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.output = output
        self.operations: List[Operation] = []

    def apply(self, op: Operation | str) -> None:
        """Carry out one operation, record it and write its name to the output."""
        operation = Operation(op)
        _ACTIONS[operation](self)
        self.operations.append(operation)
        if self.output is not None:
            self.output.write(f"{operation.value}\n")