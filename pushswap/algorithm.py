"""The cost-driven sort that produces push_swap instructions."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, List

from pushswap.parsing import INT_MAX, INT_MIN
from pushswap.stack import Machine, Node, Operation, Stack


def sort_three(machine: Machine) -> None:
    """Sort stack a when it holds exactly three values."""
    a = machine.a
    biggest = a.max_node()
    first, second = islice(a, 2)
    if first is biggest:
        machine.apply(Operation.RA)
    elif second is biggest:
        machine.apply(Operation.RRA)
    first, second = islice(a, 2)
    if first.value > second.value:
        machine.apply(Operation.SA)


def tiny_sort(machine: Machine) -> None:
    """Handle a stack a of two or three values; larger stacks are left alone.

    Two values are always swapped, whatever their order.
    """
    size = len(machine.a)
    if size == 2:
        machine.apply(Operation.SA)
    elif size == 3:
        sort_three(machine)


def find_target_a(a: Stack, b: Stack) -> None:
    """Point every node of a at the closest smaller node of b, else at b's maximum."""
    for node in a:
        closest_smaller = INT_MIN
        target = None
        for candidate in b:
            if node.value > candidate.value > closest_smaller:
                closest_smaller = candidate.value
                target = candidate
        node.target = b.max_node() if closest_smaller == INT_MIN else target


def find_cost_a(a: Stack, b: Stack) -> None:
    """Count the rotations each node of a and its target need to reach the top."""
    len_a, len_b = len(a), len(b)
    for node in a:
        node.cost = node.index if node.above_median else len_a - node.index
        target = node.target
        if target.above_median:
            node.cost += target.index
        else:
            node.cost += len_b - target.index


def find_cheapest(stack: Stack) -> None:
    """Flag the first node with the lowest cost as the cheapest."""
    cheapest_value = INT_MAX
    cheapest = None
    for node in stack:
        if node.cost < cheapest_value:
            cheapest_value = node.cost
            cheapest = node
    if cheapest is None:
        return
    for node in stack:
        node.cheapest = node is cheapest


def find_target_b(a: Stack, b: Stack) -> None:
    """Point every node of b at the closest bigger node of a, else at a's minimum."""
    for node in b:
        closest_bigger = INT_MAX
        target = None
        for candidate in a:
            if node.value < candidate.value < closest_bigger:
                closest_bigger = candidate.value
                target = candidate
        node.target = a.min_node() if closest_bigger == INT_MAX else target


def rotate_both(machine: Machine, node: Node) -> None:
    """Rotate both stacks together until node or its target is on top."""
    while machine.a.top() is not node and machine.b.top() is not node.target:
        machine.apply(Operation.RR)
    machine.a.set_index()
    machine.b.set_index()


def reverse_rotate_both(machine: Machine, node: Node) -> None:
    """Reverse-rotate both stacks together until node or its target is on top."""
    while machine.a.top() is not node and machine.b.top() is not node.target:
        machine.apply(Operation.RRR)
    machine.a.set_index()
    machine.b.set_index()


_ROTATIONS = {
    "a": (Operation.RA, Operation.RRA),
    "b": (Operation.RB, Operation.RRB),
}


def move_on_top(machine: Machine, node: Node, name: str) -> None:
    """Rotate the named stack until node is on top, in the direction its half suggests."""
    if name not in _ROTATIONS:
        raise ValueError(f"unknown stack name: {name!r}")
    stack = machine.a if name == "a" else machine.b
    forward, backward = _ROTATIONS[name]
    while stack.top() is not node:
        machine.apply(forward if node.above_median else backward)


def min_on_top(machine: Machine) -> None:
    """Rotate stack a until its smallest value is on top."""
    a = machine.a
    if not len(a):
        return
    while a.top().value != a.min_node().value:
        machine.apply(Operation.RA if a.min_node().above_median else Operation.RRA)


def _get_cheapest(stack: Stack) -> Node:
    return next(node for node in stack if node.cheapest)


def _prep_nodes_a(machine: Machine) -> None:
    machine.a.set_index()
    machine.b.set_index()
    find_target_a(machine.a, machine.b)
    find_cost_a(machine.a, machine.b)
    find_cheapest(machine.a)


def _prep_nodes_b(machine: Machine) -> None:
    machine.a.set_index()
    machine.b.set_index()
    find_target_b(machine.a, machine.b)


def move_a_to_b(machine: Machine) -> None:
    """Bring the cheapest node of a and its target to the tops and push it onto b."""
    cheapest = _get_cheapest(machine.a)
    if cheapest.above_median and cheapest.target.above_median:
        rotate_both(machine, cheapest)
    elif not cheapest.above_median and not cheapest.target.above_median:
        reverse_rotate_both(machine, cheapest)
    move_on_top(machine, cheapest, "a")
    move_on_top(machine, cheapest.target, "b")
    machine.apply(Operation.PB)


def move_b_to_a(machine: Machine) -> None:
    """Bring the target of b's top node to the top of a and push onto a."""
    move_on_top(machine, machine.b.top().target, "a")
    machine.apply(Operation.PA)


def sort_stacks(machine: Machine) -> None:
    """Sort stack a in ascending order from the top, leaving b empty."""
    a = machine.a
    for _ in range(2):
        if len(a) > 3 and not a.is_sorted():
            machine.apply(Operation.PB)
    while len(a) > 3 and not a.is_sorted():
        _prep_nodes_a(machine)
        move_a_to_b(machine)
    tiny_sort(machine)
    while len(machine.b):
        _prep_nodes_b(machine)
        move_b_to_a(machine)
    a.set_index()
    min_on_top(machine)


def push_swap(values: Iterable[int]) -> List[Operation]:
    """Return the operations that sort the given values."""
    machine = Machine(values)
    sort_stacks(machine)
    return list(machine.operations)