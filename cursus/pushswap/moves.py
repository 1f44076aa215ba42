"""Choosing and performing the cheapest move from stack b back to stack a."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cursus.pushswap.stacks import Element, Stacks


def assign_positions(stack: Iterable[Element]) -> None:
    """Record each element's distance from the top of its stack."""
    for position, element in enumerate(stack):
        element.pos = position


def lowest_index_position(stack: Sequence[Element]) -> int:
    """Position of the element with the lowest index; IndexError when empty."""
    if not stack:
        raise IndexError("lowest_index_position() on an empty stack")
    assign_positions(stack)
    return min(stack, key=lambda element: element.index).pos


def _target(a: Sequence[Element], b_index: int, fallback: int) -> int:
    larger = [element for element in a if element.index > b_index]
    if larger:
        return min(larger, key=lambda element: element.index).pos
    if a:
        return min(a, key=lambda element: element.index).pos
    return fallback


def target_positions(stacks: Stacks) -> None:
    """For every element of b, find where in a it belongs.

    The target is the element of a with the smallest index above the b
    element's index, or, if there is none, the element of a with the
    smallest index overall.
    """
    assign_positions(stacks.a)
    assign_positions(stacks.b)
    target = 0
    for element in stacks.b:
        target = _target(stacks.a, element.index, target)
        element.target_pos = target


def compute_costs(stacks: Stacks) -> None:
    """Rotations needed to bring each b element and its target to the top.

    Positive costs mean rotating up, negative costs rotating down.
    """
    size_a = len(stacks.a)
    size_b = len(stacks.b)
    for element in stacks.b:
        element.cost_b = element.pos
        if element.pos > size_b // 2:
            element.cost_b = -(size_b - element.pos)
        element.cost_a = element.target_pos
        if element.target_pos > size_a // 2:
            element.cost_a = -(size_a - element.target_pos)


def move(stacks: Stacks, cost_a: int, cost_b: int) -> None:
    """Perform the given rotations, sharing them where possible, then push to a."""
    while cost_a < 0 and cost_b < 0:
        cost_a += 1
        cost_b += 1
        stacks.rrr()
    while cost_a > 0 and cost_b > 0:
        cost_a -= 1
        cost_b -= 1
        stacks.rr()
    while cost_a > 0:
        stacks.ra()
        cost_a -= 1
    while cost_a < 0:
        stacks.rra()
        cost_a += 1
    while cost_b > 0:
        stacks.rb()
        cost_b -= 1
    while cost_b < 0:
        stacks.rrb()
        cost_b += 1
    stacks.pa()


def cheapest_move(stacks: Stacks) -> None:
    """Move the b element with the lowest total cost; IndexError when b is empty."""
    best = None
    best_total = 0
    for element in stacks.b:
        total = abs(element.cost_a) + abs(element.cost_b)
        if best is None or total < best_total:
            best = element
            best_total = total
    if best is None:
        raise IndexError("cheapest_move() with an empty stack b")
    move(stacks, best.cost_a, best.cost_b)