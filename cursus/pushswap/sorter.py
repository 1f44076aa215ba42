"""Sorting stack a with the fewest operations the strategy can find."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Optional

from cursus.pushswap.moves import (
    cheapest_move,
    compute_costs,
    lowest_index_position,
    target_positions,
)
from cursus.pushswap.parsing import (
    InputError,
    check_input,
    collect_tokens,
    parse_numbers,
)
from cursus.pushswap.stacks import Stacks, is_sorted


def sort_three(stacks: Stacks) -> None:
    """Sort a stack a of three elements in at most two operations."""
    a = stacks.a
    if is_sorted(a):
        return
    highest = max(element.index for element in a)
    if a[0].index == highest:
        stacks.ra()
    elif a[1].index == highest:
        stacks.rra()
    if a[0].index > a[1].index:
        stacks.sa()


def push_all_but_three(stacks: Stacks) -> None:
    """Push elements to b until three remain in a.

    On stacks of more than six, the lower half is pushed first.
    """
    size = len(stacks.a)
    pushed = 0
    checked = 0
    while size > 6 and checked < size and pushed < size // 2:
        if stacks.a[0].index <= size // 2:
            stacks.pb()
            pushed += 1
        else:
            stacks.ra()
        checked += 1
    while size - pushed > 3:
        stacks.pb()
        pushed += 1


def shift_stack(stacks: Stacks) -> None:
    """Rotate a, the shorter way round, until its lowest element is on top."""
    size = len(stacks.a)
    lowest = lowest_index_position(stacks.a)
    if lowest > size // 2:
        for _ in range(size - lowest):
            stacks.rra()
    else:
        for _ in range(lowest):
            stacks.ra()


def sort_large(stacks: Stacks) -> None:
    """Sort a stack a of more than three elements."""
    push_all_but_three(stacks)
    sort_three(stacks)
    while stacks.b:
        target_positions(stacks)
        compute_costs(stacks)
        cheapest_move(stacks)
    if not is_sorted(stacks.a):
        shift_stack(stacks)


def push_swap(values: Iterable[int]) -> list[str]:
    """The operations that sort ``values`` (top first) in ascending order."""
    stacks = Stacks(values)
    size = len(stacks.a)
    if size == 2 and not is_sorted(stacks.a):
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size > 3 and not is_sorted(stacks.a):
        sort_large(stacks)
    return stacks.operations


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        tokens = check_input(collect_tokens(args))
        values = parse_numbers(tokens)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in push_swap(values):
        print(operation)
    return 0