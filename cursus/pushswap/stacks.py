"""The two stacks and the operations allowed on them.

The top of each stack is the left end of its deque. Every operation that
takes effect is recorded by name in ``Stacks.operations``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from cursus.pushswap.parsing import INT_MIN


@dataclass(eq=False)
class Element:
    """A value on a stack with the bookkeeping the sorter needs."""

    content: int
    index: int = 0
    pos: int = -1
    target_pos: int = -1
    cost_a: int = -1
    cost_b: int = -1


def is_sorted(elements: Iterable[Element]) -> bool:
    """True when the contents never decrease from top to bottom."""
    contents = [element.content for element in elements]
    return all(a <= b for a, b in zip(contents, contents[1:]))


def assign_index(elements: Iterable[Element]) -> None:
    """Give each element its rank: 1 for the smallest, n for the largest.

    Among equal values the one nearer the top gets the higher rank. Elements
    holding the minimum 32-bit value always get rank 1.
    """
    elements = list(elements)
    for element in elements:
        element.index = 0
    candidates = sorted(
        ((element.content, -position, element)
         for position, element in enumerate(elements)
         if element.content != INT_MIN),
        key=lambda entry: (entry[0], entry[1]),
        reverse=True,
    )
    for rank, (_, _, element) in zip(range(len(elements), 0, -1), candidates):
        element.index = rank
    for element in elements:
        if element.content == INT_MIN:
            element.index = 1


class Stacks:
    """Stack a, filled from ``values`` top first, and an empty stack b."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[Element] = deque(Element(value) for value in values)
        self.b: deque[Element] = deque()
        self.operations: list[str] = []
        assign_index(self.a)

    def __repr__(self) -> str:
        return (f"Stacks(a={[e.content for e in self.a]!r}, "
                f"b={[e.content for e in self.b]!r})")

    @staticmethod
    def _swap(stack: deque[Element]) -> None:
        if len(stack) > 1:
            first, second = stack[0], stack[1]
            first.content, second.content = second.content, first.content
            first.index, second.index = second.index, first.index

    @staticmethod
    def _rotate(stack: deque[Element], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    def _push(self, src: deque[Element], dest: deque[Element], name: str) -> None:
        if not src:
            return
        dest.appendleft(src.popleft())
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self._swap(self.a)
        self.operations.append("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self._swap(self.b)
        self.operations.append("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self.operations.append("ss")

    def pa(self) -> None:
        """Move the top of b onto a; nothing happens when b is empty."""
        self._push(self.b, self.a, "pa")

    def pb(self) -> None:
        """Move the top of a onto b; nothing happens when a is empty."""
        self._push(self.a, self.b, "pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        if self._rotate(self.a, -1):
            self.operations.append("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        if self._rotate(self.b, -1):
            self.operations.append("rb")

    def rr(self) -> None:
        """Rotate both stacks upward."""
        self._rotate(self.a, -1)
        self._rotate(self.b, -1)
        self.operations.append("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        if self._rotate(self.a, 1):
            self.operations.append("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        if self._rotate(self.b, 1):
            self.operations.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downward."""
        self._rotate(self.a, 1)
        self._rotate(self.b, 1)
        self.operations.append("rrr")

    def values_a(self) -> list[int]:
        """The contents of a, top first."""
        return [element.content for element in self.a]