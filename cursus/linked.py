"""A singly linked list of arbitrary items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: an item and the node that follows it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list holding items in insertion order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    def append(self, item: Any) -> None:
        """Add ``item`` at the end."""
        node = Node(item)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, item: Any) -> None:
        """Add ``item`` at the front."""
        self.head = Node(item, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Any:
        """The last item; IndexError when the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first item, pass it to ``delete`` if given, and return it."""
        if self.head is None:
            raise IndexError("pop_front() on an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every item, passing each to ``delete`` if given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None
        self._tail = None
        self._size = 0

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every item in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """A new list of ``func(item)`` for every item.

        If ``func`` raises, the items built so far are cleared with ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result