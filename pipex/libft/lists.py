"""A singly linked list of arbitrary contents."""

from __future__ import annotations

import copy as _copy
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        tail = self.last()
        if tail is None:
            return self.push_front(content)
        node = Node(content)
        tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each non-None content to ``delete``."""
        for node in list(self._nodes()):
            if delete is not None and node.content is not None:
                delete(node.content)
            node.next = None
        self.head = None

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list of ``func(content)`` for each content.

        Raises ValueError if ``func`` yields None for any element.
        """
        result = LinkedList()
        for content in self:
            value = func(content)
            if value is None:
                raise ValueError("mapping function produced no value")
            result.push_back(value)
        return result

    def copy(self) -> "LinkedList":
        """A new list holding copies of each content."""
        return LinkedList(_copy.copy(content) for content in self)