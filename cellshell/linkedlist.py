"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One element of a LinkedList."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert a new node holding ``content`` at the front."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append a new node holding ``content`` at the back."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func(content)`` for each content."""
        return LinkedList(func(content) for content in self)

    def clear(self, release: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to ``release`` if given."""
        node = self.head
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0