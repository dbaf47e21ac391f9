"""A singly linked list with index-based access and editing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class SinglyLinkedList:
    """A sequence stored as a chain of nodes, each pointing to the next."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node:
        if not 0 <= index < self._size:
            raise IndexError("out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("out of range")

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def resize(self, size: int, value: Any = None) -> None:
        """Grow with ``value`` at the back, or drop elements from the back, to ``size``."""
        if size < 0:
            raise ValueError("index cannot be negative")
        if size == 0:
            self.clear()
            return
        while self._size < size:
            self.push_back(value)
        while self._size > size:
            self.pop_back()

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the end."""
        new_node = _Node(value)
        if self._head is None:
            self._head = new_node
        else:
            *_, last = self._nodes()
            last.next = new_node
        self._size += 1

    def pop_back(self) -> None:
        """Remove the last element; an empty list is left as it is."""
        if self._size > 0:
            self.remove_at(self._size - 1)

    def push_front(self, value: Any) -> None:
        """Prepend ``value``."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop_front(self) -> None:
        """Remove the first element; an empty list is left as it is."""
        if self._head is not None:
            self._head = self._head.next
            self._size -= 1

    def insert(self, value: Any, index: int) -> None:
        """Place ``value`` at ``index``, first resizing the list to exactly ``index`` elements.

        A list longer than ``index`` is cut down to it, a shorter one is padded
        with ``None``; ``value`` then becomes the element at ``index``.
        """
        if index < 0:
            raise ValueError("index cannot be negative")
        if index == 0:
            self.push_front(value)
            return
        if index != self._size:
            self.resize(index)
        previous = self._node_at(index - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index``; index 0 on an empty list does nothing."""
        if index < 0:
            raise ValueError("index cannot be negative")
        if index == 0:
            self.pop_front()
            return
        if index >= self._size:
            raise IndexError("out of range")
        previous = self._node_at(index - 1)
        assert previous.next is not None
        previous.next = previous.next.next
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).value

    def __setitem__(self, index: int, value: Any) -> None:
        self._node_at(index).value = value

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"