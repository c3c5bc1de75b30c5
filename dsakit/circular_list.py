"""A singly linked circular list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .linked_list import _LinkedSequence, _missing_key, _Node, _ring_from


class CircularLinkedList(_LinkedSequence):
    """A circular singly linked list; the last node links back to the first.

    Key-relative operations act on the first node, from the front, whose value
    equals the key. Removals from an empty list raise IndexError; a missing key
    raises ValueError.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        super().__init__(values)

    def _nodes(self) -> Iterator[_Node]:
        if self._tail is not None:
            yield from _ring_from(self._tail.next)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def insert_front(self, value: Any) -> None:
        """Put value at the start of the list."""
        new = _Node.looped(value)
        if self._tail is None:
            self._tail = new
        else:
            new.next = self._tail.next
            self._tail.next = new
        self._size += 1

    def insert_end(self, value: Any) -> None:
        """Put value at the end of the list."""
        self.insert_front(value)
        self._tail = self._tail.next

    def insert_after(self, value: Any, key: Any) -> None:
        """Put value right after the first node holding key."""
        node = self._find(key)
        new = _Node(value, node.next)
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def insert_before(self, value: Any, key: Any) -> None:
        """Put value right before the first node holding key."""
        prev = self._tail
        for node in self._nodes():
            if node.value == key:
                prev.next = _Node(value, node)
                self._size += 1
                return
            prev = node
        raise _missing_key(key)

    def delete_front(self) -> Any:
        """Remove and return the first value."""
        self._check_not_empty()
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def delete_end(self) -> Any:
        """Remove and return the last value."""
        self._check_not_empty()
        tail = self._tail
        if tail.next is tail:
            self._tail = None
        else:
            prev = tail.next
            while prev.next is not tail:
                prev = prev.next
            prev.next = tail.next
            self._tail = prev
        self._size -= 1
        return tail.value