"""A circular doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .linked_list import _LinkedSequence, _Node, _ring_from


def _link_before(new: _Node, anchor: _Node) -> None:
    new.prev = anchor.prev
    new.next = anchor
    anchor.prev.next = new
    anchor.prev = new


def _unlink(node: _Node) -> None:
    node.prev.next = node.next
    node.next.prev = node.prev


class DoublyLinkedList(_LinkedSequence):
    """A circular doubly linked list that can be walked in both directions.

    Key-relative operations act on the first node, from the front, whose value
    equals the key. Removals from an empty list raise IndexError; a missing key
    raises ValueError.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        super().__init__(values)

    def _nodes(self) -> Iterator[_Node]:
        if self._head is not None:
            yield from _ring_from(self._head)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def insert_front(self, value: Any) -> None:
        """Put value at the start of the list."""
        self.insert_end(value)
        self._head = self._head.prev

    def insert_end(self, value: Any) -> None:
        """Put value at the end of the list."""
        new = _Node.looped(value)
        if self._head is None:
            self._head = new
        else:
            _link_before(new, self._head)
        self._size += 1

    def insert_after(self, value: Any, key: Any) -> None:
        """Put value right after the first node holding key."""
        node = self._find(key)
        _link_before(_Node.looped(value), node.next)
        self._size += 1

    def insert_before(self, value: Any, key: Any) -> None:
        """Put value right before the first node holding key."""
        node = self._find(key)
        new = _Node.looped(value)
        _link_before(new, node)
        if node is self._head:
            self._head = new
        self._size += 1

    def delete_front(self) -> Any:
        """Remove and return the first value."""
        self._check_not_empty()
        head = self._head
        if head.next is head:
            self._head = None
        else:
            _unlink(head)
            self._head = head.next
        self._size -= 1
        return head.value

    def delete_end(self) -> Any:
        """Remove and return the last value."""
        self._check_not_empty()
        tail = self._head.prev
        if tail is self._head:
            self._head = None
        else:
            _unlink(tail)
        self._size -= 1
        return tail.value

    def __reversed__(self) -> Iterator[Any]:
        if self._head is None:
            return iter(())
        return (node.value for node in _ring_from(self._head.prev, "prev"))