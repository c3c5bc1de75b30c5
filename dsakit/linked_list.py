"""A singly linked list of values with positional and key-relative edits.

Also holds the node type and shared behaviour used by the other linked lists.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any, next: _Node | None = None) -> None:
        self.value = value
        self.next = next
        self.prev: _Node | None = None

    @classmethod
    def looped(cls, value: Any) -> _Node:
        """Return a node whose links point back at itself."""
        node = cls(value)
        node.next = node.prev = node
        return node


def _missing_key(key: Any) -> ValueError:
    return ValueError(f"key {key!r} not found")


def _ring_from(first: _Node, link: str = "next") -> Iterator[_Node]:
    """Walk a ring of nodes once, starting at first and following link."""
    node = first
    while True:
        yield node
        node = getattr(node, link)
        if node is first:
            return


class _LinkedSequence:
    """Behaviour shared by the linked lists: building, sizing and lookup.

    Subclasses set up their anchor before calling this initialiser and provide
    ``_nodes`` and ``insert_end``.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._size = 0
        for value in values:
            self.insert_end(value)

    def _find(self, key: Any) -> _Node:
        for node in self._nodes():
            if node.value == key:
                return node
        raise _missing_key(key)

    def _check_not_empty(self) -> None:
        if not self._size:
            raise IndexError("delete from empty list")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SinglyLinkedList(_LinkedSequence):
    """A singly linked list.

    Key-relative operations act on the first node whose value equals the key.
    Removals from an empty list raise IndexError; a missing key raises ValueError.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        super().__init__(values)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def insert_front(self, value: Any) -> None:
        """Put value at the start of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_end(self, value: Any) -> None:
        """Put value at the end of the list."""
        new = _Node(value)
        if self._head is None:
            self._head = new
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = new
        self._size += 1

    def insert_after(self, value: Any, key: Any) -> None:
        """Put value right after the first node holding key."""
        node = self._find(key)
        node.next = _Node(value, node.next)
        self._size += 1

    def insert_before(self, value: Any, key: Any) -> None:
        """Put value right before the first node holding key."""
        if self._head is not None and self._head.value == key:
            self.insert_front(value)
            return
        for node in self._nodes():
            if node.next is not None and node.next.value == key:
                node.next = _Node(value, node.next)
                self._size += 1
                return
        raise _missing_key(key)

    def delete_front(self) -> Any:
        """Remove and return the first value."""
        self._check_not_empty()
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.value

    def delete_end(self) -> Any:
        """Remove and return the last value."""
        self._check_not_empty()
        if self._head.next is None:
            removed = self._head
            self._head = None
        else:
            prev = self._head
            while prev.next.next is not None:
                prev = prev.next
            removed = prev.next
            prev.next = None
        self._size -= 1
        return removed.value

    def delete_after(self, key: Any) -> Any:
        """Remove and return the value following the first node holding key."""
        self._check_not_empty()
        node = self._find(key)
        removed = node.next
        if removed is None:
            raise ValueError(f"no node after key {key!r}")
        node.next = removed.next
        self._size -= 1
        return removed.value

    def delete_before(self, key: Any) -> Any:
        """Remove and return the value preceding the first node holding key."""
        self._check_not_empty()
        if self._head.value == key:
            raise ValueError(f"no node before key {key!r}")
        before_prev: _Node | None = None
        prev = self._head
        node = prev.next
        while node is not None and node.value != key:
            before_prev, prev, node = prev, node, node.next
        if node is None:
            raise _missing_key(key)
        if before_prev is None:
            self._head = node
        else:
            before_prev.next = node
        self._size -= 1
        return prev.value