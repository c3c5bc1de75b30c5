"""Bounded queues: a linear array queue, a circular queue and a double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when adding to a queue that has no free slot."""


class QueueEmptyError(IndexError):
    """Raised when reading from or removing from an empty queue."""


class _BoundedBuffer:
    """Storage, limits and error reporting shared by the bounded queues."""

    _kind = "queue"

    def __init__(self, capacity: int, minimum: int) -> None:
        if capacity < minimum:
            raise ValueError(f"capacity must be at least {minimum}, got {capacity}")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def _is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def _ensure_items(self) -> None:
        if not self._items:
            raise QueueEmptyError(f"{self._kind} is empty")

    def _add(self, value: Any, at_front: bool = False) -> None:
        if self._is_full():
            raise QueueFullError(f"{self._kind} is full")
        if at_front:
            self._items.appendleft(value)
        else:
            self._items.append(value)

    def _take(self, from_back: bool = False) -> Any:
        self._ensure_items()
        return self._items.pop() if from_back else self._items.popleft()

    def _snapshot(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self)!r})"


class LinearQueue(_BoundedBuffer):
    """A fixed-size array queue whose slots are not reused once dequeued.

    After `capacity` enqueues the queue stays full, even if items were removed.
    """

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity, 0)
        self._front = 0

    def _is_full(self) -> bool:
        return self._front + len(self._items) >= self.capacity

    def enqueue(self, value: Any) -> None:
        """Append value at the rear."""
        self._add(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        value = self._take()
        self._front += 1
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        self._ensure_items()
        return self._items[0]

    def indices(self) -> tuple[int, int]:
        """Return the array positions (front, rear) of the stored values."""
        self._ensure_items()
        return self._front, self._front + len(self._items) - 1

    def __iter__(self) -> Iterator[Any]:
        return self._snapshot()

    def __len__(self) -> int:
        return len(self._items)


class CircularQueue(_BoundedBuffer):
    """A fixed-size FIFO queue whose freed slots are reused."""

    def __init__(self, capacity: int = 2) -> None:
        super().__init__(capacity, 1)

    def enqueue(self, value: Any) -> None:
        """Append value at the rear."""
        self._add(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        return self._take()

    def __iter__(self) -> Iterator[Any]:
        return self._snapshot()

    def __len__(self) -> int:
        return len(self._items)


class BoundedDeque(_BoundedBuffer):
    """A double-ended queue holding at most `capacity` values."""

    _kind = "deque"

    def __init__(self, capacity: int = 5) -> None:
        super().__init__(capacity, 1)

    def push_front(self, value: Any) -> None:
        """Insert value at the front."""
        self._add(value, at_front=True)

    def push_back(self, value: Any) -> None:
        """Insert value at the rear."""
        self._add(value)

    def pop_front(self) -> Any:
        """Remove and return the front value."""
        return self._take()

    def pop_back(self) -> Any:
        """Remove and return the rear value."""
        return self._take(from_back=True)

    def __iter__(self) -> Iterator[Any]:
        return self._snapshot()

    def __len__(self) -> int:
        return len(self._items)