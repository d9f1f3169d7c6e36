"""Double-ended queue: values can be added and removed at either end."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class Queue:
    """A double-ended queue that can act as a FIFO or a stack.

    The head is the front of the queue and the tail is the back. Popping or
    peeking at an empty queue raises :class:`IndexError`.
    """

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        """Create a queue holding ``values``, the first at the head."""
        self._items: deque[Any] = deque(values)

    def push_head(self, value: Any) -> None:
        """Add ``value`` at the head of the queue."""
        self._items.appendleft(value)

    def pop_head(self) -> Any:
        """Remove and return the value at the head of the queue."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def peek_head(self) -> Any:
        """Return the value at the head of the queue without removing it."""
        if not self._items:
            raise IndexError("peek into an empty queue")
        return self._items[0]

    def push_tail(self, value: Any) -> None:
        """Add ``value`` at the tail of the queue."""
        self._items.append(value)

    def pop_tail(self) -> Any:
        """Remove and return the value at the tail of the queue."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.pop()

    def peek_tail(self) -> Any:
        """Return the value at the tail of the queue without removing it."""
        if not self._items:
            raise IndexError("peek into an empty queue")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values from head to tail."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"