"""Singly-linked list: each entry links only to the entry after it."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Any

CompareFunc = Callable[[Any, Any], int]
EqualFunc = Callable[[Any, Any], bool]


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class SListEntry:
    """One entry of a singly-linked list.

    ``data`` is the value stored at the entry and may be reassigned;
    ``next`` is the following entry, or None at the end of the list.
    """

    __slots__ = ("data", "_next")

    def __init__(self, data: Any, next_entry: SListEntry | None = None) -> None:
        self.data = data
        self._next = next_entry

    @property
    def next(self) -> SListEntry | None:
        """The entry after this one, or None at the end of the list."""
        return self._next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


class SListIterator:
    """Iterator over an :class:`SList` that allows removing the current value.

    Calling :meth:`remove` unlinks the value most recently returned by
    ``next()``; iteration then carries on with the value that followed it.
    """

    __slots__ = ("_list", "_prev", "_current")

    def __init__(self, slist: SList) -> None:
        self._list = slist
        self._prev: SListEntry = slist._sentinel
        self._current: SListEntry | None = None

    def _current_is_live(self) -> bool:
        return self._current is not None and self._current is self._prev._next

    def __iter__(self) -> SListIterator:
        return self

    def has_more(self) -> bool:
        """Return True if another value remains to be read."""
        if not self._current_is_live():
            return self._prev._next is not None
        assert self._current is not None
        return self._current._next is not None

    def __next__(self) -> Any:
        if not self._current_is_live():
            self._current = self._prev._next
        else:
            assert self._current is not None
            self._prev = self._current
            self._current = self._current._next
        if self._current is None:
            raise StopIteration
        return self._current.data

    def remove(self) -> None:
        """Remove the value last returned; does nothing if there is none."""
        if not self._current_is_live():
            return
        assert self._current is not None
        self._prev._next = self._current._next
        self._current._next = None
        self._current = None
        self._list._length -= 1


class SList:
    """A singly-linked list of values."""

    __slots__ = ("_sentinel", "_length")

    def __init__(self, values: Iterable[Any] = ()) -> None:
        """Create a list holding ``values`` in order."""
        self._sentinel = SListEntry(None)
        self._length = 0
        tail = self._sentinel
        for value in values:
            tail._next = SListEntry(value)
            tail = tail._next
            self._length += 1

    @property
    def head(self) -> SListEntry | None:
        """The first entry, or None if the list is empty."""
        return self._sentinel._next

    def _entries(self) -> Iterator[SListEntry]:
        entry = self._sentinel._next
        while entry is not None:
            yield entry
            entry = entry._next

    def _last(self) -> SListEntry:
        last = self._sentinel
        while last._next is not None:
            last = last._next
        return last

    def prepend(self, value: Any) -> SListEntry:
        """Add ``value`` at the start of the list and return its entry."""
        entry = SListEntry(value, self._sentinel._next)
        self._sentinel._next = entry
        self._length += 1
        return entry

    def append(self, value: Any) -> SListEntry:
        """Add ``value`` at the end of the list and return its entry."""
        entry = SListEntry(value)
        self._last()._next = entry
        self._length += 1
        return entry

    def nth_entry(self, n: int) -> SListEntry:
        """Return the entry at index ``n``.

        Raises IndexError if ``n`` is out of range.
        """
        if n < 0:
            raise IndexError(f"list index {n} out of range")
        for index, entry in enumerate(self._entries()):
            if index == n:
                return entry
        raise IndexError(f"list index {n} out of range")

    def nth_data(self, n: int) -> Any:
        """Return the value at index ``n``.

        Raises IndexError if ``n`` is out of range.
        """
        return self.nth_entry(n).data

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values from first to last."""
        for entry in self._entries():
            yield entry.data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"

    def to_array(self) -> list[Any]:
        """Return a list of all values, in order."""
        return list(self)

    def remove_entry(self, entry: SListEntry) -> None:
        """Unlink ``entry`` from the list.

        Raises ValueError if the entry is not in this list.
        """
        prev = self._sentinel
        while prev._next is not None:
            if prev._next is entry:
                prev._next = entry._next
                entry._next = None
                self._length -= 1
                return
            prev = prev._next
        raise ValueError("entry is not in the list")

    def remove_data(self, value: Any, equal: EqualFunc | None = None) -> int:
        """Remove every value equal to ``value``; return how many went."""
        is_equal = equal if equal is not None else operator.eq
        removed = 0
        prev = self._sentinel
        while prev._next is not None:
            entry = prev._next
            if is_equal(entry.data, value):
                prev._next = entry._next
                entry._next = None
                removed += 1
            else:
                prev = entry
        self._length -= removed
        return removed

    def sort(self, compare: CompareFunc | None = None) -> None:
        """Sort the list in place, keeping its entry objects."""
        cmp = compare if compare is not None else _natural_compare
        ordered = sorted(
            self._entries(), key=cmp_to_key(lambda a, b: cmp(a.data, b.data))
        )
        tail = self._sentinel
        for entry in ordered:
            tail._next = entry
            tail = entry
        tail._next = None

    def find_data(self, value: Any, equal: EqualFunc | None = None) -> SListEntry | None:
        """Return the first entry whose value equals ``value``, or None."""
        is_equal = equal if equal is not None else operator.eq
        for entry in self._entries():
            if is_equal(entry.data, value):
                return entry
        return None

    def iterate(self) -> SListIterator:
        """Return an iterator that can remove values as it goes."""
        return SListIterator(self)

    def clear(self) -> None:
        """Remove every value."""
        self._sentinel._next = None
        self._length = 0