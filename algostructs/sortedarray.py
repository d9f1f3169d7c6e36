"""An array that keeps its values in sorted order as they are inserted."""

from __future__ import annotations

import bisect
import operator
from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Any

CompareFunc = Callable[[Any, Any], int]
EqualFunc = Callable[[Any, Any], bool]


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class SortedArray:
    """A resizing array whose values are always in sorted order.

    ``compare(a, b)`` returns a negative number, zero or a positive number
    when ``a`` sorts before, level with, or after ``b``. ``equal(a, b)``
    decides whether two values are the same value; it is used by
    :meth:`index_of` among values that compare level. Both default to the
    values' own ordering and equality.
    """

    __slots__ = ("_data", "_compare", "_equal", "_key")

    def __init__(
        self,
        compare: CompareFunc | None = None,
        equal: EqualFunc | None = None,
        values: Iterable[Any] = (),
    ) -> None:
        self._compare: CompareFunc = compare if compare is not None else _natural_compare
        self._equal: EqualFunc = equal if equal is not None else operator.eq
        self._key = cmp_to_key(self._compare)
        self._data: list[Any] = []
        for value in values:
            self.insert(value)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def _bounds(self, value: Any) -> tuple[int, int]:
        probe = self._key(value)
        low = bisect.bisect_left(self._data, probe, key=self._key)
        high = bisect.bisect_right(self._data, probe, lo=low, key=self._key)
        return low, high

    def insert(self, value: Any) -> int:
        """Insert ``value`` in its sorted place and return its index."""
        index = bisect.bisect_left(self._data, self._key(value), key=self._key)
        self._data.insert(index, value)
        return index

    def remove(self, index: int) -> None:
        """Remove the value at ``index``."""
        self.remove_range(index, 1)

    def remove_range(self, index: int, length: int) -> None:
        """Remove ``length`` values starting at ``index``.

        Raises IndexError if the range does not lie within the array.
        """
        if index < 0 or length < 0 or index + length > len(self._data):
            raise IndexError(
                f"range [{index}, {index + length}) out of bounds for "
                f"length {len(self._data)}"
            )
        del self._data[index:index + length]

    def index_of(self, value: Any) -> int:
        """Return the index of a value equal to ``value``.

        Raises ValueError if no such value is in the array.
        """
        low, high = self._bounds(value)
        for index in range(low, high):
            if self._equal(value, self._data[index]):
                return index
        raise ValueError(f"{value!r} is not in the sorted array")

    def __contains__(self, value: Any) -> bool:
        try:
            self.index_of(value)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        """Remove all values."""
        self._data.clear()