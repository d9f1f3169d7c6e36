"""Unordered set of values kept in a chained hash table."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

HashFunc = Callable[[Any], int]
EqualFunc = Callable[[Any, Any], bool]
FreeFunc = Callable[[Any], None]

# Good hash table primes: each roughly double the last and as far as
# possible from the nearest powers of two.
_PRIMES = (
    193, 389, 769, 1543, 3079, 6151, 12289, 24593, 49157, 98317,
    196613, 393241, 786433, 1572869, 3145739, 6291469,
    12582917, 25165843, 50331653, 100663319, 201326611,
    402653189, 805306457, 1610612741,
)


class HashSet:
    """A set of values, each stored at most once.

    ``hash_func(value)`` gives the hash of a value and ``equal_func(a, b)``
    decides whether two values are the same; they default to the built-in
    :func:`hash` and ``==``. A function registered with
    :meth:`register_free_function` is called on each value as it leaves
    the set.
    """

    __slots__ = ("_hash", "_equal", "_free", "_table", "_prime_index", "_count")

    def __init__(
        self,
        hash_func: HashFunc | None = None,
        equal_func: EqualFunc | None = None,
    ) -> None:
        self._hash: HashFunc = hash_func if hash_func is not None else hash
        self._equal: EqualFunc = equal_func if equal_func is not None else operator.eq
        self._free: FreeFunc | None = None
        self._count = 0
        self._prime_index = 0
        self._table: list[list[Any]] = self._new_table()

    @property
    def hash_func(self) -> HashFunc:
        return self._hash

    @property
    def equal_func(self) -> EqualFunc:
        return self._equal

    def _new_table(self) -> list[list[Any]]:
        if self._prime_index < len(_PRIMES):
            size = _PRIMES[self._prime_index]
        else:
            size = self._count * 10
        return [[] for _ in range(size)]

    def _chain(self, value: Any) -> list[Any]:
        return self._table[self._hash(value) % len(self._table)]

    def _enlarge(self) -> None:
        old_table = self._table
        self._prime_index += 1
        self._table = self._new_table()
        for chain in old_table:
            for value in chain:
                self._chain(value).insert(0, value)

    def register_free_function(self, free_func: FreeFunc | None) -> None:
        """Set the function called on values removed from the set."""
        self._free = free_func

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if an equal value is already present."""
        if (self._count * 3) // len(self._table) > 0:
            self._enlarge()
        chain = self._chain(value)
        if any(self._equal(value, existing) for existing in chain):
            return False
        chain.insert(0, value)
        self._count += 1
        return True

    def add(self, value: Any) -> None:
        """Add ``value`` if it is not already present."""
        self.insert(value)

    def remove(self, value: Any) -> bool:
        """Remove the value equal to ``value``; return False if absent."""
        chain = self._chain(value)
        for position, existing in enumerate(chain):
            if self._equal(value, existing):
                del chain[position]
                self._count -= 1
                if self._free is not None:
                    self._free(existing)
                return True
        return False

    def query(self, value: Any) -> bool:
        """Return True if a value equal to ``value`` is in the set."""
        return any(self._equal(value, existing) for existing in self._chain(value))

    def __contains__(self, value: Any) -> bool:
        return self.query(value)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values; removing the current value is safe."""
        for chain in self._table:
            yield from tuple(chain)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"

    def to_array(self) -> list[Any]:
        """Return a list of every value in the set."""
        return list(self)

    def union(self, other: HashSet) -> HashSet:
        """Return a new set of the values in this set or in ``other``."""
        result = HashSet(self._hash, self._equal)
        for value in self:
            result.insert(value)
        for value in other:
            if not result.query(value):
                result.insert(value)
        return result

    def intersection(self, other: HashSet) -> HashSet:
        """Return a new set of the values in both this set and ``other``."""
        result = HashSet(self._hash, other._equal)
        for value in self:
            if other.query(value):
                result.insert(value)
        return result

    def clear(self) -> None:
        """Remove every value, calling the free function on each."""
        table = self._table
        self._table = []
        self._prime_index = 0
        self._count = 0
        if self._free is not None:
            for chain in table:
                for value in chain:
                    self._free(value)
        self._table = self._new_table()

    @classmethod
    def from_values(
        cls,
        values: Iterable[Any],
        hash_func: HashFunc | None = None,
        equal_func: EqualFunc | None = None,
    ) -> HashSet:
        """Build a set holding ``values``."""
        result = cls(hash_func, equal_func)
        for value in values:
            result.insert(value)
        return result