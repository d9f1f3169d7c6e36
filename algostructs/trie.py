"""Trie: fast mapping from strings or byte strings to values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Union

Key = Union[str, bytes, bytearray, memoryview]


class _Node:
    __slots__ = ("data", "use_count", "children")

    def __init__(self) -> None:
        self.data: Any = None
        self.use_count = 0
        self.children: dict[int, _Node] = {}


def _text_key(key: str) -> bytes:
    """Encode a text key as UTF-8, ending it at the first NUL character."""
    if not isinstance(key, str):
        raise TypeError(f"text key must be str, not {type(key).__name__}")
    return key.split("\0", 1)[0].encode("utf-8")


def _binary_key(key: bytes | bytearray | memoryview) -> bytes:
    if isinstance(key, str):
        raise TypeError("binary key must be bytes-like, not str")
    return bytes(key)


def _any_key(key: Key) -> bytes:
    return _text_key(key) if isinstance(key, str) else _binary_key(key)


class Trie:
    """A mapping from keys to values, stored one byte per level.

    Text keys are encoded as UTF-8 and end at their first NUL character, so
    a text key and the byte string it encodes to are the same key. Binary
    keys may hold any bytes, NUL included. ``None`` cannot be stored as a
    value, as it stands for absence.
    """

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root: _Node | None = None

    def _find_end(self, key: bytes) -> _Node | None:
        node = self._root
        for byte in key:
            if node is None:
                return None
            node = node.children.get(byte)
        return node

    def _insert(self, key: bytes, value: Any) -> None:
        if value is None:
            raise ValueError("cannot store None in a trie")

        end = self._find_end(key)
        if end is not None and end.data is not None:
            end.data = value
            return

        if self._root is None:
            self._root = _Node()
        node = self._root
        node.use_count += 1
        for byte in key:
            child = node.children.get(byte)
            if child is None:
                child = node.children[byte] = _Node()
            child.use_count += 1
            node = child
        node.data = value

    def _lookup(self, key: bytes) -> Any:
        node = self._find_end(key)
        return None if node is None else node.data

    def _remove(self, key: bytes) -> bool:
        end = self._find_end(key)
        if end is None or end.data is None:
            return False
        end.data = None

        node = self._root
        parent: _Node | None = None
        link = 0
        position = 0
        while node is not None:
            node.use_count -= 1
            if node.use_count <= 0:
                # Everything below this node belonged only to the removed key.
                if parent is None:
                    self._root = None
                else:
                    del parent.children[link]
                break
            if position == len(key):
                break
            parent, link = node, key[position]
            node = node.children.get(link)
            position += 1
        return True

    def insert(self, key: str, value: Any) -> None:
        """Map the text ``key`` to ``value``, replacing any earlier value.

        Raises ValueError if ``value`` is None.
        """
        self._insert(_text_key(key), value)

    def insert_binary(self, key: bytes | bytearray | memoryview, value: Any) -> None:
        """Map the byte string ``key`` to ``value``, replacing any earlier value.

        Raises ValueError if ``value`` is None.
        """
        self._insert(_binary_key(key), value)

    def lookup(self, key: str) -> Any:
        """Return the value for the text ``key``, or None if absent."""
        return self._lookup(_text_key(key))

    def lookup_binary(self, key: bytes | bytearray | memoryview) -> Any:
        """Return the value for the byte string ``key``, or None if absent."""
        return self._lookup(_binary_key(key))

    def remove(self, key: str) -> bool:
        """Remove the text ``key``; return False if it was not present."""
        return self._remove(_text_key(key))

    def remove_binary(self, key: bytes | bytearray | memoryview) -> bool:
        """Remove the byte string ``key``; return False if it was not present."""
        return self._remove(_binary_key(key))

    def __len__(self) -> int:
        return 0 if self._root is None else self._root.use_count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes, bytearray, memoryview)):
            return False
        return self._lookup(_any_key(key)) is not None

    def __getitem__(self, key: Key) -> Any:
        value = self._lookup(_any_key(key))
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: Key, value: Any) -> None:
        self._insert(_any_key(key), value)

    def __delitem__(self, key: Key) -> None:
        if not self._remove(_any_key(key)):
            raise KeyError(key)

    def __iter__(self) -> Iterator[bytes]:
        """Iterate over the stored keys as byte strings, in byte order."""
        if self._root is None:
            return
        stack: list[tuple[bytes, _Node]] = [(b"", self._root)]
        while stack:
            prefix, node = stack.pop()
            if node.data is not None:
                yield prefix
            for byte in sorted(node.children, reverse=True):
                stack.append((prefix + bytes((byte,)), node.children[byte]))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"