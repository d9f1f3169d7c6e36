"""Red-black tree: a balanced binary search tree mapping keys to values."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

CompareFunc = Callable[[Any, Any], int]


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class NodeColor(enum.Enum):
    """Each node in a red-black tree is either red or black."""

    RED = "red"
    BLACK = "black"


class NodeSide(enum.IntEnum):
    """The side of a node on which a child hangs."""

    LEFT = 0
    RIGHT = 1


_LEFT = int(NodeSide.LEFT)
_RIGHT = int(NodeSide.RIGHT)


@dataclass(eq=False)
class RBTreeNode:
    """A node of a red-black tree, holding one key and its value."""

    key: Any
    value: Any
    color: NodeColor = NodeColor.RED
    parent: RBTreeNode | None = field(default=None, repr=False)
    children: list[RBTreeNode | None] = field(
        default_factory=lambda: [None, None], repr=False
    )

    def child(self, side: NodeSide | int) -> RBTreeNode | None:
        """Return the child on ``side``, or None if there is none.

        A side that is neither left nor right also gives None.
        """
        try:
            index = int(NodeSide(side))
        except ValueError:
            return None
        return self.children[index]

    @property
    def left(self) -> RBTreeNode | None:
        return self.children[_LEFT]

    @property
    def right(self) -> RBTreeNode | None:
        return self.children[_RIGHT]


def _color(node: RBTreeNode | None) -> NodeColor:
    """Color of a node; absent leaves count as black."""
    return NodeColor.BLACK if node is None else node.color


def _side(node: RBTreeNode) -> int:
    """Which side of its parent ``node`` hangs on."""
    assert node.parent is not None
    return _LEFT if node.parent.children[_LEFT] is node else _RIGHT


def subtree_height(node: RBTreeNode | None) -> int:
    """Return the height of the subtree rooted at ``node`` (0 for None)."""
    if node is None:
        return 0
    return 1 + max(subtree_height(node.children[_LEFT]),
                   subtree_height(node.children[_RIGHT]))


class RBTree:
    """A red-black tree ordered by its keys.

    ``compare(a, b)`` returns a negative number, zero or a positive number
    when key ``a`` sorts before, level with, or after key ``b``; it defaults
    to the keys' natural ordering. Keys that compare equal may be inserted
    more than once.
    """

    def __init__(self, compare: CompareFunc | None = None) -> None:
        self._compare: CompareFunc = compare if compare is not None else _natural_compare
        self._root: RBTreeNode | None = None
        self._count = 0

    @property
    def root_node(self) -> RBTreeNode | None:
        """The root node, or None if the tree is empty."""
        return self._root

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: Any) -> bool:
        return self.lookup_node(key) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"

    # Structural helpers

    def _replace(self, old: RBTreeNode, new: RBTreeNode | None) -> None:
        """Put ``new`` in the place ``old`` occupies under its parent."""
        if new is not None:
            new.parent = old.parent
        if old.parent is None:
            self._root = new
        else:
            old.parent.children[_side(old)] = new

    def _rotate(self, node: RBTreeNode, direction: int) -> RBTreeNode:
        """Rotate the section topped by ``node`` left or right."""
        new_root = node.children[1 - direction]
        assert new_root is not None
        self._replace(node, new_root)
        node.children[1 - direction] = new_root.children[direction]
        new_root.children[direction] = node
        node.parent = new_root
        moved = node.children[1 - direction]
        if moved is not None:
            moved.parent = node
        return new_root

    # Insertion

    def insert(self, key: Any, value: Any = None) -> RBTreeNode:
        """Insert a key-value pair and return the new node."""
        node = RBTreeNode(key, value)
        parent: RBTreeNode | None = None
        rover = self._root
        side = _LEFT
        while rover is not None:
            parent = rover
            side = _LEFT if self._compare(key, rover.key) < 0 else _RIGHT
            rover = rover.children[side]

        node.parent = parent
        if parent is None:
            self._root = node
        else:
            parent.children[side] = node

        self._rebalance_after_insert(node)
        self._count += 1
        return node

    def _rebalance_after_insert(self, node: RBTreeNode) -> None:
        while True:
            parent = node.parent
            if parent is None:
                node.color = NodeColor.BLACK
                return
            if parent.color is NodeColor.BLACK:
                return

            grandparent = parent.parent
            assert grandparent is not None
            uncle = grandparent.children[1 - _side(parent)]

            if _color(uncle) is NodeColor.RED:
                assert uncle is not None
                parent.color = NodeColor.BLACK
                uncle.color = NodeColor.BLACK
                grandparent.color = NodeColor.RED
                node = grandparent
                continue

            side = _side(node)
            if side != _side(parent):
                self._rotate(parent, 1 - side)
                node = parent

            parent = node.parent
            assert parent is not None
            grandparent = parent.parent
            assert grandparent is not None
            self._rotate(grandparent, 1 - _side(node))
            parent.color = NodeColor.BLACK
            grandparent.color = NodeColor.RED
            return

    # Lookup

    def lookup_node(self, key: Any) -> RBTreeNode | None:
        """Return the node holding ``key``, or None if there is none."""
        node = self._root
        while node is not None:
            diff = self._compare(key, node.key)
            if diff == 0:
                return node
            node = node.children[_LEFT if diff < 0 else _RIGHT]
        return None

    def lookup(self, key: Any) -> Any:
        """Return the value stored for ``key``.

        Raises KeyError if the key is not in the tree.
        """
        node = self.lookup_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    # Removal

    def remove(self, key: Any) -> bool:
        """Remove a node holding ``key``; return False if there was none."""
        node = self.lookup_node(key)
        if node is None:
            return False
        self.remove_node(node)
        return True

    def remove_node(self, node: RBTreeNode) -> None:
        """Unlink ``node`` from the tree, keeping the tree balanced."""
        removed_color = node.color
        if node.children[_LEFT] is None:
            x = node.children[_RIGHT]
            x_parent = node.parent
            self._replace(node, x)
        elif node.children[_RIGHT] is None:
            x = node.children[_LEFT]
            x_parent = node.parent
            self._replace(node, x)
        else:
            successor = node.children[_RIGHT]
            assert successor is not None
            while successor.children[_LEFT] is not None:
                successor = successor.children[_LEFT]
            removed_color = successor.color
            x = successor.children[_RIGHT]
            if successor.parent is node:
                x_parent = successor
            else:
                x_parent = successor.parent
                self._replace(successor, x)
                successor.children[_RIGHT] = node.children[_RIGHT]
                successor.children[_RIGHT].parent = successor
            self._replace(node, successor)
            successor.children[_LEFT] = node.children[_LEFT]
            successor.children[_LEFT].parent = successor
            successor.color = node.color

        node.parent = None
        node.children = [None, None]
        self._count -= 1

        if removed_color is NodeColor.BLACK:
            self._rebalance_after_remove(x, x_parent)

    def _rebalance_after_remove(
        self, x: RBTreeNode | None, parent: RBTreeNode | None
    ) -> None:
        while x is not self._root and _color(x) is NodeColor.BLACK:
            assert parent is not None
            side = _LEFT if parent.children[_LEFT] is x else _RIGHT
            other = 1 - side
            sibling = parent.children[other]
            assert sibling is not None

            if sibling.color is NodeColor.RED:
                sibling.color = NodeColor.BLACK
                parent.color = NodeColor.RED
                self._rotate(parent, side)
                sibling = parent.children[other]
                assert sibling is not None

            if (_color(sibling.children[_LEFT]) is NodeColor.BLACK
                    and _color(sibling.children[_RIGHT]) is NodeColor.BLACK):
                sibling.color = NodeColor.RED
                x = parent
                parent = x.parent
                continue

            if _color(sibling.children[other]) is NodeColor.BLACK:
                near = sibling.children[side]
                assert near is not None
                near.color = NodeColor.BLACK
                sibling.color = NodeColor.RED
                self._rotate(sibling, other)
                sibling = parent.children[other]
                assert sibling is not None

            sibling.color = parent.color
            parent.color = NodeColor.BLACK
            far = sibling.children[other]
            assert far is not None
            far.color = NodeColor.BLACK
            self._rotate(parent, side)
            x = self._root
            break

        if x is not None:
            x.color = NodeColor.BLACK

    # Conversion

    def to_array(self) -> list[Any]:
        """Return all keys in the tree, in order."""
        keys: list[Any] = []
        stack: list[RBTreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.children[_LEFT]
            node = stack.pop()
            keys.append(node.key)
            node = node.children[_RIGHT]
        return keys