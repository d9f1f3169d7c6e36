# algostructs

A small collection of classic data structures for Python 3.10 and later.
It needs nothing outside the standard library.

## Contents

| Module                    | Classes and functions                                    | What it is                                              |
|---------------------------|----------------------------------------------------------|---------------------------------------------------------|
| `algostructs.queue`       | `Queue`                                                  | Double-ended queue: push, pop and peek at either end    |
| `algostructs.sortedarray` | `SortedArray`                                            | List that keeps its values in order as they are inserted |
| `algostructs.rbtree`      | `RBTree`, `RBTreeNode`, `NodeColor`, `NodeSide`, `subtree_height` | Red-black balanced binary search tree          |
| `algostructs.hashset`     | `HashSet`                                                | Chained hash set with optional custom hash and equality |
| `algostructs.slist`       | `SList`, `SListEntry`, `SListIterator`                   | Singly-linked list with an iterator that can remove values |
| `algostructs.trie`        | `Trie`                                                   | Mapping from text or byte-string keys to values         |

Wherever a class takes a compare function, `compare(a, b)` returns a
negative number, zero or a positive number when `a` sorts before, level
with, or after `b`. If none is given, the values' own `<` and `>` are used.
Equality functions default to `==`, and `HashSet` hashes with `hash`.

## Installation

```
pip install algostructs
```

To run the tests:

```
pip install "algostructs[test]"
pytest
```

## Queue

```python
from algostructs.queue import Queue

q = Queue([1, 2])       # 1 at the head, 2 at the tail
q.push_head(0)
q.push_tail(3)
q.pop_head()            # 0
q.peek_tail()           # 3
q.pop_tail()            # 3
list(q)                 # [1, 2], head to tail
len(q), q.is_empty()    # (2, False)
```

`pop_head`, `pop_tail`, `peek_head` and `peek_tail` raise `IndexError` on
an empty queue.

## SortedArray

```python
from algostructs.sortedarray import SortedArray

arr = SortedArray(values=[5, 1, 3])
list(arr)               # [1, 3, 5]
arr.insert(4)           # 2, the index it went in at
arr.index_of(3)         # 1
arr[0]                  # 1
arr.remove(0)
arr.remove_range(0, 2)
list(arr)               # [5]
arr.clear()
```

The constructor is `SortedArray(compare=None, equal=None, values=())`.
`index_of` searches among the values that compare level with the one given
and returns the first for which `equal` holds; it raises `ValueError` if
there is none. `remove` and `remove_range` raise `IndexError` for a range
that does not lie within the array. `in` is supported.

## RBTree

```python
from algostructs.rbtree import NodeSide, RBTree, subtree_height

tree = RBTree()
for key in (1, 2, 3):
    tree.insert(key, str(key))

tree.lookup(2)                      # "2"
2 in tree                           # True
root = tree.root_node
root.key, root.value, root.color    # (2, "2", NodeColor.BLACK)
root.child(NodeSide.LEFT).key       # 1
subtree_height(root)                # 2
tree.remove(1)                      # True
tree.to_array()                     # [2, 3], keys in order
len(tree)                           # 2
```

`insert(key, value=None)` returns the new `RBTreeNode`; keys that compare
equal may be inserted more than once. `lookup` raises `KeyError` for a
missing key, while `lookup_node` returns `None`. `remove(key)` returns
`False` if the key is absent; `remove_node(node)` unlinks a given node.
The tree stays balanced through both insertion and removal.
`RBTreeNode.child(side)` returns `None` for a side that is neither left
nor right; nodes also have `left`, `right` and `parent`.

## HashSet

```python
from algostructs.hashset import HashSet

s = HashSet()
s.insert("a")           # True
s.insert("a")           # False: already present
s.insert("b")
"a" in s                # True

t = HashSet.from_values(["b", "c"])
sorted(s.union(t))          # ["a", "b", "c"]
sorted(s.intersection(t))   # ["b"]

s.register_free_function(print)
s.remove("a")           # True; prints "a"
s.clear()               # prints "b"
```

The constructor is `HashSet(hash_func=None, equal_func=None)`. A function
given to `register_free_function` is called on each value as it leaves the
set, by `remove` or `clear`. Iterating over a set visits its values in no
particular order, and removing the current value while iterating is safe.
`to_array` returns the values as a list; `add` is `insert` without the
result.

## SList

```python
from algostructs.slist import SList

lst = SList([3, 1, 2, 1])
lst.prepend(0)
lst.append(4)
lst.nth_data(1)         # 3
lst.remove_data(1)      # 2, the number removed
lst.sort()
lst.to_array()          # [0, 2, 3, 4]

entry = lst.find_data(3)
entry.data = 30
lst.remove_entry(lst.head)

it = lst.iterate()
for value in it:
    if value == 30:
        it.remove()
lst.to_array()          # [2, 4]
```

`prepend` and `append` return the new `SListEntry`. `nth_entry` and
`nth_data` raise `IndexError` out of range; `remove_entry` raises
`ValueError` for an entry not in the list; `find_data` returns `None` when
nothing matches. `remove_data`, `find_data` and `sort` take an optional
equality or compare function. The iterator from `iterate()` also offers
`has_more()`; after `remove()` it carries on with the value that followed.

## Trie

```python
from algostructs.trie import Trie

trie = Trie()
trie.insert("hello", 1)
trie.insert_binary(b"\x00\x01", 2)
trie["hello"]                       # 1
trie.lookup_binary(b"\x00\x01")     # 2
trie.lookup("missing")              # None
trie["world"] = 3
del trie["world"]
trie.remove("hello")                # True
len(trie)                           # 1
list(trie)                          # [b"\x00\x01"]
```

Text keys are encoded as UTF-8 and end at their first NUL character, so a
text key and the byte string it encodes to are the same key. Binary keys
may hold any bytes. `None` cannot be stored: inserting it raises
`ValueError`. `trie[key]` and `del trie[key]` raise `KeyError` for a
missing key. Iterating yields the stored keys as byte strings in byte
order.

## What it does not do

This is a library only: it has no command-line tool, and none of its
structures are persistent or safe for use from several threads at once.