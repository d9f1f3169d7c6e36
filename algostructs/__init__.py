"""Classic data structures: double-ended queue, sorted array, red-black tree, hash set, singly-linked list and trie."""

__version__ = "1.2.0"