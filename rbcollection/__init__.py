"""
An ordered collection backed by a red black tree. It basically works like so:

- Elements are kept in a binary search tree ordered either by their natural
  order or by a comparison function given when the collection is created.
- Each node is coloured red or black. After every insert or delete the tree is
  recoloured and rotated so that no red node has a red child and every path
  from a node down to a leaf crosses the same number of black nodes. This
  keeps the height under 2 * log2(n + 1), so insert, delete and lookup are
  O(log n).
- Equal elements are all kept, each in its own node. This is a sorted bag
  rather than a set.
- Iteration walks the nodes in order from the minimum through successors. The
  iterator can remove the element it just returned without losing its place.

LIMITS:
  None can't be stored.
  Not thread safe. Mutating the tree while iterating, other than through the
  iterator's own `remove`, is undefined.
"""
from .collection import TreeCollection
from .rbtree import BLACK, RED, IteratorStateError, RBTree, RBTreeIterator

__all__ = [
    "BLACK",
    "RED",
    "IteratorStateError",
    "RBTree",
    "RBTreeIterator",
    "TreeCollection",
]
