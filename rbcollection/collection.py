import logging
from collections.abc import Collection

from .rbtree import RBTree

logger = logging.getLogger(__name__)


class TreeCollection(Collection):
    """
    Collection interface over an RBTree. Elements are kept sorted either in
    their natural order or by `cmp`, a function returning a negative, zero or
    positive number like the old `cmp` builtin. Equal elements are all kept.

    Passing `items` copies them into the new collection in natural order.
    """

    def __init__(self, items=None, cmp=None):
        if items is not None and cmp is not None:
            raise ValueError("a copied collection is always in natural order")

        if items is not None:
            self.tree = RBTree.from_iterable(items)
        else:
            self.tree = RBTree(cmp=cmp)

    def __len__(self):
        return len(self.tree)

    def __contains__(self, key):
        return self.tree.contains(key)

    def __iter__(self):
        return self.tree.iterator()

    def __str__(self):
        return str(self.tree)

    def __repr__(self):
        return f"TreeCollection({list(self)!r})"

    def add(self, key):
        return self.tree.insert(key)

    def add_all(self, items):
        """
        Adds every element of `items`, stopping at the first one that can't be
        added. Returns False in that case.
        """
        for key in items:
            if not self.add(key):
                return False
        return True

    def remove(self, key):
        return self.tree.delete(key)

    def remove_all(self, items):
        """
        Removes every occurrence of each element of `items`. Returns True if
        the collection changed.
        """
        changed = False
        for key in items:
            while self.remove(key):
                changed = True
        return changed

    def retain_all(self, items):
        keep = list(items)
        changed = False

        iterator = self.tree.iterator()
        for key in iterator:
            if key not in keep:
                iterator.remove()
                changed = True

        return changed

    def clear(self):
        iterator = self.tree.iterator()
        for _ in iterator:
            iterator.remove()
        logger.debug("cleared collection")
