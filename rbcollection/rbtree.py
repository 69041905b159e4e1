"""
Red black tree following the algorithm from Cormen et al., Introduction to
Algorithms (CLRS), with parent links and a single shared sentinel leaf.

Unlike a mapping, the tree keeps duplicates: a key that compares equal to one
already stored is inserted as another node to the right of it. Deletion of a
node with two children moves the successor's key into that node and unlinks
the successor's node instead, so nodes should never be held across a delete.
"""
import logging
import weakref

RED = True
BLACK = False

logger = logging.getLogger(__name__)


class IteratorStateError(Exception):
    pass


def natural_order(a, b):
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class Node:
    def __init__(self, key, color=RED, nil=None):
        self.key = key
        self.color = color
        self.left = nil
        self.right = nil
        self._parent = None
        if nil is not None:
            self.parent = nil

    @property
    def parent(self):
        # children own the tree downwards, parents are only weakly referenced
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = weakref.ref(node)

    def __repr__(self):
        color = "R" if self.color == RED else "B"
        return f"<Node {color} {self.key!r}>"


class RBTree:
    def __init__(self, cmp=None):
        self.nil = Node(None, color=BLACK)
        self.nil.left = self.nil.right = self.nil
        self.nil.parent = self.nil
        self.root = self.nil
        self.cmp = cmp if cmp is not None else natural_order
        self._size = 0

    @classmethod
    def from_iterable(cls, items):
        """
        Copy constructor: builds a tree in natural order holding every element
        of `items`.
        """
        tree = cls()
        for key in items:
            tree.insert(key)
        return tree

    def __len__(self):
        return self._size

    def size(self):
        return self._size

    def __contains__(self, key):
        return self.contains(key)

    def contains(self, key):
        if key is None:
            return False
        return self.search(key) is not self.nil

    def __iter__(self):
        return self.iterator()

    def iterator(self):
        return RBTreeIterator(self)

    def __str__(self):
        from .render import render

        return render(self)

    def __repr__(self):
        return f"RBTree({list(self)!r})"

    def search(self, key):
        """
        Returns the first node found top-down whose key compares equal to
        `key`, or the sentinel when there is none.
        """
        current = self.root

        while current is not self.nil:
            order = self.cmp(key, current.key)
            if order == 0:
                return current
            if order < 0:
                current = current.left
            else:
                current = current.right

        return self.nil

    def minimum(self):
        if self.root is self.nil:
            raise KeyError("minimum of an empty tree")
        return self.subtree_minimum(self.root).key

    def subtree_minimum(self, node):
        while node.left is not self.nil:
            node = node.left
        return node

    def maximum(self):
        if self.root is self.nil:
            raise KeyError("maximum of an empty tree")

        node = self.root
        while node.right is not self.nil:
            node = node.right
        return node.key

    def successor(self, node):
        if node.right is not self.nil:
            return self.subtree_minimum(node.right)

        parent = node.parent
        while parent is not self.nil and node is parent.right:
            node = parent
            parent = parent.parent
        return parent

    def _rotate_left(self, old_root):
        """
        Rotates the root of a subtree so that it's right child
        is the new root and the old root becomes the left child.
        """
        new_root = old_root.right
        old_root.right = new_root.left
        if new_root.left is not self.nil:
            new_root.left.parent = old_root

        new_root.parent = old_root.parent
        if old_root.parent is self.nil:
            self.root = new_root
        elif old_root is old_root.parent.left:
            old_root.parent.left = new_root
        else:
            old_root.parent.right = new_root

        new_root.left = old_root
        old_root.parent = new_root

    def _rotate_right(self, old_root):
        """
        Inverse of `_rotate_left`.
        """
        new_root = old_root.left
        old_root.left = new_root.right
        if new_root.right is not self.nil:
            new_root.right.parent = old_root

        new_root.parent = old_root.parent
        if old_root.parent is self.nil:
            self.root = new_root
        elif old_root is old_root.parent.right:
            old_root.parent.right = new_root
        else:
            old_root.parent.left = new_root

        new_root.right = old_root
        old_root.parent = new_root

    def insert(self, key):
        if key is None:
            logger.debug("rejected insert of None")
            return False

        parent = self.nil
        current = self.root
        # equal keys descend to the right so duplicates follow their equals
        while current is not self.nil:
            parent = current
            if self.cmp(key, current.key) < 0:
                current = current.left
            else:
                current = current.right

        node = Node(key, color=RED, nil=self.nil)
        node.parent = parent
        if parent is self.nil:
            self.root = node
        elif self.cmp(key, parent.key) < 0:
            parent.left = node
        else:
            parent.right = node

        self._size += 1
        self._fix_insert(node)
        return True

    def _fix_insert(self, node):
        while node.parent.color == RED:
            parent = node.parent
            grandparent = parent.parent

            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color == RED:
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    node = grandparent
                    continue

                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                node.parent.color = BLACK
                node.parent.parent.color = RED
                self._rotate_right(node.parent.parent)
            else:
                uncle = grandparent.left
                if uncle.color == RED:
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    node = grandparent
                    continue

                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                node.parent.color = BLACK
                node.parent.parent.color = RED
                self._rotate_left(node.parent.parent)

        self.root.color = BLACK

    def delete(self, key):
        if key is None:
            return False

        node = self.search(key)
        if node is self.nil:
            logger.debug("delete of missing key %r", key)
            return False

        self._delete_node(node)
        return True

    def _delete_node(self, node):
        """
        Unlinks `node` from the tree and returns the node now holding the key
        that followed it in order (the sentinel if it was the last one).

        When `node` has two children its successor's key is copied into it and
        the successor's node is unlinked instead, so the returned node is
        `node` itself in that case.
        """
        if node.left is self.nil or node.right is self.nil:
            spliced = node
            following = self.successor(node)
        else:
            spliced = self.successor(node)
            following = node

        if spliced.left is not self.nil:
            child = spliced.left
        else:
            child = spliced.right

        # the sentinel's parent is set here too so the fixup can climb from it
        child.parent = spliced.parent
        if spliced.parent is self.nil:
            self.root = child
        elif spliced is spliced.parent.left:
            spliced.parent.left = child
        else:
            spliced.parent.right = child

        if spliced is not node:
            node.key = spliced.key

        self._size -= 1

        if spliced.color == BLACK:
            self._fix_delete(child)

        return following

    def _fix_delete(self, node):
        while node is not self.root and node.color == BLACK:
            parent = node.parent

            if node is parent.left:
                sibling = parent.right
                if sibling.color == RED:
                    sibling.color = BLACK
                    parent.color = RED
                    self._rotate_left(parent)
                    sibling = parent.right

                if sibling.left.color == BLACK and sibling.right.color == BLACK:
                    sibling.color = RED
                    node = parent
                    continue

                if sibling.right.color == BLACK:
                    sibling.left.color = BLACK
                    sibling.color = RED
                    self._rotate_right(sibling)
                    sibling = parent.right

                sibling.color = parent.color
                parent.color = BLACK
                sibling.right.color = BLACK
                self._rotate_left(parent)
                node = self.root
            else:
                sibling = parent.left
                if sibling.color == RED:
                    sibling.color = BLACK
                    parent.color = RED
                    self._rotate_right(parent)
                    sibling = parent.left

                if sibling.right.color == BLACK and sibling.left.color == BLACK:
                    sibling.color = RED
                    node = parent
                    continue

                if sibling.left.color == BLACK:
                    sibling.right.color = BLACK
                    sibling.color = RED
                    self._rotate_left(sibling)
                    sibling = parent.left

                sibling.color = parent.color
                parent.color = BLACK
                sibling.left.color = BLACK
                self._rotate_right(parent)
                node = self.root

        node.color = BLACK


class RBTreeIterator:
    """
    One-shot in-order cursor over a tree. `pending` is the next node to yield
    and `current` the last one yielded, which `remove` deletes from the tree.
    """

    def __init__(self, tree):
        self.tree = tree
        self.current = tree.nil
        if tree.root is tree.nil:
            self.pending = tree.nil
        else:
            self.pending = tree.subtree_minimum(tree.root)

    def __iter__(self):
        return self

    def has_next(self):
        return self.pending is not self.tree.nil

    def __next__(self):
        if not self.has_next():
            raise StopIteration

        self.current = self.pending
        self.pending = self.tree.successor(self.pending)
        return self.current.key

    def next(self):
        return self.__next__()

    def remove(self):
        if self.current is self.tree.nil:
            raise IteratorStateError("remove() called without a preceding next()")

        logger.debug("iterator removing %r", self.current.key)
        self.pending = self.tree._delete_node(self.current)
        self.current = self.tree.nil
