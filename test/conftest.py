import pytest

from rbcollection.rbtree import BLACK, RED


def black_height(tree, node):
    """
    Walks the subtree at `node` asserting the red black properties and
    returns its black height.
    """
    if node is tree.nil:
        return 1

    assert node.color in (RED, BLACK)
    if node.color == RED:
        assert node.left.color == BLACK, f"red {node.key!r} has a red left child"
        assert node.right.color == BLACK, f"red {node.key!r} has a red right child"

    for child in (node.left, node.right):
        if child is not tree.nil:
            assert child.parent is node, f"bad parent link under {node.key!r}"

    if node.left is not tree.nil:
        assert tree.cmp(node.left.key, node.key) <= 0
    if node.right is not tree.nil:
        assert tree.cmp(node.right.key, node.key) >= 0

    left = black_height(tree, node.left)
    right = black_height(tree, node.right)
    assert left == right, f"black height mismatch under {node.key!r}"

    return left + (1 if node.color == BLACK else 0)


def count_nodes(tree, node):
    if node is tree.nil:
        return 0
    return 1 + count_nodes(tree, node.left) + count_nodes(tree, node.right)


def height(tree, node):
    if node is tree.nil:
        return 0
    return 1 + max(height(tree, node.left), height(tree, node.right))


def in_order(tree, node, keys):
    if node is tree.nil:
        return
    in_order(tree, node.left, keys)
    keys.append(node.key)
    in_order(tree, node.right, keys)


def _check(tree):
    assert tree.nil.color == BLACK
    assert tree.root.color == BLACK
    if tree.root is not tree.nil:
        assert tree.root.parent is tree.nil

    black_height(tree, tree.root)
    assert count_nodes(tree, tree.root) == len(tree)

    keys = []
    in_order(tree, tree.root, keys)
    for a, b in zip(keys, keys[1:]):
        assert tree.cmp(a, b) <= 0


@pytest.fixture
def check_invariants():
    return _check


@pytest.fixture
def tree_height():
    return lambda tree: height(tree, tree.root)
