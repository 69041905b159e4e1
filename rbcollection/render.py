"""
Sideways drawing of a tree for debugging. The right subtree is drawn above a
node and the left one below it, so reading the keys from the bottom up gives
them in order. Without the colour codes, 6, 8 and -25 inserted in that order
render as:

             +--8
    --6 ----|
             +---25
"""
from .rbtree import RED
from .settings import ANSI_BLACK, ANSI_RED, ANSI_RESET, RENDER_PADDING


def render(tree):
    lines = []
    _render(tree, tree.root, lines, "", _max_key_len(tree, tree.root))
    return "".join(lines)


def _render(tree, node, lines, path, width):
    """
    `path` holds one letter per level, "R" or "L", for the branches taken
    from the root to reach `node`.
    """
    if node is tree.nil:
        return

    _render(tree, node.right, lines, path + "R", width)

    line = []
    for i in range(len(path)):
        line.append(" " * (width + RENDER_PADDING))
        if i == len(path) - 1:
            line.append("+")
        elif path[i] != path[i + 1]:
            line.append("|")
        else:
            line.append(" ")

    color = ANSI_RED if node.color == RED else ANSI_BLACK
    key = str(node.key)
    line.append(f"--{color}{key}{ANSI_RESET}")

    if node.left is not tree.nil or node.right is not tree.nil:
        line.append(" --")
        line.append("-" * (width - len(key)))
        line.append("|")

    lines.append("".join(line) + "\n")

    _render(tree, node.left, lines, path + "L", width)


def _max_key_len(tree, node):
    if node is tree.nil:
        return 0
    return max(
        len(str(node.key)),
        _max_key_len(tree, node.left),
        _max_key_len(tree, node.right),
    )
