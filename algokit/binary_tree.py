"""Binary tree nodes and the classic recursive queries over them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; ``None`` stands for the empty tree."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _require(node: TreeNode | None) -> TreeNode:
    if node is None:
        raise ValueError("operation needs a non-empty tree")
    return node


def leaf_count(node: TreeNode | None) -> int:
    """Number of nodes that have no children."""
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return leaf_count(node.left) + leaf_count(node.right)


def depth(node: TreeNode | None) -> int:
    """Height of the tree; the empty tree has depth 0."""
    if node is None:
        return 0
    return max(depth(node.left), depth(node.right)) + 1


def _levels_from(node: TreeNode | None, level: int) -> Iterator[tuple[Any, int]]:
    if node is None:
        return
    yield node.data, level
    yield from _levels_from(node.left, level + 1)
    yield from _levels_from(node.right, level + 1)


def levels(node: TreeNode | None) -> Iterator[tuple[Any, int]]:
    """Yield ``(data, level)`` pairs in pre-order, the root being level 1."""
    return _levels_from(node, 1)


def break_tree(node: TreeNode | None) -> tuple[TreeNode | None, TreeNode | None]:
    """Detach both subtrees of ``node`` and return them as ``(left, right)``."""
    node = _require(node)
    left, right = node.left, node.right
    node.left = None
    node.right = None
    return left, right


def replace_left(node: TreeNode | None, subtree: TreeNode | None) -> TreeNode | None:
    """Install ``subtree`` as the left child and return the previous one."""
    node = _require(node)
    previous, node.left = node.left, subtree
    return previous


def replace_right(node: TreeNode | None, subtree: TreeNode | None) -> TreeNode | None:
    """Install ``subtree`` as the right child and return the previous one."""
    node = _require(node)
    previous, node.right = node.right, subtree
    return previous


def bst_search(root: TreeNode | None, key: Any) -> tuple[bool, TreeNode | None]:
    """Search a binary search tree keyed on ``data``.

    Returns ``(True, node)`` for the matching node, otherwise ``(False, last)``
    where ``last`` is the final node visited on the search path (``None`` for
    an empty tree).
    """
    parent: TreeNode | None = None
    node = root
    while node is not None:
        if key == node.data:
            return True, node
        parent = node
        node = node.left if key < node.data else node.right
    return False, parent