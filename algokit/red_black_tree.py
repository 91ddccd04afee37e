"""Red-black tree of comparable values, duplicates allowed."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any


class _Color(Enum):
    RED = 0
    BLACK = 1


class _Node:
    __slots__ = ("value", "color", "left", "right", "parent")

    def __init__(self, value: Any = 0, color: _Color = _Color.RED) -> None:
        self.value = value
        self.color = color
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent: _Node | None = None

    @property
    def grandparent(self) -> _Node | None:
        return None if self.parent is None else self.parent.parent

    @property
    def uncle(self) -> _Node | None:
        grandparent = self.grandparent
        if grandparent is None:
            return None
        return grandparent.left if self.parent is grandparent.right else grandparent.right

    @property
    def sibling(self) -> _Node:
        parent = self.parent
        return parent.right if parent.left is self else parent.left


class RedBlackTree:
    """Self-balancing binary search tree.

    Equal values are placed in the left subtree, so a value may be stored
    more than once; ``delete`` removes one occurrence.
    """

    def __init__(self) -> None:
        self._nil = _Node(color=_Color.BLACK)
        self._root: _Node | None = None

    def _new_node(self, value: Any, parent: _Node | None) -> _Node:
        node = _Node(value)
        node.left = node.right = self._nil
        node.parent = parent
        return node

    def _rotate_right(self, node: _Node) -> None:
        grandparent = node.grandparent
        parent = node.parent
        moved = node.right
        parent.left = moved
        if moved is not self._nil:
            moved.parent = parent
        node.right = parent
        parent.parent = node
        if self._root is parent:
            self._root = node
        node.parent = grandparent
        if grandparent is not None:
            if grandparent.left is parent:
                grandparent.left = node
            else:
                grandparent.right = node

    def _rotate_left(self, node: _Node) -> None:
        if node.parent is None:
            self._root = node
            return
        grandparent = node.grandparent
        parent = node.parent
        moved = node.left
        parent.right = moved
        if moved is not self._nil:
            moved.parent = parent
        node.left = parent
        parent.parent = node
        if self._root is parent:
            self._root = node
        node.parent = grandparent
        if grandparent is not None:
            if grandparent.left is parent:
                grandparent.left = node
            else:
                grandparent.right = node

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        if self._root is None:
            self._root = self._new_node(value, None)
            self._root.color = _Color.BLACK
            return
        node = self._root
        while True:
            if node.value >= value:
                if node.left is not self._nil:
                    node = node.left
                    continue
                child = self._new_node(value, node)
                node.left = child
            else:
                if node.right is not self._nil:
                    node = node.right
                    continue
                child = self._new_node(value, node)
                node.right = child
            self._fix_insert(child)
            return

    def _fix_insert(self, node: _Node) -> None:
        while True:
            if node.parent is None:
                self._root = node
                node.color = _Color.BLACK
                return
            if node.parent.color is not _Color.RED:
                return
            uncle = node.uncle
            if uncle.color is _Color.RED:
                node.parent.color = uncle.color = _Color.BLACK
                grandparent = node.grandparent
                grandparent.color = _Color.RED
                node = grandparent
                continue
            parent, grandparent = node.parent, node.grandparent
            if node is parent.right and parent is grandparent.left:
                self._rotate_left(node)
                self._rotate_right(node)
                node.color = _Color.BLACK
                node.left.color = node.right.color = _Color.RED
            elif node is parent.left and parent is grandparent.right:
                self._rotate_right(node)
                self._rotate_left(node)
                node.color = _Color.BLACK
                node.left.color = node.right.color = _Color.RED
            elif node is parent.left:
                parent.color = _Color.BLACK
                grandparent.color = _Color.RED
                self._rotate_right(parent)
            else:
                parent.color = _Color.BLACK
                grandparent.color = _Color.RED
                self._rotate_left(parent)
            return

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of ``value``; return False if it is absent."""
        node = self._root
        if node is None:
            return False
        while True:
            if node.value > value:
                if node.left is self._nil:
                    return False
                node = node.left
            elif node.value < value:
                if node.right is self._nil:
                    return False
                node = node.right
            elif node.value == value:
                if node.right is self._nil:
                    self._delete_one_child(node)
                    return True
                smallest = node.right
                while smallest.left is not self._nil:
                    smallest = smallest.left
                node.value, smallest.value = smallest.value, node.value
                self._delete_one_child(smallest)
                return True
            else:
                return False

    def _delete_one_child(self, node: _Node) -> None:
        nil = self._nil
        child = node.right if node.left is nil else node.left
        if node.parent is None and node.left is nil and node.right is nil:
            self._root = None
            return
        if node.parent is None:
            child.parent = None
            self._root = child
            child.color = _Color.BLACK
            return
        if node.parent.left is node:
            node.parent.left = child
        else:
            node.parent.right = child
        child.parent = node.parent
        if node.color is _Color.BLACK:
            if child.color is _Color.RED:
                child.color = _Color.BLACK
            else:
                self._fix_delete(child)

    def _fix_delete(self, node: _Node) -> None:
        black, red = _Color.BLACK, _Color.RED
        while True:
            if node.parent is None:
                node.color = black
                return
            sibling = node.sibling
            if sibling.color is red:
                node.parent.color = red
                sibling.color = black
                if node is node.parent.left:
                    self._rotate_left(sibling)
                else:
                    self._rotate_right(sibling)
            sibling = node.sibling
            children_black = sibling.left.color is black and sibling.right.color is black
            if node.parent.color is black and sibling.color is black and children_black:
                sibling.color = red
                node = node.parent
                continue
            if node.parent.color is red and sibling.color is black and children_black:
                sibling.color = red
                node.parent.color = black
                return
            if sibling.color is black:
                if (
                    node is node.parent.left
                    and sibling.left.color is red
                    and sibling.right.color is black
                ):
                    sibling.color = red
                    sibling.left.color = black
                    self._rotate_right(sibling.left)
                elif (
                    node is node.parent.right
                    and sibling.left.color is black
                    and sibling.right.color is red
                ):
                    sibling.color = red
                    sibling.right.color = black
                    self._rotate_left(sibling.right)
            sibling = node.sibling
            sibling.color = node.parent.color
            node.parent.color = black
            if node is node.parent.left:
                sibling.right.color = black
                self._rotate_left(sibling)
            else:
                sibling.left.color = black
                self._rotate_right(sibling)
            return

    def inorder(self) -> list[Any]:
        """All stored values in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or (node is not None and node is not self._nil):
            while node is not None and node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right