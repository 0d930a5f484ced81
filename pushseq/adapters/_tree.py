"""
Persistent AVL tree
===================

Неизменяемое сбалансированное дерево для OrderedSet / OrderedMap.

Insert copies only the path from the root to the new node, O(log n); every
older root stays valid and shares the untouched subtrees.
"""

from __future__ import annotations

import typing
from collections.abc import Iterator

from .._types import Compare


class Node[K, V]:
    __slots__ = ("key", "value", "left", "right", "height", "size")

    def __init__(self, left: Node[K, V] | None, key: K, value: V, right: Node[K, V] | None) -> None:
        self.key = key
        self.value = value
        self.left = left
        self.right = right
        self.height = max(height(left), height(right)) + 1
        self.size = size(left) + size(right) + 1


def height(node: Node[typing.Any, typing.Any] | None) -> int:
    return 0 if node is None else node.height


def size(node: Node[typing.Any, typing.Any] | None) -> int:
    return 0 if node is None else node.size


def _balance[K, V](left: Node[K, V] | None, key: K, value: V, right: Node[K, V] | None) -> Node[K, V]:
    hl, hr = height(left), height(right)
    if hl > hr + 1:
        assert left is not None
        if height(left.left) >= height(left.right):
            return Node(left.left, left.key, left.value, Node(left.right, key, value, right))
        pivot = left.right
        assert pivot is not None
        return Node(
            Node(left.left, left.key, left.value, pivot.left),
            pivot.key,
            pivot.value,
            Node(pivot.right, key, value, right),
        )
    if hr > hl + 1:
        assert right is not None
        if height(right.right) >= height(right.left):
            return Node(Node(left, key, value, right.left), right.key, right.value, right.right)
        pivot = right.left
        assert pivot is not None
        return Node(
            Node(left, key, value, pivot.left),
            pivot.key,
            pivot.value,
            Node(pivot.right, right.key, right.value, right.right),
        )
    return Node(left, key, value, right)


def insert[K, V](
    node: Node[K, V] | None,
    key: K,
    value: V,
    compare: Compare[K],
    *,
    replace: bool,
) -> Node[K, V]:
    """
    Tree with `key` bound to `value`.

    An equal key (compare == 0) keeps its stored key; its value is replaced
    when `replace` is set. Returns `node` itself when nothing changes.
    """
    if node is None:
        return Node(None, key, value, None)
    c = compare(key, node.key)
    if c == 0:
        if not replace or node.value is value:
            return node
        return Node(node.left, node.key, value, node.right)
    if c < 0:
        left = insert(node.left, key, value, compare, replace=replace)
        if left is node.left:
            return node
        return _balance(left, node.key, node.value, node.right)
    right = insert(node.right, key, value, compare, replace=replace)
    if right is node.right:
        return node
    return _balance(node.left, node.key, node.value, right)


def lookup[K, V](node: Node[K, V] | None, key: K, compare: Compare[K]) -> Node[K, V] | None:
    while node is not None:
        c = compare(key, node.key)
        if c == 0:
            return node
        node = node.left if c < 0 else node.right
    return None


def walk[K, V](node: Node[K, V] | None) -> Iterator[Node[K, V]]:
    """In-order (ascending) nodes, with an explicit stack."""
    stack: list[Node[K, V]] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


__all__ = ("Node", "height", "insert", "lookup", "size", "walk")
