"""Binary trees: traversals, measurements and construction from level order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

EMPTY = -1
"""Marker for a missing child in the input to :func:`build_level_order`."""


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: TreeNode | None) -> list[int]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[int]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[int]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def level_order(root: TreeNode | None) -> list[int]:
    """Values level by level, each level from left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result


def _diameter_and_height(node: TreeNode | None) -> tuple[int, int]:
    if node is None:
        return 0, -1
    left_diameter, left_height = _diameter_and_height(node.left)
    right_diameter, right_height = _diameter_and_height(node.right)
    through = left_height + right_height + 2
    return max(through, left_diameter, right_diameter), max(left_height, right_height) + 1


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _diameter_and_height(root)[0]


def lowest_common_ancestor(root: TreeNode | None, first: int, second: int) -> TreeNode | None:
    """Lowest common ancestor of two values in a binary search tree."""
    node = root
    while node is not None:
        if node.value > first and node.value > second:
            node = node.left
        elif node.value < first and node.value < second:
            node = node.right
        else:
            break
    return node


def _is_empty(value: int | None) -> bool:
    return value is None or value == EMPTY


def build_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from values listed level by level.

    Each node takes the next two values as its left and right children;
    ``-1`` (or None) marks a missing child.  The tree ends where the values do.
    """
    items = iter(values)
    first = next(items, None)
    if _is_empty(first):
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if not _is_empty(value):
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def count_leaves(root: TreeNode | None) -> int:
    """Number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def count_nodes(root: TreeNode | None) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def count_internal(root: TreeNode | None) -> int:
    """Number of nodes with at least one child."""
    if root is None or (root.left is None and root.right is None):
        return 0
    return count_internal(root.left) + count_internal(root.right) + 1


def tree_sum(root: TreeNode | None) -> int:
    """Sum of every value in the tree."""
    if root is None:
        return 0
    return root.value + tree_sum(root.left) + tree_sum(root.right)