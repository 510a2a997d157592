"""Problems on binary trees and binary search trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NO_DIFFERENCE = 2**31 - 1
"""Returned by :func:`get_minimum_difference` for trees of fewer than two nodes."""


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from its level-order listing, ``None`` marking gaps.

    Children are given for each present node in turn, left before right.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def in_order(root: TreeNode | None) -> Iterator[int]:
    """Yield the values of the tree in in-order sequence."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the ``k``-th value (1-based) of a search tree in in-order."""
    values = list(in_order(root))
    if not 1 <= k <= len(values):
        raise IndexError(f"k must be between 1 and {len(values)}, got {k}")
    return values[k - 1]


def get_minimum_difference(root: TreeNode | None) -> int:
    """Return the smallest absolute difference between in-order neighbours.

    A tree with fewer than two nodes gives :data:`NO_DIFFERENCE`.
    """
    values = list(in_order(root))
    return min(
        (abs(b - a) for a, b in zip(values, values[1:])),
        default=NO_DIFFERENCE,
    )


def _balanced_height(node: TreeNode | None) -> int | None:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
    diameter = 0

    def height(node: TreeNode | None) -> int:
        nonlocal diameter
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        diameter = max(diameter, left + right)
        return 1 + max(left, right)

    height(root)
    return diameter


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == target_sum
    rest = target_sum - root.val
    return has_path_sum(root.left, rest) or has_path_sum(root.right, rest)


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def is_valid_bst(root: TreeNode | None) -> bool:
    """Tell whether the in-order values never decrease."""
    values = list(in_order(root))
    return all(a <= b for a, b in zip(values, values[1:]))


def lowest_common_ancestor(root: TreeNode | None, p: TreeNode, q: TreeNode) -> TreeNode:
    """Return the lowest node of a search tree that has both ``p`` and ``q``
    beneath it or is one of them."""
    node = root
    while node is not None:
        if node is p or node is q:
            return node
        if (p.val < node.val < q.val) or (q.val < node.val < p.val):
            return node
        if p.val > node.val and q.val > node.val:
            node = node.right
        else:
            node = node.left
    raise ValueError("nodes are not both in the tree")


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def is_subtree(root: TreeNode | None, sub_root: TreeNode | None) -> bool:
    """Tell whether ``sub_root`` equals some whole subtree of ``root``."""
    if is_same_tree(root, sub_root):
        return True
    return root is not None and (
        is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)
    )


def _is_mirror(a: TreeNode | None, b: TreeNode | None) -> bool:
    if a is None or b is None:
        return a is b
    return a.val == b.val and _is_mirror(a.left, b.right) and _is_mirror(a.right, b.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    return root is None or _is_mirror(root.left, root.right)


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values of the tree level by level, left to right."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.val for node in level])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels