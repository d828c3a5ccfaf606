"""Binary search trees: building, searching, deleting and inspecting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from algodrills.binary_tree import TreeNode


def insert(root: TreeNode | None, value: int) -> TreeNode:
    """Insert ``value`` and return the root; equal values go to the right."""
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_bst(values: Iterable[int]) -> TreeNode | None:
    """Build a tree by inserting the values in order; None for no values."""
    root: TreeNode | None = None
    for value in values:
        root = insert(root, value)
    return root


def leftmost(root: TreeNode | None) -> TreeNode:
    """The node holding the smallest value of a non-empty tree."""
    if root is None:
        raise ValueError("tree is empty")
    node = root
    while node.left is not None:
        node = node.left
    return node


def delete(root: TreeNode | None, value: int) -> TreeNode | None:
    """Remove one node holding ``value`` and return the new root.

    A node with two children takes the value of its in-order successor,
    which is then removed from the right subtree.
    """
    if root is None:
        return None
    if value < root.value:
        root.left = delete(root.left, value)
        return root
    if value > root.value:
        root.right = delete(root.right, value)
        return root
    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    successor = leftmost(root.right)
    root.value = successor.value
    root.right = delete(root.right, successor.value)
    return root


@dataclass(frozen=True)
class _Summary:
    is_bst: bool
    low: float
    high: float
    size: int
    total: int


_EMPTY = _Summary(True, math.inf, -math.inf, 0, 0)
_NOT_BST = _Summary(False, math.inf, -math.inf, 0, 0)


def _bst_subtrees(root: TreeNode | None) -> list[_Summary]:
    """Summaries of every subtree that is a valid binary search tree."""
    found: list[_Summary] = []

    def visit(node: TreeNode | None) -> _Summary:
        if node is None:
            return _EMPTY
        left = visit(node.left)
        right = visit(node.right)
        if left.is_bst and right.is_bst and left.high < node.value < right.low:
            summary = _Summary(
                True,
                min(node.value, left.low, right.low),
                max(node.value, left.high, right.high),
                left.size + right.size + 1,
                left.total + right.total + node.value,
            )
            found.append(summary)
            return summary
        return _NOT_BST

    visit(root)
    return found


def largest_bst_size(root: TreeNode | None) -> int:
    """Node count of the largest subtree that is a binary search tree."""
    return max((summary.size for summary in _bst_subtrees(root)), default=0)


def largest_bst_sum(root: TreeNode | None) -> int:
    """Greatest value sum of a binary-search subtree, never below zero."""
    return max((summary.total for summary in _bst_subtrees(root)), default=0) if root else 0 if False else max(
        [0, *(summary.total for summary in _bst_subtrees(root))]
    )


def values_in_range(root: TreeNode | None, start: int, end: int) -> list[int]:
    """Values within ``[start, end]``, each node before its subtrees."""

    def walk(node: TreeNode | None) -> Iterator[int]:
        if node is None:
            return
        if node.value < start:
            yield from walk(node.right)
        elif node.value > end:
            yield from walk(node.left)
        else:
            yield node.value
            yield from walk(node.left)
            yield from walk(node.right)

    return list(walk(root))


def root_to_leaf_paths(root: TreeNode | None) -> list[list[int]]:
    """Every path of values from the root down to a leaf, left paths first."""
    paths: list[list[int]] = []
    trail: list[int] = []

    def walk(node: TreeNode | None) -> None:
        if node is None:
            return
        trail.append(node.value)
        if node.left is None and node.right is None:
            paths.append(trail.copy())
        walk(node.left)
        walk(node.right)
        trail.pop()

    walk(root)
    return paths


def search(root: TreeNode | None, value: int) -> TreeNode | None:
    """The node holding ``value``, or None."""
    node = root
    while node is not None:
        if value < node.value:
            node = node.left
        elif value > node.value:
            node = node.right
        else:
            return node
    return None


def sorted_to_bst(values: Sequence[int]) -> TreeNode | None:
    """Balanced tree from ascending values, each middle value heading its range."""

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        mid = start + (end - start) // 2
        node = TreeNode(values[mid])
        node.left = build(start, mid - 1)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(values) - 1)


def is_valid_bst(root: TreeNode | None) -> bool:
    """Whether every value lies strictly between its ancestors' bounds."""

    def check(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.value < high:
            return False
        return check(node.left, low, node.value) and check(node.right, node.value, high)

    return check(root, -math.inf, math.inf)