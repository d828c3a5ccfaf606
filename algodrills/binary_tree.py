"""Binary trees built from preorder listings, and the usual questions asked of them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(preorder: Iterable[int]) -> TreeNode | None:
    """Build a tree from a preorder listing in which -1 marks a missing child.

    A listing that runs out early is treated as if padded with -1.
    """
    values = iter(preorder)

    def build() -> TreeNode | None:
        value = next(values, NULL_MARKER)
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order(root: TreeNode | None) -> list[int]:
    """Values in breadth-first order, left to right."""
    if root is None:
        return []
    order: list[int] = []
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        order.append(node.value)
        if node.left:
            queue.append(node.left)
        if node.right:
            queue.append(node.right)
    return order


def levels(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by depth, one list per level."""
    result: list[list[int]] = []
    current = [root] if root else []
    while current:
        result.append([node.value for node in current])
        current = [
            child for node in current for child in (node.left, node.right) if child
        ]
    return result


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def preorder(root: TreeNode | None) -> list[int]:
    """Values visiting each node before its subtrees."""
    return list(_preorder(root))


def inorder(root: TreeNode | None) -> list[int]:
    """Values visiting each node between its left and right subtrees."""
    return list(_inorder(root))


def postorder(root: TreeNode | None) -> list[int]:
    """Values visiting each node after its subtrees."""
    return list(_postorder(root))


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def count_nodes(root: TreeNode | None) -> int:
    """Total number of nodes."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def sum_nodes(root: TreeNode | None) -> int:
    """Sum of all node values."""
    if root is None:
        return 0
    return sum_nodes(root.left) + sum_nodes(root.right) + root.value


def diameter(root: TreeNode | None) -> int:
    """Nodes on the longest path between any two nodes, recomputing heights."""
    if root is None:
        return 0
    through_root = height(root.left) + height(root.right) + 1
    return max(through_root, diameter(root.left), diameter(root.right))


def diameter_fast(root: TreeNode | None) -> int:
    """Nodes on the longest path between any two nodes, in a single pass."""

    def measure(node: TreeNode | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_diameter, left_height = measure(node.left)
        right_diameter, right_height = measure(node.right)
        through = left_height + right_height + 1
        return (
            max(through, left_diameter, right_diameter),
            max(left_height, right_height) + 1,
        )

    return measure(root)[0]


def find_path(root: TreeNode | None, node: TreeNode) -> list[TreeNode]:
    """Nodes from the root down to ``node``; empty if ``node`` is not in the tree."""
    path: list[TreeNode] = []

    def walk(current: TreeNode | None) -> bool:
        if current is None:
            return False
        path.append(current)
        if current is node or walk(current.left) or walk(current.right):
            return True
        path.pop()
        return False

    walk(root)
    return path


def kth_ancestor(root: TreeNode | None, node: TreeNode, k: int) -> TreeNode | None:
    """The node ``k`` levels above ``node``, or None if there is none."""
    if k < 1:
        raise ValueError("k must be at least 1")
    path = find_path(root, node)
    if len(path) <= k:
        return None
    return path[-1 - k]


def kth_level(root: TreeNode | None, k: int) -> list[int]:
    """Values at depth ``k``, counting the root as level 1, left to right."""
    found: list[int] = []

    def walk(node: TreeNode | None, level: int) -> None:
        if node is None:
            return
        if level == k:
            found.append(node.value)
        walk(node.left, level + 1)
        walk(node.right, level + 1)

    walk(root, 1)
    return found


def lowest_common_ancestor(
    root: TreeNode | None, first: TreeNode, second: TreeNode
) -> TreeNode | None:
    """Deepest node above both nodes, found by comparing root paths.

    Returns None when either node is missing from the tree.
    """
    first_path = find_path(root, first)
    second_path = find_path(root, second)
    if not first_path or not second_path:
        return None
    ancestor = None
    for a, b in zip(first_path, second_path):
        if a is not b:
            break
        ancestor = a
    return ancestor


def lowest_common_ancestor_fast(
    root: TreeNode | None, first: TreeNode, second: TreeNode
) -> TreeNode | None:
    """Deepest node above both nodes, in one traversal; assumes both are present."""
    if root is None:
        return None
    if root is first or root is second:
        return root
    left = lowest_common_ancestor_fast(root.left, first, second)
    right = lowest_common_ancestor_fast(root.right, first, second)
    if left and right:
        return root
    return left if left is not None else right


def node_distance(root: TreeNode | None, node: TreeNode) -> int | None:
    """Edges from ``root`` down to ``node``, or None if it is not below ``root``."""
    if root is None:
        return None
    if root is node:
        return 0
    for child in (root.left, root.right):
        distance = node_distance(child, node)
        if distance is not None:
            return distance + 1
    return None


def min_distance(root: TreeNode | None, first: TreeNode, second: TreeNode) -> int:
    """Edges on the path between two nodes of the tree."""
    ancestor = lowest_common_ancestor(root, first, second)
    if ancestor is None:
        raise ValueError("both nodes must belong to the tree")
    to_first = node_distance(ancestor, first)
    to_second = node_distance(ancestor, second)
    assert to_first is not None and to_second is not None
    return to_first + to_second


def is_identical(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Whether two trees have the same shape and values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.value == second.value
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def is_subtree(root: TreeNode | None, sub: TreeNode | None) -> bool:
    """Whether some node of ``root`` heads a tree identical to ``sub``."""
    if root is None and sub is None:
        return True
    if root is None or sub is None:
        return False
    if root.value == sub.value and is_identical(root, sub):
        return True
    return is_subtree(root.left, sub) or is_subtree(root.right, sub)


def top_view(root: TreeNode | None) -> list[int]:
    """Values seen from above, ordered from the leftmost column to the rightmost."""
    if root is None:
        return []
    seen: dict[int, int] = {}
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, column = queue.popleft()
        seen.setdefault(column, node.value)
        if node.left:
            queue.append((node.left, column - 1))
        if node.right:
            queue.append((node.right, column + 1))
    return [seen[column] for column in sorted(seen)]


def to_sum_tree(root: TreeNode | None) -> int:
    """Replace each value by the sum of its descendants; return the original total."""
    if root is None:
        return 0
    left = to_sum_tree(root.left)
    right = to_sum_tree(root.right)
    total = left + right + root.value
    root.value = left + right
    return total