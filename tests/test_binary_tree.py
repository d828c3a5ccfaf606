import pytest

from algodrills.binary_tree import (
    TreeNode,
    build_tree,
    count_nodes,
    diameter,
    diameter_fast,
    find_path,
    height,
    inorder,
    is_identical,
    is_subtree,
    kth_ancestor,
    kth_level,
    level_order,
    levels,
    lowest_common_ancestor,
    lowest_common_ancestor_fast,
    min_distance,
    node_distance,
    postorder,
    preorder,
    sum_nodes,
    to_sum_tree,
    top_view,
)

SAMPLE = [1, 2, 4, -1, -1, 5, -1, -1, 3, -1, 6, -1, -1]
SAMPLE_VALUES = [v for v in SAMPLE if v != -1]


def _sample():
    root = build_tree(SAMPLE)
    four = root.left.left
    five = root.left.right
    six = root.right.right
    return root, four, five, six


def test_build_tree_preorder_round_trip():
    assert preorder(build_tree(SAMPLE)) == SAMPLE_VALUES


def test_build_tree_empty():
    assert build_tree([]) is None
    assert build_tree([-1]) is None


def test_level_order_matches_levels():
    root, *_ = _sample()
    flat = [v for level in levels(root) for v in level]
    assert level_order(root) == flat
    assert sorted(flat) == sorted(SAMPLE_VALUES)
    assert level_order(None) == []


def test_kth_level_matches_levels():
    root, *_ = _sample()
    for k, level in enumerate(levels(root), start=1):
        assert kth_level(root, k) == level
    assert kth_level(root, height(root) + 1) == []


def test_left_chain_traversals():
    chain = TreeNode(3, TreeNode(2, TreeNode(1)))
    assert inorder(chain) == [1, 2, 3]
    assert postorder(chain) == [1, 2, 3]
    assert preorder(chain) == [3, 2, 1]


def test_counts_and_sums():
    root, *_ = _sample()
    assert count_nodes(root) == len(SAMPLE_VALUES)
    assert sum_nodes(root) == sum(SAMPLE_VALUES)
    assert len(levels(root)) == height(root)
    assert height(root) == 3


def test_diameter_versions_agree():
    root, *_ = _sample()
    assert diameter(root) == diameter_fast(root) == 5
    assert diameter(None) == diameter_fast(None) == 0


def test_kth_ancestor():
    root, four, five, six = _sample()
    assert kth_ancestor(root, five, 2).value == 1
    assert kth_ancestor(root, five, 1) is root.left
    assert kth_ancestor(root, five, 3) is None
    assert kth_ancestor(root, TreeNode(9), 1) is None


def test_kth_ancestor_rejects_zero():
    root, four, *_ = _sample()
    with pytest.raises(ValueError):
        kth_ancestor(root, four, 0)


def test_find_path():
    root, four, *_ = _sample()
    path = find_path(root, four)
    assert path[0] is root and path[-1] is four
    assert find_path(root, TreeNode(4)) == []


def test_lowest_common_ancestor():
    root, four, five, six = _sample()
    assert lowest_common_ancestor(root, four, five).value == 2
    assert lowest_common_ancestor_fast(root, four, five).value == 2
    assert lowest_common_ancestor(root, four, six) is root
    assert lowest_common_ancestor_fast(root, four, six) is root
    assert lowest_common_ancestor(root, four, TreeNode(7)) is None


def test_min_distance():
    root, four, five, six = _sample()
    assert min_distance(root, four, five) == 2
    assert min_distance(root, four, four) == 0
    assert min_distance(root, four, six) == min_distance(root, six, four)
    assert min_distance(root, four, six) == node_distance(root, four) + node_distance(
        root, six
    )


def test_min_distance_missing_node():
    root, four, *_ = _sample()
    with pytest.raises(ValueError):
        min_distance(root, four, TreeNode(4))


def test_node_distance_matches_path():
    root, four, five, six = _sample()
    for node in (root, four, five, six):
        assert node_distance(root, node) == len(find_path(root, node)) - 1
    assert node_distance(root, TreeNode(1)) is None


def test_identical_and_subtree():
    root, *_ = _sample()
    assert is_identical(root, build_tree(SAMPLE))
    other = build_tree(SAMPLE)
    other.right.right.value += 1
    assert not is_identical(root, other)

    sub = TreeNode(2, TreeNode(4), TreeNode(5))
    assert is_subtree(root, sub)
    sub.right.value = 6
    assert not is_subtree(root, sub)
    assert is_subtree(None, None)
    assert not is_subtree(root, None)


def test_top_view_chains():
    left_chain = build_tree([3, 2, 1])
    assert top_view(left_chain) == list(reversed(preorder(left_chain)))
    right_chain = build_tree([1, -1, 2, -1, 3])
    assert top_view(right_chain) == preorder(right_chain)
    assert top_view(None) == []


def test_top_view_includes_root():
    root, *_ = _sample()
    view = top_view(root)
    assert root.value in view
    assert set(view) <= set(SAMPLE_VALUES)


def test_to_sum_tree():
    root, four, five, six = _sample()
    original_root = root.value
    total = to_sum_tree(root)
    assert total == sum(SAMPLE_VALUES)
    assert root.value == total - original_root
    assert all(leaf.value == 0 for leaf in (four, five, six))