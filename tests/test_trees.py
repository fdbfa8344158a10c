import pytest

from algokit.trees import (
    build_tree,
    count_nodes,
    diameter_and_height,
    diameter_naive,
    height,
    is_identical,
    is_subtree,
    max_depth,
    min_depth,
)

SAMPLE = [1, 2, 4, -1, -1, 5, -1, -1, 3, -1, 6, -1, -1]
LEFT_CHAIN = [1, 2, 3, -1, -1, -1, -1]
RIGHT_CHAIN = [1, -1, 2, -1, 3, -1, -1]


def _preorder(node):
    if node is None:
        return [-1]
    return [node.val, *_preorder(node.left), *_preorder(node.right)]


@pytest.mark.parametrize("values", [SAMPLE, LEFT_CHAIN, RIGHT_CHAIN, [-1], [7, -1, -1]])
def test_build_tree_round_trip(values):
    assert _preorder(build_tree(values)) == values


def test_build_tree_truncated():
    with pytest.raises(ValueError):
        build_tree([1, 2, -1])


def test_sample_diameter_and_height():
    assert diameter_and_height(build_tree(SAMPLE)) == (5, 3)


@pytest.mark.parametrize("values", [SAMPLE, LEFT_CHAIN, RIGHT_CHAIN, [-1], [7, -1, -1]])
def test_diameter_methods_agree(values):
    root = build_tree(values)
    assert diameter_and_height(root) == (diameter_naive(root), height(root))
    assert max_depth(root) == height(root)


@pytest.mark.parametrize("values", [SAMPLE, LEFT_CHAIN, RIGHT_CHAIN])
def test_count_nodes(values):
    assert count_nodes(build_tree(values)) == sum(1 for v in values if v != -1)


@pytest.mark.parametrize("values", [LEFT_CHAIN, RIGHT_CHAIN])
def test_chain_measures_equal_node_count(values):
    root = build_tree(values)
    n = count_nodes(root)
    assert max_depth(root) == n
    assert min_depth(root) == n
    assert diameter_naive(root) == n


def test_empty_tree():
    root = build_tree([-1])
    assert root is None
    assert count_nodes(root) == 0
    assert min_depth(root) == 0
    assert diameter_and_height(root) == (0, 0)


def test_min_depth_not_above_max_depth():
    root = build_tree([1, 2, -1, -1, 3, 4, 5, -1, -1, -1, -1])
    assert min_depth(root) < max_depth(root)
    assert min_depth(root) == 2


def test_is_identical():
    assert is_identical(build_tree(SAMPLE), build_tree(SAMPLE)) is True
    assert is_identical(build_tree(SAMPLE), build_tree(LEFT_CHAIN)) is False
    assert is_identical(None, None) is True


def test_is_subtree_true():
    root = build_tree(SAMPLE)
    assert is_subtree(root, build_tree([2, 4, -1, -1, 5, -1, -1])) is True
    assert is_subtree(root, build_tree([3, -1, 6, -1, -1])) is True


def test_is_subtree_false():
    root = build_tree(SAMPLE)
    assert is_subtree(root, build_tree([2, 4, -1, -1, -1])) is False
    assert is_subtree(root, build_tree([9, -1, -1])) is False


def test_is_subtree_with_none():
    assert is_subtree(None, None) is True
    assert is_subtree(build_tree(SAMPLE), None) is False
    assert is_subtree(None, build_tree([1, -1, -1])) is False