import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.binary_tree import (
    TreeNode,
    build_from_post_in,
    build_from_pre_in,
    build_from_preorder_tokens,
    diameter,
    height,
    inorder,
    is_balanced,
    is_valid_bst,
    max_path_sum,
    postorder,
    preorder,
)


@pytest.fixture
def sample():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )


def _chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, None, root)
    return root


def _bst(values):
    root = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        node = root
        while True:
            if value < node.val:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
    return root


def test_traversals(sample):
    assert preorder(sample) == [1, 2, 4, 5, 3, 6, 7]
    assert inorder(sample) == [4, 2, 5, 1, 6, 3, 7]
    assert postorder(sample) == [4, 5, 2, 6, 7, 3, 1]


def test_traversals_of_empty_tree():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []


def test_build_from_preorder_tokens(sample):
    tokens = [1, 2, 4, -1, -1, 5, -1, -1, 3, 6, -1, -1, 7, -1, -1]
    root = build_from_preorder_tokens(tokens)
    assert preorder(root) == preorder(sample)
    assert inorder(root) == inorder(sample)


def test_build_from_preorder_tokens_null_root():
    assert build_from_preorder_tokens([-1]) is None


def test_build_from_preorder_tokens_runs_out():
    with pytest.raises(ValueError):
        build_from_preorder_tokens([1, 2, -1])


def test_build_from_pre_in():
    root = build_from_pre_in([1, 2, 4, 3, 5], [4, 2, 1, 5, 3])
    assert inorder(root) == [4, 2, 1, 5, 3]
    assert postorder(root) == [4, 2, 5, 3, 1]


def test_build_from_post_in():
    root = build_from_post_in([4, 2, 5, 3, 1], [4, 2, 1, 5, 3])
    assert inorder(root) == [4, 2, 1, 5, 3]
    assert preorder(root) == [1, 2, 4, 3, 5]


def test_build_rejects_inconsistent_input():
    with pytest.raises(ValueError):
        build_from_pre_in([1, 2], [1])
    with pytest.raises(ValueError):
        build_from_post_in([1, 9], [1, 2])


@given(st.lists(st.integers(-100, 100), unique=True, max_size=40))
def test_rebuild_round_trip(values):
    root = _bst(values)
    pre, ino, post = preorder(root), inorder(root), postorder(root)
    assert preorder(build_from_pre_in(pre, ino)) == pre
    assert postorder(build_from_post_in(post, ino)) == post


def test_height_and_balance(sample):
    assert height(sample) == 3
    assert height(None) == 0
    assert is_balanced(sample)
    assert not is_balanced(_chain([1, 2, 3]))


def test_diameter(sample):
    assert diameter(sample) == 5
    assert diameter(None) == 0


@given(st.integers(1, 30))
def test_diameter_of_chain_counts_every_node(n):
    chain = _chain(list(range(n)))
    assert diameter(chain) == n
    assert height(chain) == n


@given(st.lists(st.integers(1, 50), min_size=1, max_size=20))
def test_max_path_sum_of_positive_chain_is_total(values):
    assert max_path_sum(_chain(values)) == sum(values)


@given(st.lists(st.integers(-50, -1), min_size=1, max_size=20))
def test_max_path_sum_of_negative_chain_is_best_node(values):
    assert max_path_sum(_chain(values)) == max(values)


def test_max_path_sum_empty():
    with pytest.raises(ValueError):
        max_path_sum(None)


@given(st.lists(st.integers(), unique=True, max_size=40))
def test_inserted_bst_is_valid(values):
    root = _bst(values)
    assert is_valid_bst(root)
    assert inorder(root) == sorted(values)


def test_invalid_bst(sample):
    assert not is_valid_bst(sample)
    assert not is_valid_bst(TreeNode(2, TreeNode(2)))
    assert not is_valid_bst(TreeNode(5, TreeNode(3, None, TreeNode(6))))