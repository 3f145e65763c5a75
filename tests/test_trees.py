import pytest

from algokit.trees import TreeNode, invert_tree, max_path_sum, sorted_array_to_bst


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _balanced(node):
    if node is None:
        return True
    return (
        abs(_height(node.left) - _height(node.right)) <= 1
        and _balanced(node.left)
        and _balanced(node.right)
    )


def _from_level_order(values):
    nodes = [None if v is None else TreeNode(v) for v in values]
    children = iter(nodes[1:])
    for node in nodes:
        if node is None:
            continue
        node.left = next(children, None)
        node.right = next(children, None)
    return nodes[0] if nodes else None


def test_empty_array_gives_no_tree():
    assert sorted_array_to_bst([]) is None


@pytest.mark.parametrize("nums", [[1], [-10, -3, 0, 5, 9], list(range(20)), [1, 3], list(range(-7, 50, 3))])
def test_bst_inorder_and_balance(nums):
    root = sorted_array_to_bst(nums)
    assert _inorder(root) == nums
    assert _balanced(root)
    assert root.val == nums[len(nums) // 2]


def test_max_path_single_node():
    assert max_path_sum(TreeNode(-5)) == -5


def test_max_path_all_negative():
    root = _from_level_order([-3, -1, -7])
    assert max_path_sum(root) == -1


def test_max_path_examples():
    assert max_path_sum(_from_level_order([1, 2, 3])) == 6
    assert max_path_sum(_from_level_order([-10, 9, 20, None, None, 15, 7])) == 42


def test_max_path_chain_of_positives():
    values = [4, 8, 15, 16]
    root = None
    for v in values:
        root = TreeNode(v, root)
    assert max_path_sum(root) == sum(values)


def test_max_path_empty():
    with pytest.raises(ValueError):
        max_path_sum(None)


def test_invert_none():
    assert invert_tree(None) is None


def test_invert_reverses_inorder():
    root = sorted_array_to_bst(list(range(15)))
    result = invert_tree(root)
    assert result is root
    assert _inorder(result) == list(range(14, -1, -1))


def test_invert_twice_restores_tree():
    original = sorted_array_to_bst([1, 4, 6, 9, 12, 30])
    copy = sorted_array_to_bst([1, 4, 6, 9, 12, 30])
    assert invert_tree(invert_tree(copy)) == original