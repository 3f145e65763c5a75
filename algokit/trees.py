"""Binary tree construction and traversal routines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted values, rooted at the middle."""
    if not nums:
        return None
    middle = len(nums) // 2
    return TreeNode(
        nums[middle],
        sorted_array_to_bst(nums[:middle]),
        sorted_array_to_bst(nums[middle + 1:]),
    )


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum along any path between two nodes of the tree."""
    if root is None:
        raise ValueError("tree is empty")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root