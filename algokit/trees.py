"""Binary trees: building from preorder and measuring depth and diameter."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from its preorder listing, with -1 marking an empty child."""
    items = iter(values)

    def _build() -> Optional[TreeNode]:
        try:
            value = next(items)
        except StopIteration:
            raise ValueError("preorder listing ends before the tree is complete") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = _build()
        node.right = _build()
        return node

    return _build()


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def diameter_naive(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path between any two nodes (quadratic)."""
    if root is None:
        return 0
    through_root = height(root.left) + height(root.right) + 1
    return max(diameter_naive(root.left), diameter_naive(root.right), through_root)


def diameter_and_height(root: Optional[TreeNode]) -> tuple[int, int]:
    """Return ``(diameter, height)`` of the tree, both counted in nodes, in one pass."""
    if root is None:
        return 0, 0
    left_diam, left_height = diameter_and_height(root.left)
    right_diam, right_height = diameter_and_height(root.right)
    diameter = max(left_height + right_height + 1, left_diam, right_diam)
    return diameter, max(left_height, right_height) + 1


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the depth of the deepest leaf."""
    return height(root)


def min_depth(root: Optional[TreeNode]) -> int:
    """Return the depth of the shallowest leaf."""
    if root is None:
        return 0
    if root.left is None:
        return min_depth(root.right) + 1
    if root.right is None:
        return min_depth(root.left) + 1
    return min(min_depth(root.left), min_depth(root.right)) + 1


def is_identical(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if a is None or b is None:
        return a is b
    return a.val == b.val and is_identical(a.left, b.left) and is_identical(a.right, b.right)


def is_subtree(root: Optional[TreeNode], sub_root: Optional[TreeNode]) -> bool:
    """Tell whether ``sub_root`` is identical to some subtree of ``root``."""
    if root is None or sub_root is None:
        return root is sub_root
    if root.val == sub_root.val and is_identical(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)