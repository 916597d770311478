"""Binary tree nodes, recursive traversals, construction and tree properties."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional

NULL_VALUE = -1
"""Marker that stands for a missing child in serialized trees."""


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _collect(root: Optional[TreeNode], visit: Callable[[TreeNode, list], None]) -> list:
    result: list = []
    if root is not None:
        visit(root, result)
    return result


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in root, left, right order."""

    def visit(node: Optional[TreeNode], out: list) -> None:
        if node is None:
            return
        out.append(node.val)
        visit(node.left, out)
        visit(node.right, out)

    return _collect(root, visit)


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, root, right order."""

    def visit(node: Optional[TreeNode], out: list) -> None:
        if node is None:
            return
        visit(node.left, out)
        out.append(node.val)
        visit(node.right, out)

    return _collect(root, visit)


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, right, root order."""

    def visit(node: Optional[TreeNode], out: list) -> None:
        if node is None:
            return
        visit(node.left, out)
        visit(node.right, out)
        out.append(node.val)

    return _collect(root, visit)


def build_from_preorder_tokens(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from a preorder listing where ``-1`` marks a missing child.

    Raises ValueError if the listing ends before the tree is complete.
    """
    tokens = iter(values)

    def build() -> Optional[TreeNode]:
        try:
            data = next(tokens)
        except StopIteration:
            raise ValueError("ran out of values while building the tree") from None
        if data == NULL_VALUE:
            return None
        node = TreeNode(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def _position(inorder_values: Sequence[Any], start: int, end: int, value: Any) -> int:
    for i in range(start, end + 1):
        if inorder_values[i] == value:
            return i
    raise ValueError(f"{value!r} does not fit the inorder sequence")


def build_from_pre_in(preorder: Sequence[Any], inorder: Sequence[Any]) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder sequences."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals must have the same length")
    roots = iter(preorder)
    inorder_values = inorder

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        value = next(roots)
        pos = _position(inorder_values, start, end, value)
        node = TreeNode(value)
        node.left = build(start, pos - 1)
        node.right = build(pos + 1, end)
        return node

    return build(0, len(inorder_values) - 1)


def build_from_post_in(postorder: Sequence[Any], inorder: Sequence[Any]) -> Optional[TreeNode]:
    """Rebuild a tree from its postorder and inorder sequences."""
    if len(postorder) != len(inorder):
        raise ValueError("traversals must have the same length")
    roots = reversed(postorder)
    inorder_values = inorder

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        value = next(roots)
        pos = _position(inorder_values, start, end, value)
        node = TreeNode(value)
        node.right = build(pos + 1, end)
        node.left = build(start, pos - 1)
        return node

    return build(0, len(inorder_values) - 1)


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if every node's subtree heights differ by at most one."""

    def checked_height(node: Optional[TreeNode]) -> Optional[int]:
        if node is None:
            return 0
        left = checked_height(node.left)
        if left is None:
            return None
        right = checked_height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return 1 + max(left, right)

    return checked_height(root) is not None


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path between any two nodes."""
    best = 0

    def depth(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right + 1)
        return 1 + max(left, right)

    depth(root)
    return best


def max_path_sum(root: Optional[TreeNode]) -> Any:
    """Return the largest sum along any path between two nodes of a non-empty tree."""
    if root is None:
        raise ValueError("empty tree has no paths")
    best = None

    def gain(node: Optional[TreeNode]) -> Any:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        through = left + right + node.val
        if best is None or through > best:
            best = through
        return max(left, right) + node.val

    gain(root)
    return best


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True if every value lies strictly between its ancestors' bounds."""

    def check(node: Optional[TreeNode], low: Any, high: Any) -> bool:
        if node is None:
            return True
        if low is not None and not low < node.val:
            return False
        if high is not None and not node.val < high:
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, None, None)