"""Iterative, level-order and Morris traversals of binary trees."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.binary_tree import NULL_VALUE, TreeNode


def preorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Return the preorder values using an explicit stack."""
    if root is None:
        return []
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Return the postorder values as the reverse of a root, right, left walk."""
    if root is None:
        return []
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def inorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Return the inorder values using an explicit stack."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.val)
            node = node.right
    return result


def postorder_one_stack(root: Optional[TreeNode]) -> list[Any]:
    """Return the postorder values using a single stack and no reversal."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        right = stack[-1].right
        if right is not None:
            node = right
            continue
        done = stack.pop()
        result.append(done.val)
        while stack and done is stack[-1].right:
            done = stack.pop()
            result.append(done.val)
    return result


def level_order(root: Optional[TreeNode]) -> list[Any]:
    """Return values level by level, left to right."""
    if root is None:
        return []
    result = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.val)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def _take(tokens: Iterator[Any]) -> Any:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("ran out of values while building the tree") from None


def build_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from a level-order listing where ``-1`` marks a missing child.

    Every node present needs two entries for its children. An empty listing or
    a ``-1`` root gives an empty tree.
    """
    tokens = iter(values)
    first = next(tokens, NULL_VALUE)
    if first == NULL_VALUE:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = _take(tokens)
        if left != NULL_VALUE:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = _take(tokens)
        if right != NULL_VALUE:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_to_graph(root: Optional[TreeNode]) -> dict[Any, list[Any]]:
    """Return an undirected adjacency mapping between the values of joined nodes."""
    adj: defaultdict[Any, list[Any]] = defaultdict(list)
    if root is None:
        return {}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is not None:
                adj[node.val].append(child.val)
                adj[child.val].append(node.val)
                queue.append(child)
    return dict(adj)


def _rightmost_before(node: TreeNode, stop: TreeNode) -> TreeNode:
    prev = node
    while prev.right is not None and prev.right is not stop:
        prev = prev.right
    return prev


def morris_inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the inorder values in O(1) extra space; the tree is restored."""
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        prev = _rightmost_before(current.left, current)
        if prev.right is None:
            prev.right = current
            current = current.left
        else:
            prev.right = None
            result.append(current.val)
            current = current.right
    return result


def morris_preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the preorder values in O(1) extra space; the tree is restored."""
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        prev = _rightmost_before(current.left, current)
        if prev.right is None:
            prev.right = current
            result.append(current.val)
            current = current.left
        else:
            prev.right = None
            current = current.right
    return result