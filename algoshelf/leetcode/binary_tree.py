"""Binary tree problems: depth, path maxima, search and leaf order."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    deepest = 0
    stack = [(root, 1)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in (node.left, node.right) if child)
    return deepest


def good_nodes(root: Optional[TreeNode]) -> int:
    """Nodes whose value is at least every value on the path from the root to them."""
    if root is None:
        return 0
    count = 0
    stack = [(root, root.val)]
    while stack:
        node, path_max = stack.pop()
        if node.val >= path_max:
            count += 1
        path_max = max(path_max, node.val)
        stack.extend((child, path_max) for child in (node.left, node.right) if child)
    return count


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Node holding ``val`` in a binary search tree, or ``None``."""
    node = root
    while node is not None and node.val != val:
        node = node.left if node.val > val else node.right
    return node


def _leaves(root: Optional[TreeNode]) -> Iterator[int]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            yield node.val
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Whether both trees have the same leaf values from left to right."""
    return list(_leaves(root1)) == list(_leaves(root2))