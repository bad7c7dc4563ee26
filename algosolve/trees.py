"""Binary trees and repair of a search tree with two swapped keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> Iterator[TreeNode]:
    """Yield the nodes of the tree in in-order sequence."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def recover_tree(root: TreeNode | None) -> None:
    """Swap back the values of the two nodes that break the search-tree order."""
    first = second = prev = None
    for node in inorder(root):
        if prev is not None and prev.val >= node.val:
            if first is None:
                first = prev
            second = node
        prev = node
    if first is None or second is None:
        raise ValueError("tree has no misplaced nodes")
    first.val, second.val = second.val, first.val