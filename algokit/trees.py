"""Binary tree nodes and in-order successors."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def inorder_successor(
    root: Optional[TreeNode], p: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Return the node visited right after ``p`` in order, or ``None``.

    With ``p`` of ``None`` the first node in order is returned.
    """
    previous: Optional[TreeNode] = None
    for node in _inorder(root):
        if previous is p:
            return node
        previous = node
    return None