"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from treekit.node import Node
from treekit.traversal import preorder


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    if tree is None:
        return
    yield tree
    yield from _walk(tree.left)
    yield from _walk(tree.right)


def height(tree: Optional[Node]) -> int:
    """Edges on the longest path down to a leaf; 0 for an empty tree or a leaf."""
    if tree is None or (tree.left is None and tree.right is None):
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def _levels(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in preorder(tree))


def leaves(tree: Optional[Node]) -> int:
    """Count leaves; a node missing either child counts as one leaf."""
    if tree is None:
        return 0
    if tree.left is None or tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def nodes(tree: Optional[Node]) -> int:
    """Number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Left subtree levels minus right subtree levels; 0 for an empty tree."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """True when every node has zero or two children; False for an empty tree."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """True when the tree is full and all leaves share one level."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is None or tree.right is None:
        return False
    if height(tree.left) != height(tree.right):
        return False
    return is_perfect(tree.left) and is_perfect(tree.right)