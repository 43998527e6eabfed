"""ASCII drawing of binary trees, one text line per level."""

from __future__ import annotations

from typing import List, Optional

from treekit.node import Node

_ROW_WIDTH = 255
_KEEP = 2


class _Canvas:
    """Rows of characters that grow to the right when written past their end."""

    def __init__(self, rows: int) -> None:
        self._rows: List[List[str]] = [[" "] * _ROW_WIDTH for _ in range(rows)]

    def put(self, row: int, column: int, char: str) -> None:
        line = self._rows[row]
        if column >= len(line):
            line.extend(" " * (column + 1 - len(line)))
        line[column] = char

    def lines(self) -> List[str]:
        result = []
        for line in self._rows:
            text = "".join(line)
            trimmed = text.rstrip(" ")
            if len(trimmed) < _KEEP:
                trimmed = text[:_KEEP]
            result.append(trimmed)
        return result


def _levels_below(tree: Node) -> int:
    below = [1 + _levels_below(child) for child in (tree.left, tree.right) if child]
    return max(below, default=0)


def _draw(tree: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    """Draw a subtree starting at ``offset`` and return the width it takes."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, canvas)
    right = _draw(tree.right, offset + left + width, depth + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth:
        anchor = offset + left + width // 2
        if is_left:
            start, count = anchor, width + right
        else:
            start, count = offset - width // 2, left + width
        for column in range(start, start + count):
            canvas.put(depth - 1, column, "-")
        canvas.put(depth - 1, anchor, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree`` as lines joined by newlines; '' for no tree."""
    if tree is None:
        return ""
    canvas = _Canvas(_levels_below(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "\n".join(canvas.lines())


def print_tree(tree: Optional[Node]) -> None:
    """Print the drawing of ``tree``; print nothing for no tree."""
    if tree is None:
        return
    print(render(tree))