"""Small demonstration programs that build trees and report on them."""

from __future__ import annotations

import argparse
import io
from typing import Callable, Dict, List, Optional

from treekit.display import render
from treekit.metrics import (
    balance,
    height,
    is_full,
    is_perfect,
    leaves,
    nodes,
    size,
)
from treekit.node import Node
from treekit.traversal import inorder, postorder, preorder

_NULL = "(nil)"


def _show(out: io.StringIO, tree: Node) -> None:
    print(render(tree), file=out)


def _basic_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _seven_tree(second: int) -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(second, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _family_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def _demo_node(out: io.StringIO) -> None:
    _show(out, _seven_tree(16))


def _demo_insert_left(out: io.StringIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    _show(out, root)
    print(file=out)
    root.right.insert_left(128)
    root.insert_left(54)
    _show(out, root)


def _demo_insert_right(out: io.StringIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    _show(out, root)
    print(file=out)
    root.left.insert_right(54)
    root.insert_right(128)
    _show(out, root)


def _demo_delete(out: io.StringIO) -> None:
    root = _basic_tree()
    _show(out, root)
    root.delete()


def _demo_predicate(label: str, check: Callable[[Node], bool]) -> Callable[[io.StringIO], None]:
    def demo(out: io.StringIO) -> None:
        root = _basic_tree()
        _show(out, root)
        for node in (root, root.right, root.right.right):
            print(f"Is {node.value} {label}: {int(check(node))}", file=out)

    return demo


def _demo_traversal(walk: Callable[[Node], object]) -> Callable[[io.StringIO], None]:
    def demo(out: io.StringIO) -> None:
        root = _seven_tree(56)
        _show(out, root)
        for value in walk(root):
            print(value, file=out)

    return demo


def _demo_measure(template: str, measure: Callable[[Node], int]) -> Callable[[io.StringIO], None]:
    def demo(out: io.StringIO) -> None:
        root = _basic_tree()
        _show(out, root)
        for node in (root, root.right, root.left.right):
            print(template.format(value=node.value, result=measure(node)), file=out)

    return demo


def _demo_balance(out: io.StringIO) -> None:
    root = _basic_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    _show(out, root)
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {balance(node):+d}", file=out)


def _demo_full(out: io.StringIO) -> None:
    root = _basic_tree()
    root.left.left = Node(10, root.left)
    _show(out, root)
    for node in (root, root.left, root.right):
        print(f"Is {node.value} full: {int(is_full(node))}", file=out)


def _demo_perfect(out: io.StringIO) -> None:
    root = _basic_tree()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    _show(out, root)
    print(f"Perfect: {int(is_perfect(root))}\n", file=out)

    grandchild = root.right.right
    grandchild.left = Node(10, grandchild)
    _show(out, root)
    print(f"Perfect: {int(is_perfect(root))}\n", file=out)

    grandchild.right = Node(10, grandchild)
    _show(out, root)
    print(f"Perfect: {int(is_perfect(root))}", file=out)


def _relative_line(name: str, node: Node, other: Optional[Node]) -> str:
    shown = _NULL if other is None else str(other.value)
    return f"{name} of {node.value}: {shown}"


def _demo_sibling(out: io.StringIO) -> None:
    root = _family_tree()
    _show(out, root)
    for node in (root.left, root.right.left, root.left.right, root):
        print(_relative_line("Sibling", node, node.sibling()), file=out)


def _demo_uncle(out: io.StringIO) -> None:
    root = _family_tree()
    _show(out, root)
    for node in (root.right.left, root.left.right, root.left):
        print(_relative_line("Uncle", node, node.uncle()), file=out)


_DEMOS: Dict[int, Callable[[io.StringIO], None]] = {
    0: _demo_node,
    1: _demo_insert_left,
    2: _demo_insert_right,
    3: _demo_delete,
    4: _demo_predicate("a leaf", Node.is_leaf),
    5: _demo_predicate("a root", Node.is_root),
    6: _demo_traversal(preorder),
    7: _demo_traversal(inorder),
    8: _demo_traversal(postorder),
    9: _demo_measure("Height from {value}: {result}", height),
    10: _demo_measure("Depth of {value}: {result}", Node.depth),
    11: _demo_measure("Size of {value}: {result}", size),
    12: _demo_measure("Leaves in {value}: {result}", leaves),
    13: _demo_measure("Nodes in {value}: {result}", nodes),
    14: _demo_balance,
    15: _demo_full,
    16: _demo_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}


def run_demo(number: int) -> str:
    """Run demonstration ``number`` (0 to 18) and return everything it prints."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number!r}") from None
    out = io.StringIO()
    demo(out)
    return out.getvalue()


def main(argv: Optional[List[str]] = None) -> int:
    """Command entry point: run the demonstration given by number."""
    parser = argparse.ArgumentParser(description="Run a binary tree demonstration.")
    parser.add_argument("number", type=int, choices=sorted(_DEMOS), help="demo number")
    args = parser.parse_args(argv)
    print(run_demo(args.number), end="")
    return 0