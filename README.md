# treekit

A small library for working with linked binary trees of integers. Every node
knows its parent and its left and right children. The library covers building
trees, walking them, measuring them and drawing them as ASCII art.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a tree

```python
from treekit.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 goes between root and 402
```

`Node(value, parent=None)` creates a node. `insert_left` and `insert_right`
add a new child and return it. If the slot already holds a child, that child
moves down and becomes the new node's child on the same side.

Each node can also answer questions about where it sits in the tree:

- `is_leaf()` is true when the node has no children.
- `is_root()` is true when the node has no parent.
- `depth()` counts the edges between the node and the root.
- `sibling()` returns the other child of the node's parent, or `None`.
- `uncle()` returns the sibling of the node's parent, or `None`.

`delete()` detaches a node from its parent and clears every parent and child
link inside its subtree.

## Traversals

```python
from treekit.traversal import preorder, inorder, postorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
```

Each of these is a generator that yields node values in its own order.
Passing `None` gives an empty sequence.

## Metrics

`treekit.metrics` provides functions that take a node (or `None`):

- `height` counts the edges on the longest path from the node down to a leaf;
  it is 0 for a leaf and for `None`.
- `size` counts every node.
- `leaves` counts leaves. A node that is missing either child is counted as
  one leaf and its remaining child is not looked into.
- `nodes` counts the nodes that have at least one child.
- `balance` is the number of levels in the left subtree minus the number in
  the right subtree; 0 for `None`.
- `is_full` tells whether every node has either 0 or 2 children; `False` for
  `None`.
- `is_perfect` tells whether the tree is full and all of its leaves are at the
  same level; `False` for `None`.

## Drawing

```python
from treekit.display import render, print_tree

print_tree(root)
```

For a root 98 with children 12 and 402, which in turn have children 6, 16 and
256, 512, the output is:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

Values are shown with at least three digits. `render` returns the same drawing
as a single string, its lines joined by newlines, without printing it; it
returns an empty string for `None`, and `print_tree(None)` prints nothing.

## Demonstrations

The package ships example scenarios numbered 0 to 18. Each one builds a tree,
draws it and shows one of the operations above in action:

```
treekit-demo 0
treekit-demo 14
```

You can also run them from code: `treekit.demos.run_demo(number)` returns
everything the scenario prints as a string, and raises `ValueError` for a
number that has no scenario. Where a scenario asks for a sibling or uncle that
does not exist, it prints `(nil)`.

## What it does not do

Trees live only in memory: there is no way to save them to or load them from a
file, and the only text form is the ASCII drawing, which cannot be read back.