from treekit.display import print_tree, render
from treekit.metrics import height
from treekit.node import Node


def _full_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _chain(length):
    root = Node(0)
    node = root
    for value in range(1, length):
        node = node.insert_right(value)
    return root


def test_render_worked_example():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)"
    )
    assert render(_full_tree()) == expected


def test_render_none_is_empty():
    assert render(None) == ""


def test_render_single_node():
    assert render(Node(5)) == "(005)"


def test_line_count_matches_height():
    root = _full_tree()
    root.right.right.insert_left(7)
    lines = render(root).split("\n")
    assert len(lines) == height(root) + 1


def test_every_value_label_appears():
    root = _full_tree()
    text = render(root)
    for value in (98, 12, 6, 16, 402, 256, 512):
        assert f"({value:03d})" in text


def test_lines_have_no_trailing_spaces():
    root = Node(1)
    root.insert_left(2).insert_right(3)
    for line in render(root).split("\n"):
        assert line == line.rstrip(" ")


def test_subtree_drawn_as_its_own_root():
    root = _full_tree()
    lines = render(root.left).split("\n")
    assert len(lines) == 2
    assert lines[1].startswith("(006)")


def test_wide_tree_grows_past_row_width():
    root = _chain(60)
    lines = render(root).split("\n")
    assert len(lines) == 60
    assert max(len(line) for line in lines) > 255
    assert lines[-1].endswith("(059)")


def test_print_tree_matches_render(capsys):
    root = _full_tree()
    print_tree(root)
    assert capsys.readouterr().out == render(root) + "\n"


def test_print_tree_none_prints_nothing(capsys):
    print_tree(None)
    assert capsys.readouterr().out == ""