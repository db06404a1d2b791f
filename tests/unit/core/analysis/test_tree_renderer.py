from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies plain indentation, custom display functions, the connector layout,
and the printing helper.
"""

import io

from navshell.core.analysis.tree_renderer import default_display, print_tree, render_tree
from navshell.domain.tree_models import FileHandle, Leaf, Node

TREE = Node(FileHandle("/a"), (
    Leaf(FileHandle("/a/x.txt")),
    Node(FileHandle("/a/b"), (Leaf(FileHandle("/a/b/y.txt")),)),
))


def test_render_plain_indentation():
    assert render_tree(TREE) == [
        "a",
        "  x.txt",
        "  b",
        "    y.txt",
    ]


def test_render_custom_indent_and_display():
    lines = render_tree(TREE, display_fn=lambda h: h.path, indent_unit="\t")
    assert lines == ["/a", "\t/a/x.txt", "\t/a/b", "\t\t/a/b/y.txt"]


def test_render_connectors_layout():
    assert render_tree(TREE, connectors=True) == [
        "a",
        "├── x.txt",
        "└── b",
        "    └── y.txt",
    ]


def test_render_connectors_continue_rails_for_open_siblings():
    tree = Node(FileHandle("/a"), (
        Node(FileHandle("/a/b"), (Leaf(FileHandle("/a/b/y.txt")),)),
        Leaf(FileHandle("/a/z")),
    ))
    assert render_tree(tree, connectors=True) == [
        "a",
        "├── b",
        "│   └── y.txt",
        "└── z",
    ]


def test_render_deep_nesting():
    tree = Leaf(FileHandle("/leaf"))
    for i in range(1500):
        tree = Node(FileHandle(f"/n{i}"), (tree,))

    plain = render_tree(tree, indent_unit=" ")
    boxed = render_tree(tree, connectors=True)

    assert len(plain) == len(boxed) == 1501
    assert plain[-1] == " " * 1500 + "leaf"
    assert boxed[-1].endswith("└── leaf")


def test_render_none_produces_no_lines():
    assert render_tree(None) == []


def test_default_display_falls_back_to_path_for_root():
    assert default_display(FileHandle("/")) == "/"
    assert default_display(FileHandle("/a/b")) == "b"


def test_print_tree_writes_lines_and_returns_none():
    buf = io.StringIO()
    assert print_tree(TREE, stream=buf) is None
    assert buf.getvalue() == "a\n  x.txt\n  b\n    y.txt\n"


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(Leaf(FileHandle("/a/x.txt")))
    assert capsys.readouterr().out == "x.txt\n"
