from __future__ import annotations

"""
Tree Renderer.

Converts Leaf / Node trees into indented text, one line per entry. Two
layouts are available: plain indentation (one indent unit per nesting
level) and ASCII connectors (├──, └──).
"""

import sys
from typing import Any, Callable, List, Optional, TextIO, Tuple

from navshell.domain.constants import DEFAULT_INDENT_UNIT
from navshell.domain.tree_models import FileHandle, Node, Tree

DisplayFn = Callable[[FileHandle], Any]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def default_display(handle: FileHandle) -> str:
    """Final path component, or the full path for the filesystem root."""
    return handle.name or handle.path


def render_tree(
        tree: Optional[Tree],
        display_fn: DisplayFn = default_display,
        indent_unit: str = DEFAULT_INDENT_UNIT,
        connectors: bool = False,
) -> List[str]:
    """
    Render a tree as a list of text lines.

    Args:
        tree: Tree to render. None (a fully pruned tree) renders nothing.
        display_fn: Maps each handle to the text shown for it.
        indent_unit: Indentation added per nesting level (plain layout).
        connectors: Use box-drawing connectors instead of plain indentation.

    Returns:
        List[str]: Rendered lines, root first.
    """
    lines: List[str] = []
    if tree is None:
        return lines

    if connectors:
        lines.append(str(display_fn(tree.handle)))
        if isinstance(tree, Node):
            _render_connectors(tree.children, display_fn, lines, prefix="")
    else:
        _render_indented(tree, display_fn, indent_unit, lines, depth=0)

    return lines


def print_tree(
        tree: Optional[Tree],
        display_fn: DisplayFn = default_display,
        indent_unit: str = DEFAULT_INDENT_UNIT,
        connectors: bool = False,
        stream: Optional[TextIO] = None,
) -> None:
    """Write render_tree output to stream (stdout by default)."""
    out = stream or sys.stdout
    for line in render_tree(tree, display_fn, indent_unit, connectors):
        out.write(line + "\n")

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_indented(
        tree: Tree,
        display_fn: DisplayFn,
        indent_unit: str,
        lines: List[str],
        depth: int,
) -> None:
    stack: List[Tuple[Tree, int]] = [(tree, depth)]
    while stack:
        current, level = stack.pop()
        lines.append(f"{indent_unit * level}{display_fn(current.handle)}")
        if isinstance(current, Node):
            stack.extend((child, level + 1) for child in reversed(current.children))


def _render_connectors(
        children: Tuple[Tree, ...],
        display_fn: DisplayFn,
        lines: List[str],
        prefix: str,
) -> None:
    # (entry, prefix of its line, last among its siblings)
    stack: List[Tuple[Tree, str, bool]] = []
    _push_siblings(stack, children, prefix)
    while stack:
        child, child_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{child_prefix}{connector}{display_fn(child.handle)}")

        if isinstance(child, Node):
            new_prefix = child_prefix + ("    " if is_last else "│   ")
            _push_siblings(stack, child.children, new_prefix)


def _push_siblings(
        stack: List[Tuple[Tree, str, bool]],
        children: Tuple[Tree, ...],
        prefix: str,
) -> None:
    last = len(children) - 1
    for i in range(last, -1, -1):
        stack.append((children[i], prefix, i == last))
