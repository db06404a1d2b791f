from __future__ import annotations

"""
Interactive API.

REPL-oriented functions bound to the process-wide working directory state.
Names mirror the unix commands they stand in for (pwd, cd, ls, find, ...);
up, back, paste and copy have no direct unix counterpart.

Every path argument may be a string (absolute, relative to pwd(), or
starting with '~') or a FileHandle.
"""

from typing import Callable, List, Optional

from navshell.core.analysis.tree_algebra import linearize, prune, walk
from navshell.core.analysis.tree_builder import build_tree
from navshell.core.analysis.tree_renderer import default_display, print_tree, render_tree
from navshell.core.navigation.resolver import PathExpr
from navshell.core.navigation.state import get_state
from navshell.core.query.find import find as _find
from navshell.core.services.file_ops import (
    cat,
    copy,
    cp,
    head,
    ls,
    mv,
    paste,
    read_bytes,
    rm,
    tail,
)
from navshell.domain.tree_models import FileHandle, Tree

# -----------------------------------------------------------------------------
# NAVIGATION
# -----------------------------------------------------------------------------

def pwd() -> FileHandle:
    return get_state().pwd()


def cd(path_expr: PathExpr) -> FileHandle:
    """Change the current directory. Use back() or up() instead of '-' / '..'."""
    return get_state().cd(path_expr)


def up() -> FileHandle:
    return get_state().up()


def back() -> FileHandle:
    return get_state().back()


def to_handle(path_expr: PathExpr) -> FileHandle:
    """Resolve any path expression to an absolute FileHandle."""
    return get_state().resolve(path_expr)


def history() -> List[FileHandle]:
    return list(get_state().history)

# -----------------------------------------------------------------------------
# TREES
# -----------------------------------------------------------------------------

def tree(path_expr: PathExpr = "") -> Tree:
    """Snapshot the subtree at path_expr (current directory by default)."""
    return build_tree(path_expr)


def find(predicate: Callable[[FileHandle], bool], path_expr: PathExpr = "") -> List[FileHandle]:
    """
    Entries under path_expr (subdirectories included) passing predicate.

    The matches_* builders compose well here:

        find(matches_exactly("setup.py", file_name))
    """
    return _find(predicate, path_expr)


def flatten_tree(t: Tree) -> List[FileHandle]:
    return linearize(t)


def filter_tree(predicate: Callable[[FileHandle], bool], t: Tree) -> Optional[Tree]:
    return prune(predicate, t)


def walk_tree(transform: Callable[[FileHandle], FileHandle], t: Tree) -> Tree:
    return walk(transform, t)


__all__ = [
    "pwd", "cd", "up", "back", "to_handle", "history",
    "tree", "find", "flatten_tree", "filter_tree", "walk_tree",
    "render_tree", "print_tree", "default_display",
    "ls", "cat", "head", "tail", "read_bytes", "cp", "rm", "mv", "paste", "copy",
]
