"""
NavShell - filesystem navigation and inspection from the Python REPL.

Tracks a working directory with undo history, snapshots directory subtrees
as Leaf / Node trees, and queries them with composable predicates:

    >>> from navshell import *
    >>> cd("~/projects")
    >>> find(matches_regex(r"\\.toml$", file_name))
"""

__version__ = "1.0.0"

from .api import (
    back,
    cat,
    cd,
    copy,
    cp,
    default_display,
    filter_tree,
    find,
    flatten_tree,
    head,
    history,
    ls,
    mv,
    paste,
    print_tree,
    pwd,
    read_bytes,
    render_tree,
    rm,
    tail,
    to_handle,
    tree,
    up,
    walk_tree,
)
from .core.analysis.tree_algebra import linearize, prune, walk
from .core.analysis.tree_builder import build_tree
from .core.navigation.state import WorkingDirectoryState, get_state, reset_state
from .core.query.predicates import (
    all_of,
    any_of,
    exists,
    file_name,
    file_path,
    file_size,
    file_type,
    is_hidden,
    matches,
    matches_exactly,
    matches_regex,
    negate,
)
from .domain.errors import ClipboardUnavailable, ListingFailure, NavShellError, PathNotFound
from .domain.tree_models import FileHandle, FileKind, Leaf, Node, Tree

__all__ = [
    # Navigation
    "pwd",
    "cd",
    "up",
    "back",
    "history",
    "to_handle",
    "WorkingDirectoryState",
    "get_state",
    "reset_state",

    # Trees
    "tree",
    "build_tree",
    "find",
    "flatten_tree",
    "filter_tree",
    "walk_tree",
    "linearize",
    "prune",
    "walk",
    "render_tree",
    "print_tree",
    "default_display",

    # Predicates
    "matches",
    "matches_exactly",
    "matches_regex",
    "all_of",
    "any_of",
    "negate",
    "file_name",
    "file_path",
    "file_type",
    "file_size",
    "exists",
    "is_hidden",

    # File operations
    "ls",
    "cat",
    "head",
    "tail",
    "read_bytes",
    "cp",
    "rm",
    "mv",
    "paste",
    "copy",

    # Models and errors
    "FileHandle",
    "FileKind",
    "Leaf",
    "Node",
    "Tree",
    "NavShellError",
    "PathNotFound",
    "ListingFailure",
    "ClipboardUnavailable",
]
