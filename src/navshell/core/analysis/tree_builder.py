from __future__ import annotations

"""
Directory Tree Builder.

Snapshots a filesystem subtree into the recursive Leaf / Node model.
Symlinks are always leaves, so the walk never leaves the real directory
hierarchy and cannot loop. The walk keeps its own stack, so nesting depth
is not bounded by the interpreter's recursion limit.
"""

import logging
from typing import Iterator, List, Optional, Tuple, Union

from navshell.core.navigation.resolver import PathExpr
from navshell.core.navigation.state import WorkingDirectoryState, get_state
from navshell.domain.errors import ListingFailure, PathNotFound
from navshell.domain.tree_models import FileHandle, FileKind, Leaf, Node, Tree
from navshell.infra import fs

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(path_expr: PathExpr = "", state: Optional[WorkingDirectoryState] = None) -> Tree:
    """
    Build the tree rooted at path_expr.

    Args:
        path_expr: Root of the walk; defaults to the current directory.
        state: Working directory state used for resolution.

    Returns:
        Tree: Leaf for files and symlinks, Node for directories.

    Raises:
        PathNotFound: If the root (or an entry removed mid-walk) is missing.
        ListingFailure: If a directory cannot be enumerated.
    """
    handle = (state or get_state()).resolve(path_expr)
    logger.debug(f"Building tree for: {handle.path}")
    return _build_handle(handle)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_handle(root: FileHandle) -> Tree:
    expanded = _expand(root)
    if isinstance(expanded, Leaf):
        return expanded

    # Explicit stack of (directory, pending child paths, built children)
    stack: List[Tuple[FileHandle, Iterator[str], List[Tree]]] = [(root, iter(expanded), [])]
    while True:
        handle, pending, built = stack[-1]
        child_path = next(pending, None)
        if child_path is None:
            stack.pop()
            node = Node(handle, tuple(built))
            if not stack:
                return node
            stack[-1][2].append(node)
            continue

        child = FileHandle(child_path)
        expanded = _expand(child)
        if isinstance(expanded, Leaf):
            built.append(expanded)
        else:
            stack.append((child, iter(expanded), []))


def _expand(handle: FileHandle) -> Union[Leaf, List[str]]:
    """Leaf for a non-directory, otherwise the directory's child paths."""
    kind = handle.kind
    if kind is None:
        raise PathNotFound(handle.path)

    if kind is not FileKind.DIRECTORY:
        return Leaf(handle)

    try:
        return fs.list_children(handle.path)
    except FileNotFoundError as e:
        raise PathNotFound(handle.path) from e
    except OSError as e:
        raise ListingFailure(handle.path, str(e)) from e
