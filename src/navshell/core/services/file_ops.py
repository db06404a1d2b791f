from __future__ import annotations

"""
File Operations Service.

Shell-style helpers (ls, cat, head, tail, cp, rm, mv) and clipboard access.
Paths are resolved against a working directory state; OS errors from the
underlying calls propagate unchanged.
"""

import logging
from typing import Any, List, Optional

from navshell.core.navigation.resolver import PathExpr
from navshell.core.navigation.state import WorkingDirectoryState, get_state
from navshell.domain.constants import DEFAULT_HEAD_LINES
from navshell.domain.tree_models import FileHandle
from navshell.infra import clipboard, fs

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# READ OPERATIONS
# -----------------------------------------------------------------------------

def ls(path_expr: PathExpr = "", state: Optional[WorkingDirectoryState] = None) -> List[FileHandle]:
    """List the entries of a directory (current directory by default)."""
    target = _resolve(path_expr, state)
    return [FileHandle(p) for p in fs.list_children(target.path)]


def read_bytes(path_expr: PathExpr, state: Optional[WorkingDirectoryState] = None) -> bytes:
    return fs.read_bytes(_resolve(path_expr, state).path)


def cat(path_expr: PathExpr, state: Optional[WorkingDirectoryState] = None) -> str:
    """Return the whole content of a file as text."""
    return fs.read_text(_resolve(path_expr, state).path)


def head(
        path_expr: PathExpr,
        n: int = DEFAULT_HEAD_LINES,
        state: Optional[WorkingDirectoryState] = None,
) -> str:
    """Return the first n lines of a file, joined with newlines."""
    return "\n".join(_lines(cat(path_expr, state))[:max(n, 0)])


def tail(
        path_expr: PathExpr,
        n: int = DEFAULT_HEAD_LINES,
        state: Optional[WorkingDirectoryState] = None,
) -> str:
    """Return the last n lines of a file, joined with newlines."""
    lines = _lines(cat(path_expr, state))
    return "\n".join(lines[-n:]) if n > 0 else ""

# -----------------------------------------------------------------------------
# MUTATING OPERATIONS
# -----------------------------------------------------------------------------

def cp(source: PathExpr, dest: PathExpr, state: Optional[WorkingDirectoryState] = None) -> None:
    """Copy a file from source to dest."""
    fs.copy(_resolve(source, state).path, _resolve(dest, state).path)


def rm(path_expr: PathExpr, state: Optional[WorkingDirectoryState] = None) -> None:
    """Remove a file, symlink or empty directory."""
    fs.delete(_resolve(path_expr, state).path)


def mv(source: PathExpr, dest: PathExpr, state: Optional[WorkingDirectoryState] = None) -> None:
    """Move a file by copying it to dest and then removing source."""
    cp(source, dest, state)
    rm(source, state)
    logger.info(f"Moved {source} -> {dest}")

# -----------------------------------------------------------------------------
# CLIPBOARD
# -----------------------------------------------------------------------------

def paste() -> str:
    """Return the clipboard contents."""
    return clipboard.clipboard_get()


def copy(value: Any) -> None:
    """Replace the clipboard contents with str(value)."""
    clipboard.clipboard_set(str(value))


def _lines(text: str) -> List[str]:
    # Only \n, \r\n and \r end a line; form feeds and the like stay in the text
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _resolve(path_expr: PathExpr, state: Optional[WorkingDirectoryState]) -> FileHandle:
    return (state or get_state()).resolve(path_expr)
