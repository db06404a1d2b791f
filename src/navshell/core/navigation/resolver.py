from __future__ import annotations

"""
Path Resolution.

Turns user-supplied path expressions into absolute FileHandles. Resolution
is purely lexical: nothing is looked up on disk, so it cannot fail.
"""

import os
from typing import Union

from navshell.domain.constants import HOME_DIR, HOME_MARKER
from navshell.domain.tree_models import FileHandle

PathExpr = Union[str, "os.PathLike[str]", FileHandle]


def resolve(path_expr: PathExpr, cwd: FileHandle, home: str = HOME_DIR) -> FileHandle:
    """
    Resolve a path expression against a working directory.

    A FileHandle is returned unchanged. A leading '~' (alone or followed by
    a separator) is replaced by the home directory. Absolute paths are only
    normalized; anything else is joined onto cwd first.

    Args:
        path_expr: Raw path string, path-like object, or FileHandle.
        cwd: Base directory for relative paths.
        home: Home directory used for '~' expansion.

    Returns:
        FileHandle: Absolute normalized handle. It may not exist.
    """
    if isinstance(path_expr, FileHandle):
        return path_expr

    raw = os.fspath(path_expr)
    expanded = _expand_home(raw, home)

    if os.path.isabs(expanded):
        return FileHandle(os.path.normpath(expanded))

    return FileHandle(os.path.normpath(os.path.join(cwd.path, expanded)))


def _expand_home(raw: str, home: str) -> str:
    if raw == HOME_MARKER:
        return home
    if raw.startswith(HOME_MARKER) and raw[1:2] in (os.sep, "/"):
        return home + raw[1:]
    return raw
