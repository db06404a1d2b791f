from __future__ import annotations

"""
Navigation Error Taxonomy.

Exceptions raised by the tree builder and the working-directory state.
Filesystem-originated failures subclass the matching built-in OSError types
so callers can keep catching what the platform would have raised.
"""


class NavShellError(Exception):
    """Base class for all errors raised by navshell."""


class PathNotFound(NavShellError, FileNotFoundError):
    """
    A resolved path does not point to an existing filesystem object.

    Attributes:
        path: Absolute path that failed the lookup.
    """

    def __init__(self, path: str):
        super().__init__(f"Path does not exist: {path}")
        self.path = path


class ListingFailure(NavShellError, OSError):
    """
    A directory could not be enumerated while building a tree.

    Attributes:
        path: Absolute path of the directory that failed to list.
        reason: Message of the underlying OS error.
    """

    def __init__(self, path: str, reason: str = ""):
        message = f"Cannot list directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
        self.reason = reason


class ClipboardUnavailable(NavShellError):
    """The system clipboard could not be read."""
