from __future__ import annotations

"""
Filesystem Handle and Tree Data Models.

Provides the immutable path handle shared by every component, and the
tagged recursive Tree type (Leaf / Node) produced by the tree builder and
consumed by the traversal algebra.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from navshell.infra import fs

# -----------------------------------------------------------------------------
# FILE HANDLE
# -----------------------------------------------------------------------------

class FileKind(str, Enum):
    """Classification of an existing filesystem object."""
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FileHandle:
    """
    Absolute, normalized path identifier.

    Metadata (kind, existence, size) is queried from the filesystem on every
    access and never stored, so a handle stays valid as a plain value.

    Attributes:
        path: Absolute normalized filesystem path.
    """
    path: str

    def __str__(self) -> str:
        return self.path

    def __fspath__(self) -> str:
        return self.path

    @property
    def name(self) -> str:
        """Final path component (empty for the filesystem root)."""
        return os.path.basename(self.path)

    @property
    def parent(self) -> Optional["FileHandle"]:
        """Handle of the containing directory, None at the filesystem root."""
        parent_path = os.path.dirname(self.path)
        if not parent_path or parent_path == self.path:
            return None
        return FileHandle(parent_path)

    @property
    def kind(self) -> Optional[FileKind]:
        """
        Kind of the object at this path, without following symlinks.

        Special files (fifos, sockets, devices) are reported as FILE since
        they are never expanded. Returns None when nothing exists.
        """
        info = fs.stat(self.path)
        if info is None:
            return None
        if info.is_symlink:
            return FileKind.SYMLINK
        if info.is_dir:
            return FileKind.DIRECTORY
        return FileKind.FILE

    @property
    def exists(self) -> bool:
        return fs.exists(self.path)

    @property
    def size(self) -> int:
        """Size in bytes, 0 when the path does not exist."""
        info = fs.stat(self.path)
        return info.size if info else 0

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

# -----------------------------------------------------------------------------
# TREE COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """
    A file or symlink entry. Never expanded further.

    Attributes:
        handle: Handle of the entry.
    """
    handle: FileHandle


@dataclass(frozen=True)
class Node:
    """
    A directory and its immediate entries, recursively expanded.

    Attributes:
        handle: Handle of the directory.
        children: Subtrees in the order the directory listing returned them.
    """
    handle: FileHandle
    children: Tuple["Tree", ...] = ()


Tree = Union[Leaf, Node]
