from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin synchronous wrappers over the 'os' and 'shutil' modules: directory
listing, lstat-based metadata, byte reads, copy and delete. None of these
retry; OS errors propagate to the caller unmodified. Also resolves the
per-user data directory used for configuration and log files.
"""

import logging
import os
import shutil
import stat as stat_mod
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "NavShell"
UNIX_APP_DIR_NAME = ".navshell"

# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EntryStat:
    """
    Metadata snapshot of a single path, taken without following symlinks.

    Attributes:
        is_dir: True for real directories.
        is_symlink: True for symbolic links (dangling or not).
        is_regular: True for regular files.
        size: Size in bytes as reported by lstat.
    """
    is_dir: bool
    is_symlink: bool
    is_regular: bool
    size: int

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/NavShell
    - Linux/Mac: ~/.navshell

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create user data dir '{path}': {e}")

    return os.path.abspath(path)

# -----------------------------------------------------------------------------
# METADATA API
# -----------------------------------------------------------------------------

def stat(path: str) -> Optional[EntryStat]:
    """
    Query metadata for a path without following symlinks.

    Args:
        path: Absolute filesystem path.

    Returns:
        Optional[EntryStat]: Metadata, or None if nothing exists at the path.
    """
    try:
        st = os.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        return None

    return EntryStat(
        is_dir=stat_mod.S_ISDIR(st.st_mode),
        is_symlink=stat_mod.S_ISLNK(st.st_mode),
        is_regular=stat_mod.S_ISREG(st.st_mode),
        size=st.st_size,
    )


def exists(path: str) -> bool:
    """True if any object (including a dangling symlink) exists at path."""
    return os.path.lexists(path)


def target_exists(path: str) -> bool:
    """True if path exists after following symlinks (False for dangling links)."""
    return os.path.exists(path)

# -----------------------------------------------------------------------------
# DIRECTORY AND CONTENT API
# -----------------------------------------------------------------------------

def list_children(path: str) -> List[str]:
    """
    Enumerate the immediate entries of a directory.

    Entries are ordered deterministically: non-directories first, then
    directories, each group sorted by name. Symlinks to directories count as
    non-directories since they are never descended into.

    Args:
        path: Absolute directory path.

    Returns:
        List[str]: Absolute paths of the children.

    Raises:
        OSError: If the directory cannot be read.
    """
    with os.scandir(path) as it:
        entries = [(entry.is_dir(follow_symlinks=False), entry.name) for entry in it]

    entries.sort()
    logger.debug(f"Listed {len(entries)} entries in {path}")
    return [os.path.join(path, name) for _, name in entries]


def read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def read_text(path: str, encoding: str = "utf-8") -> str:
    with open(path, "r", encoding=encoding, errors="replace") as f:
        return f.read()


def copy(source: str, dest: str) -> None:
    """
    Copy the contents of a file to dest (overwriting any existing file).

    Args:
        source: Absolute path of the file to copy.
        dest: Absolute destination path.
    """
    shutil.copyfile(source, dest)
    logger.debug(f"Copied {source} -> {dest}")


def delete(path: str) -> None:
    """
    Remove a file, symlink, or empty directory.

    Raises:
        OSError: If the path is missing or a non-empty directory.
    """
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)
    logger.debug(f"Deleted {path}")
