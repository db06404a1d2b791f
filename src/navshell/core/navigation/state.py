from __future__ import annotations

"""
Working Directory State.

Holds the directory that relative paths resolve against, together with an
undo stack of the directories previously held. The state is independent
from the process's real working directory (os.chdir is never called).

Transitions:
    cd   -> push previous directory, move to an existing target.
    up   -> push previous directory, move to the parent (no-op at root).
    back -> pop exactly one directory and restore it (no-op when empty).

No locking is performed; embedders sharing a state across threads must
serialise calls themselves.
"""

import logging
import os
from typing import List, Optional, Tuple

from navshell.core.navigation.resolver import PathExpr, resolve
from navshell.domain.constants import HOME_DIR
from navshell.domain.errors import PathNotFound
from navshell.domain.tree_models import FileHandle
from navshell.infra import fs

logger = logging.getLogger(__name__)


class WorkingDirectoryState:
    """
    Current directory plus history of prior directories (most recent last).

    Attributes:
        home: Directory substituted for a leading '~'.
    """

    def __init__(self, start: Optional[PathExpr] = None, home: str = HOME_DIR):
        """
        Args:
            start: Initial directory; defaults to the process's cwd.
            home: Home directory used for '~' expansion.
        """
        self.home = home
        base = FileHandle(os.path.normpath(os.path.abspath(os.getcwd())))
        self._current: FileHandle = resolve(start, base, home) if start is not None else base
        self._history: List[FileHandle] = []

    def __repr__(self) -> str:
        return f"WorkingDirectoryState(current={self._current.path!r}, history={len(self._history)})"

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def current(self) -> FileHandle:
        return self._current

    @property
    def history(self) -> Tuple[FileHandle, ...]:
        """Prior directories, oldest first. Read-only copy."""
        return tuple(self._history)

    def pwd(self) -> FileHandle:
        return self._current

    def resolve(self, path_expr: PathExpr) -> FileHandle:
        """Resolve path_expr against the current directory."""
        return resolve(path_expr, self._current, self.home)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def cd(self, path_expr: PathExpr) -> FileHandle:
        """
        Move to path_expr if it exists.

        Symlinks are followed for the existence check, so a dangling link
        counts as missing. A missing target is reported (warning log plus a
        message on stdout) and leaves the state untouched. Use back() or up()
        rather than '-' or '..' to navigate relative to history.

        Returns:
            FileHandle: The current directory after the call.
        """
        target = self.resolve(path_expr)
        if not fs.target_exists(target.path):
            err = PathNotFound(target.path)
            logger.warning(str(err))
            print(err)
            return self._current

        self._push_and_move(target)
        return self._current

    def up(self) -> FileHandle:
        """Move to the parent directory. No-op at the filesystem root."""
        parent = self._current.parent
        if parent is None:
            logger.debug(f"up: {self._current.path} has no parent")
            return self._current

        self._push_and_move(parent)
        return self._current

    def back(self) -> FileHandle:
        """Restore the most recent prior directory. No-op on empty history."""
        if not self._history:
            logger.debug("back: history is empty")
            return self._current

        self._current = self._history.pop()
        logger.debug(f"back -> {self._current.path}")
        return self._current

    def _push_and_move(self, target: FileHandle) -> None:
        self._history.append(self._current)
        self._current = target
        logger.debug(f"cwd -> {target.path}")

# -----------------------------------------------------------------------------
# DEFAULT SESSION
# -----------------------------------------------------------------------------

_DEFAULT_STATE: Optional[WorkingDirectoryState] = None


def get_state() -> WorkingDirectoryState:
    """Return the process-wide state, created from os.getcwd() on first use."""
    global _DEFAULT_STATE
    if _DEFAULT_STATE is None:
        _DEFAULT_STATE = WorkingDirectoryState()
    return _DEFAULT_STATE


def reset_state(start: Optional[PathExpr] = None) -> WorkingDirectoryState:
    """Replace the process-wide state with a fresh one and return it."""
    global _DEFAULT_STATE
    _DEFAULT_STATE = WorkingDirectoryState(start)
    return _DEFAULT_STATE
