from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A small on-disk directory tree shared by the tree and find tests.
3. Isolated working-directory states (explicit and process-wide).
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from navshell.core.navigation import state as state_module  # noqa: E402
from navshell.core.navigation.state import WorkingDirectoryState  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the reference directory layout.

    Structure:
    /a
      x.txt
      /b
        y.txt
    """
    root = tmp_path / "a"
    root.mkdir()
    (root / "x.txt").write_text("x\n", encoding="utf-8")

    sub = root / "b"
    sub.mkdir()
    (sub / "y.txt").write_text("y\n", encoding="utf-8")

    return root


@pytest.fixture
def nav_state(tmp_path: Path) -> WorkingDirectoryState:
    """A fresh state rooted at tmp_path, with a fake home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return WorkingDirectoryState(str(tmp_path), home=str(home))


@pytest.fixture
def default_state(tmp_path: Path):
    """Replace the process-wide state for the duration of a test."""
    previous = state_module._DEFAULT_STATE
    fresh = state_module.reset_state(str(tmp_path))
    yield fresh
    state_module._DEFAULT_STATE = previous
