from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point in a separate interpreter to validate argument
parsing, exit codes and stdout/stderr behaviour. HOME is redirected so the
run never touches the real user data directory.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"


def run_cli(args: List[str], cwd: Path, home: Path) -> subprocess.CompletedProcess:
    """
    Execute `python -m navshell.main` with src on PYTHONPATH.

    Args:
        args: Command line arguments for navshell.
        cwd: Working directory of the subprocess.
        home: Directory exported as HOME / USERPROFILE.

    Returns:
        subprocess.CompletedProcess: Exit code and captured streams.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)

    return subprocess.run(
        [sys.executable, "-m", "navshell.main"] + args,
        cwd=str(cwd),
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def fake_home(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    return home


def test_cli_tree_relative_to_cwd(sample_tree: Path, fake_home: Path) -> None:
    result = run_cli(["--use-defaults", "tree"], cwd=sample_tree, home=fake_home)

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == ["a", "  x.txt", "  b", "    y.txt"]


def test_cli_find_by_name(sample_tree: Path, fake_home: Path) -> None:
    result = run_cli(["--use-defaults", "find", str(sample_tree), "--name", "y.txt"],
                     cwd=sample_tree, home=fake_home)

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == str(sample_tree / "b" / "y.txt")


def test_cli_missing_path(sample_tree: Path, fake_home: Path) -> None:
    result = run_cli(["--use-defaults", "tree", "missing"], cwd=sample_tree, home=fake_home)

    assert result.returncode == 2
    assert "Path does not exist" in result.stderr


def test_cli_invalid_regex(sample_tree: Path, fake_home: Path) -> None:
    result = run_cli(["--use-defaults", "find", "--regex", "["], cwd=sample_tree, home=fake_home)

    assert result.returncode == 1
    assert "ERROR: Invalid regex" in result.stderr
    assert "CRITICAL ERROR" not in result.stderr


def test_cli_home_expansion(sample_tree: Path, fake_home: Path) -> None:
    (fake_home / "notes.md").write_text("# notes\n", encoding="utf-8")

    result = run_cli(["--use-defaults", "ls", "~"], cwd=sample_tree, home=fake_home)

    assert result.returncode == 0, result.stderr
    assert "notes.md" in result.stdout.splitlines()


def test_cli_saved_config_is_applied(sample_tree: Path, fake_home: Path) -> None:
    config_dir = fake_home / ".navshell"
    config_dir.mkdir()
    (config_dir / "config.json").write_text('{"ascii_tree": true}', encoding="utf-8")

    result = run_cli(["tree"], cwd=sample_tree, home=fake_home)

    assert result.returncode == 0, result.stderr
    assert "└── b" in result.stdout
