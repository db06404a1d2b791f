# tests/test_imports_smoke.py
# -----------------------------------------------------------------------------
# Smoke tests for the public package surface.
#
# Goals:
# - Ensure the package imports without a display or clipboard backend.
# - Validate that every name in __all__ is actually exported.
# - Run the reference walkthrough through the top-level API.
# -----------------------------------------------------------------------------

from __future__ import annotations

import navshell


def test_package_importable():
    assert navshell.__version__


def test_public_api_contract():
    for name in navshell.__all__:
        assert hasattr(navshell, name), f"navshell missing: {name}"


def test_repl_walkthrough(sample_tree, default_state):
    t = navshell.tree(str(sample_tree))
    assert [h.name for h in navshell.flatten_tree(t)] == ["a", "x.txt", "b", "y.txt"]

    hits = navshell.find(navshell.matches_exactly("y.txt", navshell.file_name), str(sample_tree))
    assert hits == [navshell.FileHandle(str(sample_tree / "b" / "y.txt"))]

    start = navshell.pwd()
    navshell.cd(str(sample_tree / "b"))
    navshell.up()
    assert navshell.pwd().path == str(sample_tree)
    navshell.back()
    navshell.back()
    assert navshell.pwd() == start
    assert navshell.history() == []

    pruned = navshell.filter_tree(navshell.matches_regex("^x", navshell.file_name), t)
    assert navshell.render_tree(pruned) == ["a", "  x.txt"]
    assert navshell.walk_tree(lambda h: h, t) == t
