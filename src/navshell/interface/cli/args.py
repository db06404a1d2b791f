from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (global flags plus one subcommand per
operation) and translates parsed namespaces into predicates and
configuration overrides.
"""

import argparse
from typing import Any, Callable, Dict, List, Optional

from navshell.core.query.predicates import (
    all_of,
    file_name,
    file_type,
    matches_exactly,
    matches_regex,
)
from navshell.domain.tree_models import FileKind

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the navshell CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="navshell",
        description="Navigate and inspect directory trees.",
    )

    # --- Global Flags ---
    p.add_argument("--debug", action="store_true", help="Enable DEBUG logging.")
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    sub = p.add_subparsers(dest="command")

    # --- tree ---
    p_tree = sub.add_parser("tree", help="Print the directory tree.")
    p_tree.add_argument("path", nargs="?", default="")
    p_tree.add_argument(
        "--ascii",
        dest="ascii_tree",
        action="store_true",
        default=None,
        help="Draw box connectors instead of plain indentation.",
    )
    p_tree.add_argument("--indent", dest="indent_unit", default=None, help="Indent unit string.")
    _add_match_args(p_tree, required=False)

    # --- find ---
    p_find = sub.add_parser("find", help="List entries matching a name or regex.")
    p_find.add_argument("path", nargs="?", default="")
    _add_match_args(p_find, required=True)
    p_find.add_argument(
        "--type",
        dest="kind",
        choices=[k.value for k in FileKind],
        default=None,
        help="Restrict matches to one kind of entry.",
    )
    p_find.add_argument("--json", dest="json_output", action="store_true", help="Emit JSON.")

    # --- ls ---
    p_ls = sub.add_parser("ls", help="List directory entries.")
    p_ls.add_argument("path", nargs="?", default="")

    # --- head / tail ---
    for name in ("head", "tail"):
        p_text = sub.add_parser(name, help=f"Print the {name} of a file.")
        p_text.add_argument("path")
        p_text.add_argument("-n", dest="lines", type=int, default=None)

    # --- log ---
    p_log = sub.add_parser("log", help="Print the end of the navshell log file.")
    p_log.add_argument("-n", dest="lines", type=int, default=50)

    # --- repl ---
    sub.add_parser("repl", help="Start a Python console with the navshell API loaded.")

    return p


def _add_match_args(parser: argparse.ArgumentParser, required: bool) -> None:
    group = parser.add_mutually_exclusive_group(required=required)
    group.add_argument("--name", default=None, help="Exact file name to match.")
    group.add_argument("--regex", default=None, help="Regex searched within file names.")

# -----------------------------------------------------------------------------
# NAMESPACE MAPPING
# -----------------------------------------------------------------------------

def args_to_predicate(args: argparse.Namespace) -> Optional[Callable[[Any], bool]]:
    """
    Build the match predicate described by --name / --regex / --type.

    Returns:
        Optional[Callable]: The predicate, or None when no filter was given.
    """
    predicates: List[Callable[[Any], bool]] = []

    name = getattr(args, "name", None)
    regex = getattr(args, "regex", None)
    kind = getattr(args, "kind", None)

    if name is not None:
        predicates.append(matches_exactly(name, file_name))
    if regex is not None:
        predicates.append(matches_regex(regex, file_name))
    if kind is not None:
        predicates.append(matches_exactly(FileKind(kind), file_type))

    if not predicates:
        return None
    if len(predicates) == 1:
        return predicates[0]
    return all_of(*predicates)


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Map CLI flags onto configuration keys. Unset flags map to None.

    Args:
        args: Parsed namespace.

    Returns:
        Dict[str, Any]: Overrides keyed like the configuration dictionary.
    """
    overrides: Dict[str, Any] = {
        "ascii_tree": getattr(args, "ascii_tree", None),
        "indent_unit": getattr(args, "indent_unit", None),
        "head_lines": None,
        "log_level": "DEBUG" if args.debug else None,
    }

    if getattr(args, "command", None) in ("head", "tail"):
        overrides["head_lines"] = args.lines

    return overrides
