from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, merges configuration sources (defaults, saved file,
command-line overrides), dispatches to the requested operation and maps
failures onto process exit codes.
"""

import code
import json
import re
import sys
from typing import Any, Dict, List, Optional

from navshell.core.analysis.tree_algebra import prune
from navshell.core.analysis.tree_builder import build_tree
from navshell.core.analysis.tree_renderer import render_tree
from navshell.core.navigation.state import WorkingDirectoryState, get_state
from navshell.core.query.find import find
from navshell.core.services import file_ops
from navshell.domain.config import get_default_config, load_config, validate_config
from navshell.domain.errors import ListingFailure, PathNotFound
from navshell.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
    get_recent_logs,
)
from navshell.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_PATH = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Resolve configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf)

    # 2. Logging bootstrap
    configure_logging(LoggingConfig.from_settings(conf, get_default_log_path))
    for w in warnings:
        logger.warning(f"Configuration constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if not args.command:
        parser.print_help()
        return EXIT_FAILURE

    # 3. Dispatch
    state = get_state()
    try:
        return _dispatch(args, conf, state)
    except PathNotFound as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_MISSING_PATH
    except re.error as e:
        logger.error(f"Invalid regex: {e}")
        print(f"ERROR: Invalid regex: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except ListingFailure as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except OSError as e:
        logger.error(f"Filesystem error: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _dispatch(args: Any, conf: Dict[str, Any], state: WorkingDirectoryState) -> int:
    command = args.command

    if command == "tree":
        t = build_tree(args.path, state)
        predicate = cli_args.args_to_predicate(args)
        if predicate is not None:
            t = prune(predicate, t)
            if t is None:
                print("No matching entries.", file=sys.stderr)
                return EXIT_FAILURE
        for line in render_tree(t, indent_unit=conf["indent_unit"], connectors=conf["ascii_tree"]):
            print(line)
        return EXIT_OK

    if command == "find":
        results = find(cli_args.args_to_predicate(args), args.path, state)
        paths = [h.path for h in results]
        if args.json_output:
            print(json.dumps(paths, ensure_ascii=False, indent=2))
        else:
            for p in paths:
                print(p)
        return EXIT_OK if paths else EXIT_FAILURE

    if command == "ls":
        target = state.resolve(args.path)
        if not target.exists:
            raise PathNotFound(target.path)
        for h in file_ops.ls(target, state):
            print(h.name)
        return EXIT_OK

    if command in ("head", "tail"):
        target = state.resolve(args.path)
        if not target.exists:
            raise PathNotFound(target.path)
        op = file_ops.head if command == "head" else file_ops.tail
        print(op(target, conf["head_lines"], state))
        return EXIT_OK

    if command == "log":
        print(get_recent_logs(args.lines), end="")
        return EXIT_OK

    if command == "repl":
        _run_repl()
        return EXIT_OK

    logger.error(f"Unknown command: {command}")
    return EXIT_FAILURE


def _run_repl() -> None:
    """Start an interactive console with the public API in scope."""
    import navshell

    namespace = {name: getattr(navshell, name) for name in navshell.__all__}
    banner = f"navshell {navshell.__version__} - cwd: {navshell.pwd()}"
    code.interact(banner=banner, local=namespace, exitmsg="")

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides for keys known to base."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())
