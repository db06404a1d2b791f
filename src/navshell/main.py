from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Installs an exception hook that records fatal errors in the log before
printing the traceback, then hands control to the CLI controller.
"""

import logging
import sys
import traceback
from typing import Any, List, Optional


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and print its traceback to stderr.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("navshell.supervisor")
    logger.critical(f"FATAL EXCEPTION: {value}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (NAVSHELL)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI with the global exception hook installed.

    Returns:
        int: Process exit code.
    """
    sys.excepthook = global_exception_handler

    from navshell.interface.cli.app import main as cli_main

    try:
        return cli_main(argv)
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
