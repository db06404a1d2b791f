from __future__ import annotations

"""
Find.

Searches a subtree for entries matching a predicate by composing the tree
builder, pre-order linearization, and a filter.
"""

import logging
from typing import Callable, List, Optional

from navshell.core.analysis.tree_algebra import linearize
from navshell.core.analysis.tree_builder import build_tree
from navshell.core.navigation.resolver import PathExpr
from navshell.core.navigation.state import WorkingDirectoryState
from navshell.domain.tree_models import FileHandle

logger = logging.getLogger(__name__)


def find(
        predicate: Callable[[FileHandle], bool],
        path_expr: PathExpr = "",
        state: Optional[WorkingDirectoryState] = None,
) -> List[FileHandle]:
    """
    Return every entry under path_expr (root included) passing predicate.

    Args:
        predicate: Test applied to each handle, e.g. built with matches_*.
        path_expr: Root of the search; defaults to the current directory.
        state: Working directory state used for resolution.

    Returns:
        List[FileHandle]: Matches in pre-order.

    Raises:
        PathNotFound: If path_expr does not exist.
        ListingFailure: If a directory in the subtree cannot be read.
    """
    results = [h for h in linearize(build_tree(path_expr, state)) if predicate(h)]
    logger.debug(f"find: {len(results)} match(es) under {path_expr or '.'}")
    return results
