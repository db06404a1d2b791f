from __future__ import annotations

"""
Predicate Combinators.

Builders for reusable predicates of the form x -> compare(value, extract(x)),
boolean combinators, and the extractor functions that pair with them:

    find(matches_exactly("setup.py", file_name))
    find(all_of(matches_regex(r"\\.py$", file_name), negate(is_hidden)))

Extractors accept any path expression; strings are resolved against the
process-wide working directory state.
"""

import operator
import re
from typing import Any, Callable, Optional, Pattern, Union

from navshell.core.navigation.resolver import PathExpr
from navshell.core.navigation.state import get_state
from navshell.domain.tree_models import FileKind

Predicate = Callable[[Any], bool]
Extractor = Callable[[Any], Any]

# -----------------------------------------------------------------------------
# BUILDERS
# -----------------------------------------------------------------------------

def matches(value: Any, extract: Extractor, compare: Callable[[Any, Any], Any]) -> Predicate:
    """
    Build a predicate comparing value against extract(x).

    Args:
        value: Reference value, passed as compare's first argument.
        extract: Maps the predicate input to the value under test.
        compare: Two-argument comparison; its result is coerced to bool.
    """
    def predicate(x: Any) -> bool:
        return bool(compare(value, extract(x)))

    return predicate


def matches_exactly(value: Any, extract: Extractor) -> Predicate:
    """True iff extract(x) == value."""
    return matches(value, extract, operator.eq)


def matches_regex(pattern: Union[str, Pattern[str]], extract: Extractor) -> Predicate:
    """True iff pattern is found anywhere within str(extract(x))."""
    rx = re.compile(pattern) if isinstance(pattern, str) else pattern
    return matches(rx, extract, _regex_found)


def all_of(*predicates: Predicate) -> Predicate:
    return lambda x: all(p(x) for p in predicates)


def any_of(*predicates: Predicate) -> Predicate:
    return lambda x: any(p(x) for p in predicates)


def negate(predicate: Predicate) -> Predicate:
    return lambda x: not predicate(x)

# -----------------------------------------------------------------------------
# EXTRACTORS
# -----------------------------------------------------------------------------

def file_name(path_expr: PathExpr) -> str:
    return get_state().resolve(path_expr).name


def file_path(path_expr: PathExpr) -> str:
    return get_state().resolve(path_expr).path


def file_type(path_expr: PathExpr) -> Optional[FileKind]:
    return get_state().resolve(path_expr).kind


def file_size(path_expr: PathExpr) -> int:
    return get_state().resolve(path_expr).size


def exists(path_expr: PathExpr) -> bool:
    return get_state().resolve(path_expr).exists


def is_hidden(path_expr: PathExpr) -> bool:
    """True for dotfiles."""
    return get_state().resolve(path_expr).is_hidden


def _regex_found(rx: Pattern[str], text: Any) -> bool:
    return rx.search(str(text)) is not None
