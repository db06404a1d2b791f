from __future__ import annotations

"""
Tree Algebra.

Generic operations over Leaf / Node trees. Every operation returns new
values; input trees are never modified.
"""

from typing import Callable, Iterator, List, Optional, Tuple, cast

from navshell.domain.tree_models import FileHandle, Leaf, Node, Tree

HandlePredicate = Callable[[FileHandle], bool]
HandleTransform = Callable[[FileHandle], FileHandle]


def linearize(tree: Tree) -> List[FileHandle]:
    """
    Flatten a tree into handles in pre-order.

    Each directory contributes its own handle once, followed by the
    linearization of each child in listing order.
    """
    out: List[FileHandle] = []
    stack: List[Tree] = [tree]
    while stack:
        current = stack.pop()
        out.append(current.handle)
        if isinstance(current, Node):
            stack.extend(reversed(current.children))
    return out


def walk(transform: HandleTransform, tree: Tree) -> Tree:
    """Apply transform to the handle at every position, keeping the shape."""
    rebuilt = _rebuild(tree, lambda leaf: Leaf(transform(leaf.handle)), transform, keep_empty=True)
    return cast(Tree, rebuilt)


def prune(predicate: HandlePredicate, tree: Tree) -> Optional[Tree]:
    """
    Keep leaves matching predicate and the directories that lead to them.

    Directories are not tested themselves: a Node survives iff at least one
    of its children survives. Empty directories are therefore dropped.

    Returns:
        Optional[Tree]: The pruned tree, or None if nothing survives.
    """
    return _rebuild(
        tree,
        lambda leaf: leaf if predicate(leaf.handle) else None,
        lambda handle: handle,
        keep_empty=False,
    )


def _rebuild(
        tree: Tree,
        on_leaf: Callable[[Leaf], Optional[Tree]],
        on_node: HandleTransform,
        keep_empty: bool,
) -> Optional[Tree]:
    """
    Post-order rebuild with an explicit stack (no recursion depth limit).

    Leaves map through on_leaf (None drops them); node handles map through
    on_node in pre-order. A Node left without children is dropped unless
    keep_empty is set.
    """
    if not isinstance(tree, Node):
        return on_leaf(tree)

    stack: List[Tuple[FileHandle, Iterator[Tree], List[Tree]]] = [
        (on_node(tree.handle), iter(tree.children), [])
    ]
    while True:
        handle, pending, built = stack[-1]
        child = next(pending, None)
        if child is None:
            stack.pop()
            node = Node(handle, tuple(built)) if built or keep_empty else None
            if not stack:
                return node
            if node is not None:
                stack[-1][2].append(node)
            continue

        if isinstance(child, Node):
            stack.append((on_node(child.handle), iter(child.children), []))
        else:
            mapped = on_leaf(child)
            if mapped is not None:
                built.append(mapped)
