# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Navigation helpers over TreeViewNode parent and children links.

Upward queries (depth, root, ancestors) follow parent links and cost
O(depth). Downward traversal (walk, iter_descendants, iter_postorder)
follows the children order and uses an explicit stack, so tree depth is
not bounded by the interpreter recursion limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator

if TYPE_CHECKING:
    from .node import TreeViewNode


def depth(node: TreeViewNode[Any]) -> int:
    """Get the number of hops from node to its root (root=0)."""
    hops = 0
    while node.parent is not None:
        node = node.parent
        hops += 1
    return hops


def root(node: TreeViewNode[Any]) -> TreeViewNode[Any]:
    """Get the topmost node, or node itself if it has no parent."""
    while node.parent is not None:
        node = node.parent
    return node


def iter_ancestors(node: TreeViewNode[Any]) -> Iterator[TreeViewNode[Any]]:
    """Iterate over the ancestors of node, nearest first, root last.

    The node itself is never yielded.
    """
    parent = node.parent
    while parent is not None:
        yield parent
        parent = parent.parent


def for_each_ancestor(
    node: TreeViewNode[Any], visit: Callable[[TreeViewNode[Any]], Any]
) -> None:
    """Call visit on each ancestor of node, nearest first, root last.

    Selection aggregation relies on this order: a grandparent is only
    correct once its child (node's parent) has been recomputed.

    Example:
        >>> for_each_ancestor(leaf, lambda p: print(p.content))
    """
    for ancestor in iter_ancestors(node):
        visit(ancestor)


def is_ancestor_of(candidate: TreeViewNode[Any], node: TreeViewNode[Any]) -> bool:
    """True if candidate is a strict ancestor of node."""
    return any(ancestor is candidate for ancestor in iter_ancestors(node))


def _preorder(nodes: Iterable[TreeViewNode[Any]]) -> Iterator[TreeViewNode[Any]]:
    stack = list(nodes)
    stack.reverse()
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def iter_descendants(node: TreeViewNode[Any]) -> Iterator[TreeViewNode[Any]]:
    """Iterate over the subtree of node in pre-order, excluding node."""
    return _preorder(node.children)


def iter_postorder(nodes: Iterable[TreeViewNode[Any]]) -> Iterator[TreeViewNode[Any]]:
    """Iterate over a forest in post-order: children before their parent."""
    stack = [(node, False) for node in reversed(list(nodes))]
    while stack:
        node, visited = stack.pop()
        if visited or not node.children:
            yield node
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.children))


def walk(
    nodes: Iterable[TreeViewNode[Any]],
    callback: Callable[[TreeViewNode[Any]], Any] | None = None,
) -> Iterator[TreeViewNode[Any]] | None:
    """Walk a forest of nodes in pre-order.

    Args:
        nodes: Root nodes to walk, in order.
        callback: Optional function to call on each node.
                  If provided, walk returns None.

    Yields:
        Each node, parents before their children, if no callback provided.

    Example:
        >>> [n.content for n in walk(items)]
        ['a', 'a1', 'b']

        >>> walk(items, lambda n: print(n.content))
    """
    if callback is not None:
        for node in _preorder(nodes):
            callback(node)
        return None

    return _preorder(nodes)
