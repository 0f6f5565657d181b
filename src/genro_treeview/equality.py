# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Structural equality and hashing of TreeViewNode subtrees.

Two nodes are equal when all their data fields are equal and their
children are pairwise equal in order. The parent link is ignored, so a
subtree compares equal to its clone wherever either sits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .walker import iter_postorder

if TYPE_CHECKING:
    from .node import TreeViewNode

FIELDS = (
    'content', 'leading', 'value', 'collapsable', 'expanded', 'selected',
    'autofocus', 'lazy', 'loading', 'loading_widget', 'semantic_label',
    'on_invoked', 'on_expand_toggle',
)


def _fields_equal(a: TreeViewNode[Any], b: TreeViewNode[Any]) -> bool:
    for name in FIELDS:
        left, right = getattr(a, name), getattr(b, name)
        # bools are ints in Python: keep True != 1 and False != 0 apart
        if isinstance(left, bool) != isinstance(right, bool):
            return False
        if left != right:
            return False
    return len(a.children) == len(b.children)


def nodes_equal(a: TreeViewNode[Any], b: TreeViewNode[Any]) -> bool:
    """Return True if a and b hold equal data and equal ordered subtrees."""
    pairs = [(a, b)]
    while pairs:
        left, right = pairs.pop()
        if left is right:
            continue
        if not _fields_equal(left, right):
            return False
        pairs.extend(zip(left.children, right.children))
    return True


def _field_hash(item: Any) -> int:
    try:
        return hash(item)
    except TypeError:
        # unhashable payloads (lists, dicts) still compare by value
        return 0


def node_hash(node: TreeViewNode[Any]) -> int:
    """Hash consistent with nodes_equal: equal nodes hash equally."""
    hashes: dict[int, int] = {}
    for current in iter_postorder([node]):
        hashes[id(current)] = hash((
            tuple(_field_hash(getattr(current, name)) for name in FIELDS),
            tuple(hashes.pop(id(child)) for child in current.children),
        ))
    return hashes.pop(id(node))
