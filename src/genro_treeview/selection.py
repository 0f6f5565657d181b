# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tri-state selection propagation.

Two complementary operations keep parent selection consistent with
descendants:

- update_selected: recompute one node from its direct children
  (single level, bottom-up).
- set_subtree_selection: force a concrete bool on a whole subtree
  (top-down), then re-aggregate every ancestor nearest-first.

Selection values are True, False, or None for indeterminate.

Example:
    >>> b, c = TreeViewNode('B'), TreeViewNode('C')
    >>> a = TreeViewNode('A', children=[b, c])
    >>> set_subtree_selection(b, True, True)
    >>> a.selected is None
    True
    >>> set_subtree_selection(c, True, True)
    >>> a.selected
    True
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .exceptions import InvalidSelectionError
from .node import TreeViewNode
from .walker import for_each_ancestor, iter_descendants, iter_postorder

logger = logging.getLogger(__name__)


def update_selected(
    node: TreeViewNode[Any], deselect_parent_when_children_deselected: bool
) -> None:
    """Recompute node.selected from the states of its direct children.

    Deeper levels are assumed already consistent, which holds when this
    is driven bottom-up through for_each_ancestor.

    When deselect_parent_when_children_deselected is False and the
    children are all False (or there are none), the node is not forced
    to False:
    - an indeterminate childless node recovers to True
    - a True node is demoted to indeterminate
    - any other state is left unchanged

    Otherwise the node becomes None on mixed or indeterminate children,
    True if some child is True, False in every other case.

    Args:
        node: The node to recompute.
        deselect_parent_when_children_deselected: Selection policy flag.

    Raises:
        TypeError: If node is not a TreeViewNode.
    """
    if not isinstance(node, TreeViewNode):
        raise TypeError(f"Expected TreeViewNode, not {type(node).__name__}")

    has_null = has_false = has_true = False
    for child in node.children:
        if child.selected is None:
            has_null = True
        elif child.selected:
            has_true = True
        else:
            has_false = True

    children = node.children
    if not deselect_parent_when_children_deselected and (
        not children or (not has_null and has_false and not has_true)
    ):
        if node.selected is None and not children:
            node.selected = True
        elif node.selected is True:
            node.selected = None
    elif has_null or (has_true and has_false):
        node.selected = None
    elif has_true:
        node.selected = True
    else:
        node.selected = False

    logger.debug("Aggregated %r -> %r", node.content, node.selected)


def set_subtree_selection(
    node: TreeViewNode[Any],
    value: bool,
    deselect_parent_when_children_deselected: bool,
) -> None:
    """Select or deselect node and its whole subtree, then fix ancestors.

    Args:
        node: The toggled node.
        value: Concrete selection to apply. Never None.
        deselect_parent_when_children_deselected: Policy passed to
            update_selected for every ancestor.

    Raises:
        InvalidSelectionError: If value is not a bool.
    """
    if not isinstance(value, bool):
        raise InvalidSelectionError(
            f"Selection value must be True or False, not {value!r}"
        )

    node.selected = value
    for descendant in iter_descendants(node):
        descendant.selected = value
    logger.debug("Set subtree of %r to %r", node.content, value)

    for_each_ancestor(
        node,
        lambda parent: update_selected(
            parent, deselect_parent_when_children_deselected
        ),
    )


def refresh_selection(
    nodes: Iterable[TreeViewNode[Any]],
    deselect_parent_when_children_deselected: bool,
) -> None:
    """Re-aggregate every node that has children, bottom-up.

    Leaves keep their state. Useful after a bulk edit or when a tree is
    assembled with inconsistent initial selections.
    """
    for node in iter_postorder(nodes):
        if node.children:
            update_selected(node, deselect_parent_when_children_deselected)
