# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Deep cloning of TreeViewNode subtrees."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from .node import TreeViewNode
from .walker import iter_postorder

T = TypeVar('T')


def clone(
    node: TreeViewNode[T],
    copy_payload: Callable[[Any], Any] | None = None,
) -> TreeViewNode[T]:
    """Return an independent copy of node and its subtree.

    Field values are carried over as they are (payloads and hooks are
    shared references). Children are cloned bottom-up and attached to
    the new copy. The copy is a new root: its parent is None.

    Args:
        node: The node to clone.
        copy_payload: Optional function applied to content, leading and
            value, e.g. copy.deepcopy for fully detached payloads.

    Returns:
        A node equal to the original with no shared TreeViewNode instances.
    """
    payload = copy_payload or (lambda item: item)
    copies: dict[int, TreeViewNode[T]] = {}
    for original in iter_postorder([node]):
        copies[id(original)] = TreeViewNode(
            payload(original.content),
            leading=payload(original.leading),
            value=payload(original.value),
            children=[copies.pop(id(child)) for child in original.children],
            collapsable=original.collapsable,
            expanded=original.expanded,
            selected=original.selected,
            autofocus=original.autofocus,
            lazy=original.lazy,
            loading=original.loading,
            loading_widget=original.loading_widget,
            semantic_label=original.semantic_label,
            on_invoked=original.on_invoked,
            on_expand_toggle=original.on_expand_toggle,
        )
    return copies.pop(id(node))
