# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreeView - State model for collapsible, multi-selectable trees.

A lightweight, zero-dependency library tracking hierarchy, expansion and
tri-state selection of tree view items, with rendering left to the
view layer.
"""

__version__ = "0.1.0"

from .clone import clone
from .equality import node_hash, nodes_equal
from .exceptions import (
    AlreadyAttachedError,
    AttachmentError,
    CycleError,
    InvalidSelectionError,
    NoEventLoopError,
    SelectionModeError,
    TreeViewError,
)
from .hooks import InvocationReason, invoke, schedule_hook, toggle_expanded
from .loading import as_dict, load_children, load_from_dict, load_from_list, mark_loading
from .node import TreeViewNode, TriState, is_expandable
from .selection import refresh_selection, set_subtree_selection, update_selected
from .treeview import SelectionMode, TreeView
from .walker import (
    depth,
    for_each_ancestor,
    is_ancestor_of,
    iter_ancestors,
    iter_descendants,
    iter_postorder,
    root,
    walk,
)

__all__ = [
    # Core classes
    "TreeViewNode",
    "TriState",
    "TreeView",
    "SelectionMode",
    "InvocationReason",
    # Navigation
    "depth",
    "root",
    "for_each_ancestor",
    "iter_ancestors",
    "iter_descendants",
    "iter_postorder",
    "is_ancestor_of",
    "is_expandable",
    "walk",
    # Selection
    "update_selected",
    "set_subtree_selection",
    "refresh_selection",
    # Clone and equality
    "clone",
    "nodes_equal",
    "node_hash",
    # Hooks
    "schedule_hook",
    "toggle_expanded",
    "invoke",
    # Loading
    "load_from_dict",
    "load_from_list",
    "as_dict",
    "load_children",
    "mark_loading",
    # Exceptions
    "TreeViewError",
    "AttachmentError",
    "AlreadyAttachedError",
    "CycleError",
    "InvalidSelectionError",
    "SelectionModeError",
    "NoEventLoopError",
]
