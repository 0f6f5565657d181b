# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeView - selection and expansion state of a whole tree.

TreeView holds the root items of one tree together with the selection
policy the view layer would apply, and exposes the actions a user can
trigger (toggle selection, toggle expansion, press) as plain methods.
Nothing here renders: the view layer reads selected_items and
visible_items() and calls the actions.

Selection Modes:
    - NONE: items cannot be selected
    - SINGLE: selecting an item deselects every other item
    - MULTIPLE: tri-state checkboxes, propagated up and down the tree

Example:
    >>> view = TreeView(
    ...     load_from_list([{'content': 'A', 'children': ['B', 'C']}]),
    ...     selection_mode=SelectionMode.MULTIPLE,
    ... )
    >>> b = view.find(lambda n: n.content == 'B')
    >>> view.toggle_selection(b)
    >>> [n.content for n in view.selected_items]
    ['B']
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Iterable, Iterator

from .exceptions import AttachmentError, SelectionModeError
from .hooks import InvocationReason, invoke, schedule_hook
from .hooks import toggle_expanded as _toggle_expanded
from .node import TreeViewNode
from .selection import refresh_selection, set_subtree_selection
from .walker import walk

logger = logging.getLogger(__name__)


class SelectionMode(Enum):
    """How items of a TreeView can be selected."""

    NONE = 'none'
    SINGLE = 'single'
    MULTIPLE = 'multiple'


class TreeView:
    """Selection and expansion state over a list of root items.

    Attributes:
        items: The root nodes, in display order.
        selection_mode: The SelectionMode in effect.
        deselect_parent_when_children_deselected: Aggregation policy used
            in MULTIPLE mode. If False, a parent whose children are all
            deselected is not forced to deselected.
        include_partially_selected_items: If True, selected_items also
            lists indeterminate nodes.
    """

    __slots__ = (
        'items', 'selection_mode', 'deselect_parent_when_children_deselected',
        'include_partially_selected_items', 'on_selection_changed',
        'on_item_invoked', 'on_item_expand_toggle', '_loop', '_tasks',
    )

    def __init__(
        self,
        items: Iterable[TreeViewNode[Any]],
        selection_mode: SelectionMode = SelectionMode.NONE,
        deselect_parent_when_children_deselected: bool = True,
        include_partially_selected_items: bool = False,
        on_selection_changed: Callable[..., Any] | None = None,
        on_item_invoked: Callable[..., Any] | None = None,
        on_item_expand_toggle: Callable[..., Any] | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Initialize a TreeView.

        Args:
            items: Root nodes. None of them may have a parent.
            selection_mode: How items can be selected.
            deselect_parent_when_children_deselected: Aggregation policy.
            include_partially_selected_items: List indeterminate nodes
                in selected_items.
            on_selection_changed: Hook called with the selected items
                after each selection change.
            on_item_invoked: Hook called with (item, InvocationReason).
            on_item_expand_toggle: Hook called with (item, expanded).
            loop: Event loop for hooks. Defaults to the running loop.

        Raises:
            AttachmentError: If an item is not a root node.
        """
        self.items = list(items)
        for item in self.items:
            if item.parent is not None:
                raise AttachmentError(f"{item!r} is not a root node")
        self.selection_mode = selection_mode
        self.deselect_parent_when_children_deselected = (
            deselect_parent_when_children_deselected
        )
        self.include_partially_selected_items = include_partially_selected_items
        self.on_selection_changed = on_selection_changed
        self.on_item_invoked = on_item_invoked
        self.on_item_expand_toggle = on_item_expand_toggle
        self._loop = loop
        self._tasks: set[asyncio.Task[Any]] = set()

        if selection_mode is SelectionMode.MULTIPLE:
            refresh_selection(self.items, deselect_parent_when_children_deselected)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"TreeView({len(self.items)} items, {self.selection_mode.name})"

    def __len__(self) -> int:
        """Return the number of root items."""
        return len(self.items)

    def __iter__(self) -> Iterator[TreeViewNode[Any]]:
        """Iterate over root items in order."""
        return iter(self.items)

    # ==================== Queries ====================

    @property
    def selected_items(self) -> list[TreeViewNode[Any]]:
        """All selected nodes in pre-order.

        Indeterminate nodes are included only when
        include_partially_selected_items is set.
        """
        return [
            node for node in walk(self.items)
            if node.selected is True
            or (node.selected is None and self.include_partially_selected_items)
        ]

    def visible_items(self) -> list[TreeViewNode[Any]]:
        """Flatten the tree as displayed: children only under expanded nodes."""
        result: list[TreeViewNode[Any]] = []
        stack = list(reversed(self.items))
        while stack:
            node = stack.pop()
            result.append(node)
            if node.expanded:
                stack.extend(reversed(node.children))
        return result

    def find(
        self, predicate: Callable[[TreeViewNode[Any]], bool]
    ) -> TreeViewNode[Any] | None:
        """Return the first node in pre-order matching predicate, or None."""
        return next((node for node in walk(self.items) if predicate(node)), None)

    def execute_for_all(self, callback: Callable[[TreeViewNode[Any]], Any]) -> None:
        """Call callback on every node of the tree, in pre-order."""
        walk(self.items, callback)

    @property
    def pending_hooks(self) -> set[asyncio.Task[Any]]:
        """Hook tasks scheduled by this view that have not finished yet."""
        return set(self._tasks)

    # ==================== Expansion ====================

    def expand_all(self) -> None:
        """Expand every expandable node."""
        for node in walk(self.items):
            if node.is_expandable:
                node.expanded = True

    def collapse_all(self) -> None:
        """Collapse every collapsable node."""
        for node in walk(self.items):
            if node.collapsable and node.is_expandable:
                node.expanded = False

    def toggle_expanded(self, item: TreeViewNode[Any]) -> None:
        """Flip the expansion of item and fire the expansion hooks."""
        before = item.expanded
        self._keep(_toggle_expanded(item, loop=self._loop))
        if item.expanded != before:
            self._schedule(self.on_item_expand_toggle, item, item.expanded)
            self._invoked(item, InvocationReason.EXPANDER)

    # ==================== Selection ====================

    def toggle_selection(self, item: TreeViewNode[Any]) -> None:
        """Toggle the selection of item according to the selection mode.

        In SINGLE mode item becomes the only selected node. In MULTIPLE
        mode a selected item is deselected and an unselected or
        indeterminate one is selected, together with its subtree.

        Raises:
            SelectionModeError: In NONE mode.
        """
        if self.selection_mode is SelectionMode.NONE:
            raise SelectionModeError("Selection is disabled in NONE mode")

        if self.selection_mode is SelectionMode.SINGLE:
            for node in walk(self.items):
                node.selected = False
            item.selected = True
        else:
            set_subtree_selection(
                item,
                item.selected is not True,
                self.deselect_parent_when_children_deselected,
            )
        logger.debug("Selection toggled on %r", item.content)

        self._schedule(self.on_selection_changed, self.selected_items)
        self._invoked(item, InvocationReason.SELECTION_TOGGLED)

    def press(self, item: TreeViewNode[Any]) -> None:
        """Report a press on item to the invocation hooks."""
        self._invoked(item, InvocationReason.PRESSED)

    def _invoked(self, item: TreeViewNode[Any], reason: InvocationReason) -> None:
        self._keep(invoke(item, reason, loop=self._loop))
        self._schedule(self.on_item_invoked, item, reason)

    def _schedule(self, hook: Callable[..., Any] | None, *args: Any) -> None:
        self._keep(schedule_hook(hook, *args, loop=self._loop))

    def _keep(self, task: asyncio.Task[Any] | None) -> None:
        # the loop holds tasks weakly: keep them alive until done
        if task is not None:
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
