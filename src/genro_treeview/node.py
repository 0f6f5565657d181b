# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeView node classes."""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Generic, Iterable, TypeVar

from .exceptions import AlreadyAttachedError, CycleError

logger = logging.getLogger(__name__)

T = TypeVar('T')

#: Tri-state selection value: True (selected), False (unselected),
#: None (indeterminate, some descendants selected).
TriState = bool | None

Hook = Callable[..., Any]


class TreeViewNode(Generic[T]):
    """A node in a collapsible, multi-selectable tree.

    Each node has:
    - content: The display payload (required, opaque)
    - leading: Optional secondary payload, e.g. an icon
    - value: Optional caller payload, typed by the generic parameter
    - children: Ordered list of child nodes, owned by this node
    - parent: Back-reference to the owning node, or None for a root
    - expanded / selected / lazy / loading: State flags

    Children are attached at construction time or through add_child(),
    which sets their parent link. The children list must not be edited
    directly: parent links would go out of sync.

    Example:
        >>> root = TreeViewNode('Documents', children=[
        ...     TreeViewNode('report.txt'),
        ...     TreeViewNode('notes.txt'),
        ... ])
        >>> root.expanded
        True
        >>> root.children[0].parent is root
        True
    """

    __slots__ = (
        'content', 'leading', 'value', 'children', 'parent',
        'collapsable', 'expanded', 'selected', 'autofocus', 'lazy',
        'loading', 'loading_widget', 'semantic_label',
        'on_invoked', 'on_expand_toggle',
    )

    def __init__(
        self,
        content: Any,
        *,
        leading: Any = None,
        value: T | None = None,
        children: Iterable[TreeViewNode[T]] | None = None,
        collapsable: bool = True,
        expanded: bool | None = None,
        selected: TriState = False,
        autofocus: bool = False,
        lazy: bool = False,
        loading: bool = False,
        loading_widget: Any = None,
        semantic_label: str | None = None,
        on_invoked: Hook | None = None,
        on_expand_toggle: Hook | None = None,
    ) -> None:
        """Initialize a TreeViewNode.

        Args:
            content: Display payload. Opaque to the tree algorithms.
            leading: Optional secondary payload (icon).
            value: Optional caller payload.
            children: Initial children. Each one is attached to this node.
            collapsable: Whether interactive collapse is permitted.
            expanded: Initial expansion. Defaults to True when children
                are given, False otherwise.
            selected: Initial tri-state selection.
            autofocus: Presentation flag.
            lazy: If True the node is expandable before it has children.
            loading: True while lazy children are being fetched.
            loading_widget: Presentation payload shown while loading.
            semantic_label: Accessibility label.
            on_invoked: Hook fired by the view layer when the node is invoked.
            on_expand_toggle: Hook fired after the expansion state changed.

        No child is attached when any of them is rejected.

        Raises:
            AlreadyAttachedError: If a child already has a parent or is
                listed twice.
            CycleError: If a child is this node.
        """
        self.content = content
        self.leading = leading
        self.value = value
        self.children: list[TreeViewNode[T]] = []
        self.parent: TreeViewNode[T] | None = None
        self.collapsable = collapsable
        self.selected: TriState = selected
        self.autofocus = autofocus
        self.lazy = lazy
        self.loading = loading
        self.loading_widget = loading_widget
        self.semantic_label = semantic_label
        self.on_invoked = on_invoked
        self.on_expand_toggle = on_expand_toggle

        for child in self._checked_children(children or ()):
            child.parent = self
            self.children.append(child)
        self.expanded = bool(self.children) if expanded is None else expanded

    def __repr__(self) -> str:
        return (
            f"TreeViewNode({self.content!r}, selected={self.selected!r}, "
            f"children={len(self.children)})"
        )

    def __eq__(self, other: object) -> bool:
        from .equality import nodes_equal
        if not isinstance(other, TreeViewNode):
            return NotImplemented
        return nodes_equal(self, other)

    def __hash__(self) -> int:
        from .equality import node_hash
        return node_hash(self)

    def __copy__(self) -> TreeViewNode[T]:
        from .clone import clone
        return clone(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> TreeViewNode[T]:
        from .clone import clone
        return clone(self, copy_payload=lambda payload: copy.deepcopy(payload, memo))

    # ==================== Properties ====================

    @property
    def is_expandable(self) -> bool:
        """True if the node is lazy or has children."""
        return is_expandable(self)

    @property
    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return not self.children

    @property
    def depth(self) -> int:
        """Number of hops to the root (root=0)."""
        from .walker import depth
        return depth(self)

    @property
    def root(self) -> TreeViewNode[T]:
        """The topmost node of this node's tree."""
        from .walker import root
        return root(self)

    # ==================== Relationships ====================

    def add_child(
        self, child: TreeViewNode[T], position: int | None = None
    ) -> TreeViewNode[T]:
        """Attach a child, appending it or inserting it at position.

        Args:
            child: The node to attach. Must not have a parent.
            position: Optional insertion index (supports negative indexing).

        Returns:
            The attached child, for chaining.

        Raises:
            AlreadyAttachedError: If child already has a parent.
            CycleError: If child is this node or one of its ancestors.
        """
        self._checked_children([child])
        child.parent = self
        if position is None:
            self.children.append(child)
        else:
            self.children.insert(position, child)
        logger.debug("Attached %r to %r", child, self)
        return child

    def remove_child(self, child: TreeViewNode[T]) -> TreeViewNode[T]:
        """Detach a child and return it as a new root.

        Raises:
            ValueError: If child is not a child of this node.
        """
        for i, current in enumerate(self.children):
            if current is child:
                del self.children[i]
                child.parent = None
                logger.debug("Detached %r from %r", child, self)
                return child
        raise ValueError(f"{child!r} is not a child of {self!r}")

    def set_children(self, children: Iterable[TreeViewNode[T]]) -> None:
        """Replace all children, detaching the previous ones.

        Current children may be listed again to keep them. The whole list
        is checked first: on error the node keeps its previous children.

        Raises:
            AlreadyAttachedError: If a new child has another parent or is
                listed twice.
            CycleError: If a new child is this node or one of its ancestors.
        """
        new_children = self._checked_children(children, keep=self.children)
        for child in self.children:
            child.parent = None
        for child in new_children:
            child.parent = self
        self.children = new_children

    def _checked_children(
        self,
        children: Iterable[TreeViewNode[T]],
        keep: Iterable[TreeViewNode[T]] = (),
    ) -> list[TreeViewNode[T]]:
        """Validate children for attachment below this node, without attaching.

        Nodes in keep are already children of this node and may be listed.
        """
        checked = list(children)
        kept = {id(child) for child in keep}
        seen: set[int] = set()
        for child in checked:
            if id(child) in seen:
                raise AlreadyAttachedError(f"{child!r} is listed twice")
            seen.add(id(child))
            if child.parent is not None and id(child) not in kept:
                raise AlreadyAttachedError(
                    f"{child!r} is already attached to {child.parent!r}"
                )

        node: TreeViewNode[T] | None = self
        while node is not None:
            if id(node) in seen:
                raise CycleError(f"{node!r} cannot be attached below itself")
            node = node.parent
        return checked

    def clone(self) -> TreeViewNode[T]:
        """Return an independent deep copy of this node and its subtree."""
        from .clone import clone
        return clone(self)


def is_expandable(node: TreeViewNode[Any]) -> bool:
    """Return True if node can be expanded: lazy, or with children."""
    return node.lazy or bool(node.children)
