# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree assembly from plain data, and population of lazy nodes.

A dict source uses the TreeViewNode keyword names as keys; its
'children' entry is a list source. A list source holds dicts or plain
values, a plain value becoming the node content.

Example:
    >>> items = load_from_list([
    ...     {'content': 'src', 'children': ['main.py', 'util.py']},
    ...     {'content': 'remote', 'lazy': True},
    ... ])
    >>> [n.content for n in items[0].children]
    ['main.py', 'util.py']
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Iterable

from .node import TreeViewNode
from .walker import iter_descendants, iter_postorder

logger = logging.getLogger(__name__)

_NODE_KEYS = frozenset(
    name for name in inspect.signature(TreeViewNode.__init__).parameters
    if name != 'self'
)

_DATA_FIELDS = (
    'content', 'leading', 'value', 'collapsable', 'expanded', 'selected',
    'autofocus', 'lazy', 'loading', 'loading_widget', 'semantic_label',
)


def _check_list(source: Any) -> None:
    if not isinstance(source, list):
        raise TypeError(f"source must be list, not {type(source).__name__}")


def _node_kwargs(source: dict[str, Any]) -> dict[str, Any]:
    unknown = set(source) - _NODE_KEYS
    if unknown:
        raise TypeError(f"Unknown node keys: {', '.join(sorted(unknown))}")
    if 'content' not in source:
        raise TypeError("Node source requires 'content'")
    return dict(source)


def _load(source: list[Any]) -> list[TreeViewNode[Any]]:
    roots: list[TreeViewNode[Any]] = []
    pending: list[tuple[TreeViewNode[Any], list[TreeViewNode[Any]]]] = []
    stack = [(item, roots) for item in reversed(source)]
    while stack:
        item, siblings = stack.pop()
        if not isinstance(item, dict):
            siblings.append(TreeViewNode(item))
            continue
        kwargs = _node_kwargs(item)
        content = kwargs.pop('content')
        children = kwargs.pop('children', None)
        if children is not None:
            _check_list(children)
            if kwargs.get('expanded') is None:
                kwargs['expanded'] = bool(children)
        node = TreeViewNode(content, **kwargs)
        siblings.append(node)
        if children:
            kids: list[TreeViewNode[Any]] = []
            pending.append((node, kids))
            stack.extend((child, kids) for child in reversed(children))

    for node, kids in reversed(pending):
        node.set_children(kids)
    return roots


def load_from_dict(source: dict[str, Any]) -> TreeViewNode[Any]:
    """Build one node (and its subtree) from a dict.

    Raises:
        TypeError: On unknown keys, a missing 'content', or a non-dict source.
    """
    if not isinstance(source, dict):
        raise TypeError(f"source must be dict, not {type(source).__name__}")
    return _load([source])[0]


def load_from_list(source: list[Any]) -> list[TreeViewNode[Any]]:
    """Build a list of root nodes from a list of dicts or plain values.

    Raises:
        TypeError: If source is not a list.
    """
    _check_list(source)
    return _load(source)


def as_dict(node: TreeViewNode[Any]) -> dict[str, Any]:
    """Convert a node and its subtree to a plain dict (hooks excluded)."""
    results: dict[int, dict[str, Any]] = {}
    for current in iter_postorder([node]):
        result = {name: getattr(current, name) for name in _DATA_FIELDS}
        result['children'] = [results.pop(id(child)) for child in current.children]
        results[id(current)] = result
    return results.pop(id(node))


def mark_loading(node: TreeViewNode[Any]) -> None:
    """Flag a lazy node as fetching its children."""
    node.loading = True


def load_children(
    node: TreeViewNode[Any], children: Iterable[TreeViewNode[Any]]
) -> None:
    """Install the children fetched for a lazy node.

    Replaces the current children and clears the loading flag. When
    the node is fully selected the new subtree is selected too.
    """
    node.set_children(children)
    node.loading = False
    if node.selected is True:
        for descendant in iter_descendants(node):
            descendant.selected = True
    logger.debug("Loaded %d children into %r", len(node.children), node.content)
