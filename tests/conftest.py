# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for TreeView tests."""

import pytest

from genro_treeview import TreeViewNode


@pytest.fixture
def abc_tree():
    """Root A with leaf children B and C, all unselected."""
    b = TreeViewNode('B')
    c = TreeViewNode('C')
    a = TreeViewNode('A', children=[b, c])
    return a, b, c


@pytest.fixture
def deep_tree():
    """Three-level tree: root > (x > (x1, x2), y)."""
    x1 = TreeViewNode('x1', value=1)
    x2 = TreeViewNode('x2', value=2, leading='icon')
    x = TreeViewNode('x', children=[x1, x2], semantic_label='folder x')
    y = TreeViewNode('y', lazy=True)
    root = TreeViewNode('root', children=[x, y])
    return root
