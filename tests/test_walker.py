# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for ancestor, depth, root and traversal helpers."""

from genro_treeview import (
    TreeViewNode,
    depth,
    for_each_ancestor,
    is_ancestor_of,
    iter_ancestors,
    iter_descendants,
    iter_postorder,
    root,
    walk,
)


def _chain(length):
    """Build a linear chain of nodes, returning them top-down."""
    nodes = [TreeViewNode(f'n{length - 1}')]
    for i in range(length - 2, -1, -1):
        nodes.insert(0, TreeViewNode(f'n{i}', children=[nodes[0]]))
    return nodes


class TestDepthAndRoot:
    """Tests for depth() and root()."""

    def test_root_depth_is_zero(self, deep_tree):
        """Test a root has depth 0 and is its own root."""
        assert depth(deep_tree) == 0
        assert root(deep_tree) is deep_tree

    def test_depth_increments_per_level(self, deep_tree):
        """Test depth(child) == depth(parent) + 1 everywhere."""
        for node in iter_descendants(deep_tree):
            assert depth(node) == depth(node.parent) + 1

    def test_root_of_every_node(self, deep_tree):
        """Test depth(root(n)) == 0 and root is the tree root."""
        for node in walk([deep_tree]):
            assert root(node) is deep_tree
            assert depth(root(node)) == 0

    def test_node_properties_delegate(self, deep_tree):
        """Test the depth and root node properties."""
        x2 = deep_tree.children[0].children[1]
        assert x2.depth == 2
        assert x2.root is deep_tree

    def test_long_chain(self):
        """Test depth on a deep linear chain."""
        nodes = _chain(50)
        assert depth(nodes[-1]) == 49
        assert root(nodes[-1]) is nodes[0]


class TestAncestors:
    """Tests for ancestor iteration order."""

    def test_root_has_no_ancestors(self, deep_tree):
        """Test for_each_ancestor does nothing on a root."""
        visited = []
        for_each_ancestor(deep_tree, visited.append)
        assert visited == []

    def test_nearest_first_root_last(self):
        """Test ancestors are visited from parent up to root."""
        nodes = _chain(4)
        visited = []
        for_each_ancestor(nodes[3], lambda n: visited.append(n.content))
        assert visited == ['n2', 'n1', 'n0']

    def test_start_node_never_visited(self, deep_tree):
        """Test the starting node is excluded."""
        x1 = deep_tree.children[0].children[0]
        assert all(n is not x1 for n in iter_ancestors(x1))
        assert [n.content for n in iter_ancestors(x1)] == ['x', 'root']

    def test_is_ancestor_of(self, deep_tree):
        """Test strict ancestor check."""
        x = deep_tree.children[0]
        x1 = x.children[0]
        assert is_ancestor_of(deep_tree, x1)
        assert is_ancestor_of(x, x1)
        assert not is_ancestor_of(x1, x1)
        assert not is_ancestor_of(x1, deep_tree)


class TestWalk:
    """Tests for pre-order traversal."""

    def test_walk_generator(self, deep_tree):
        """Test walk yields parents before children, in order."""
        assert [n.content for n in walk([deep_tree])] == [
            'root', 'x', 'x1', 'x2', 'y',
        ]

    def test_walk_callback(self, deep_tree):
        """Test walk with callback returns None and visits every node."""
        seen = []
        result = walk([deep_tree], lambda n: seen.append(n.content))
        assert result is None
        assert seen == ['root', 'x', 'x1', 'x2', 'y']

    def test_walk_forest(self):
        """Test walk over several roots."""
        items = [TreeViewNode('a', children=[TreeViewNode('a1')]), TreeViewNode('b')]
        assert [n.content for n in walk(items)] == ['a', 'a1', 'b']

    def test_iter_descendants_excludes_node(self, deep_tree):
        """Test iter_descendants skips the starting node."""
        assert [n.content for n in iter_descendants(deep_tree)] == [
            'x', 'x1', 'x2', 'y',
        ]

    def test_iter_postorder(self, deep_tree):
        """Test children come before their parent, in order."""
        assert [n.content for n in iter_postorder([deep_tree])] == [
            'x1', 'x2', 'x', 'y', 'root',
        ]
