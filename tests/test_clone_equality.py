# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for subtree cloning and structural equality."""

import copy

import pytest

from genro_treeview import (
    TreeViewNode,
    clone,
    iter_descendants,
    node_hash,
    nodes_equal,
    walk,
)


def _on_invoked(node, reason):
    return None


class TestClone:
    """Tests for clone()."""

    def test_clone_equals_original(self, deep_tree):
        """Test clone(n) == n for a nested subtree."""
        copied = clone(deep_tree)
        assert nodes_equal(copied, deep_tree)
        assert copied == deep_tree

    def test_clone_of_clone_equals_original(self, deep_tree):
        """Test clone(clone(n)) == n."""
        assert clone(clone(deep_tree)) == deep_tree

    def test_clone_shares_no_nodes(self, deep_tree):
        """Test no TreeViewNode instance is shared with the original."""
        originals = {id(n) for n in walk([deep_tree])}
        assert not originals & {id(n) for n in walk([clone(deep_tree)])}

    def test_clone_parent_links_rebuilt(self, deep_tree):
        """Test cloned children point at the cloned parent."""
        copied = clone(deep_tree)
        for node in iter_descendants(copied):
            assert node.parent is not None
            assert any(child is node for child in node.parent.children)
            assert node.root is copied

    def test_clone_of_subtree_is_root(self, deep_tree):
        """Test cloning an inner node yields a new root."""
        x = deep_tree.children[0]
        copied = clone(x)
        assert copied.parent is None
        assert copied == x

    def test_clone_keeps_fields_and_hooks(self):
        """Test scalar fields and hook references are carried over."""
        payload = {'id': 7}
        node = TreeViewNode(
            'n', leading='icon', value=payload, collapsable=False,
            expanded=True, selected=None, autofocus=True, lazy=True,
            loading=True, loading_widget='spinner', semantic_label='label',
            on_invoked=_on_invoked,
        )
        copied = node.clone()
        assert copied.value is payload
        assert copied.on_invoked is _on_invoked
        assert copied.selected is None
        assert copied.expanded is True
        assert copied.loading_widget == 'spinner'

    def test_clone_is_independent(self, abc_tree):
        """Test mutating the clone leaves the original untouched."""
        a, _, _ = abc_tree
        copied = clone(a)
        copied.children[0].selected = True
        copied.add_child(TreeViewNode('D'))
        assert a.children[0].selected is False
        assert len(a.children) == 2
        assert copied != a

    def test_copy_module(self, deep_tree):
        """Test copy.copy and copy.deepcopy produce equal clones."""
        deep_tree.children[0].children[0].value = [1, 2]
        shallow = copy.copy(deep_tree)
        deep = copy.deepcopy(deep_tree)
        assert shallow == deep_tree
        assert deep == deep_tree
        original_list = deep_tree.children[0].children[0].value
        assert shallow.children[0].children[0].value is original_list
        assert deep.children[0].children[0].value is not original_list


class TestEquality:
    """Tests for nodes_equal() and node_hash()."""

    def test_parent_ignored(self):
        """Test equal subtrees compare equal regardless of position."""
        loose = TreeViewNode('leaf')
        attached = TreeViewNode('leaf')
        TreeViewNode('root', children=[attached])
        assert loose == attached
        assert hash(loose) == hash(attached)

    @pytest.mark.parametrize('field, other', [
        ('content', 'other'),
        ('leading', 'icon'),
        ('value', 42),
        ('collapsable', False),
        ('expanded', True),
        ('selected', None),
        ('autofocus', True),
        ('lazy', True),
        ('loading', True),
        ('semantic_label', 'label'),
        ('on_expand_toggle', _on_invoked),
    ])
    def test_each_field_matters(self, field, other):
        """Test changing any data field breaks equality."""
        a = TreeViewNode('n')
        b = TreeViewNode('n')
        setattr(b, field, other)
        assert a != b

    def test_selected_true_differs_from_one(self):
        """Test bool fields are not equal to ints."""
        a = TreeViewNode('n', selected=True)
        b = TreeViewNode('n')
        b.selected = 1
        assert a != b

    def test_children_order_matters(self):
        """Test children are compared as an ordered sequence."""
        a = TreeViewNode('p', children=[TreeViewNode('x'), TreeViewNode('y')])
        b = TreeViewNode('p', children=[TreeViewNode('y'), TreeViewNode('x')])
        assert a != b

    def test_children_length_matters(self):
        """Test an extra child breaks equality."""
        a = TreeViewNode('p', children=[TreeViewNode('x')])
        b = TreeViewNode('p', children=[TreeViewNode('x')], expanded=True)
        b.add_child(TreeViewNode('y'))
        assert a != b

    def test_deep_difference_detected(self, deep_tree):
        """Test a change three levels down breaks equality."""
        copied = clone(deep_tree)
        copied.children[0].children[1].leading = 'other'
        assert copied != deep_tree

    def test_hash_consistent_with_equality(self, deep_tree):
        """Test equal nodes hash equally and work as dict keys."""
        copied = clone(deep_tree)
        assert node_hash(copied) == node_hash(deep_tree)
        assert {deep_tree: 'a'}[copied] == 'a'

    def test_unhashable_payload(self):
        """Test nodes with list payloads still hash and compare."""
        a = TreeViewNode(['a', 'b'], value={'k': 1})
        b = TreeViewNode(['a', 'b'], value={'k': 1})
        assert a == b
        assert hash(a) == hash(b)

    def test_not_equal_to_other_types(self):
        """Test comparison with a non-node."""
        assert TreeViewNode('n') != 'n'
