"""Unit tests for the unbalanced binary search tree."""

import logging
import random

import pytest

from search_trees import UnbalancedTree, build_unbalanced_empty


@pytest.fixture
def tree():
    """Tree with a known shape.

              50
           /      \\
         30        70
        /  \\     /  \\
       20   40   60   80
           /
          35
    """
    return UnbalancedTree([50, 30, 70, 20, 40, 60, 80, 35])


def test_insert_returns_created_flag():
    """Test insert reports whether a node was created."""
    t = build_unbalanced_empty()
    assert t.insert(5) is True
    assert t.insert(3) is True
    assert t.insert(5) is False
    assert t.size() == 2


def test_insert_follows_comparisons(tree):
    """Test that new values become leaves on the search path."""
    assert tree.root.value == 50
    assert tree.root.left.right.left.value == 35
    assert tree.height() == 4


def test_sorted_insertion_degenerates():
    """Test that ascending insertion builds a right chain."""
    t = UnbalancedTree(range(10))
    assert t.height() == 10
    assert t.root.left is None


def test_delete_leaf(tree):
    """Test deleting a node without children."""
    assert tree.delete(80) is True
    assert tree.root.right.right is None
    assert 80 not in tree
    assert tree.size() == 7


def test_delete_node_with_one_child(tree):
    """Test that a single child takes the deleted node's place."""
    assert tree.delete(40) is True
    assert tree.root.left.right.value == 35
    assert tree.to_list() == [20, 30, 35, 50, 60, 70, 80]


def test_delete_with_adjacent_predecessor(tree):
    """Test two-child delete where the predecessor is the left child itself."""
    assert tree.delete(30) is True

    replacement = tree.root.left
    assert replacement.value == 20
    assert replacement.left is None
    assert replacement.right.value == 40
    assert replacement.right.left.value == 35


def test_delete_with_deep_predecessor(tree):
    """Test two-child delete where the predecessor sits deeper in the left subtree."""
    predecessor = tree.root.left.right
    assert tree.delete(50) is True

    assert tree.root is predecessor
    assert tree.root.value == 40
    assert tree.root.left.value == 30
    assert tree.root.left.right.value == 35
    assert tree.root.right.value == 70
    assert tree.to_list() == [20, 30, 35, 40, 60, 70, 80]


def test_delete_releases_order_id(tree):
    """Test that the removed cell leaves the order id registry."""
    removed_id = tree.root.order_id
    tree.delete(50)
    assert tree.node(removed_id) is None
    assert tree.node(tree.root.order_id) is tree.root


def test_delete_absent_value_is_reported(tree, caplog):
    """Test that deleting an absent value is a logged no-op."""
    before = tree.export()

    with caplog.at_level(logging.WARNING):
        assert tree.delete(99) is False

    assert "No key found" in caplog.text
    assert tree.export() == before


def test_delete_from_empty_tree(caplog):
    """Test delete on an empty tree."""
    t = UnbalancedTree()
    with caplog.at_level(logging.WARNING):
        assert t.delete(1) is False
    assert "No key found" in caplog.text


def test_delete_root_until_empty():
    """Test repeatedly deleting the root."""
    t = UnbalancedTree([4, 2, 6, 1, 3, 5, 7])
    while not t.is_empty():
        assert t.delete(t.root.value)
    assert t.size() == 0
    assert t.root is None


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_keep_order_and_size(seed):
    """Test in-order sortedness and size accounting under random operations."""
    rng = random.Random(seed)
    t = UnbalancedTree()
    present = set()

    for _ in range(400):
        value = rng.randrange(100)
        if rng.random() < 0.6:
            assert t.insert(value) is (value not in present)
            present.add(value)
        else:
            assert t.delete(value) is (value in present)
            present.discard(value)

        assert t.to_list() == sorted(present)
        assert t.size() == len(present)


def test_deep_chain_insert_and_delete():
    """Test insert and delete on a chain deeper than the recursion limit."""
    n = 2000
    t = UnbalancedTree(range(n, 0, -1))
    assert t.height() == n

    for value in range(1, n + 1):
        assert t.delete(value)
    assert t.is_empty()
