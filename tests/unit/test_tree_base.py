"""Unit tests for the shared BinaryTree queries and exports."""

import pytest

from search_trees import EmptyTreeError, IdealTree, TreeConfig, UnbalancedTree


@pytest.fixture
def empty_tree():
    """Create empty tree for tests."""
    return UnbalancedTree()


@pytest.fixture
def five_tree():
    """Ideal tree over 1..5: 3 at the root, 1 and 4 below, 2 and 5 at depth 3."""
    return IdealTree([1, 2, 3, 4, 5])


def test_empty_tree_queries(empty_tree):
    """Test queries on a tree without nodes."""
    assert empty_tree.size() == 0
    assert empty_tree.height() == 0
    assert empty_tree.checksum() == 0
    assert empty_tree.root is None
    assert empty_tree.is_empty()
    assert empty_tree.to_list() == []
    assert empty_tree.export() == []
    assert empty_tree.pretty_print() == "<empty>"


def test_average_depth_on_empty_tree_raises(empty_tree):
    """Test that average depth of an empty tree is an explicit error."""
    with pytest.raises(EmptyTreeError):
        empty_tree.average_depth()


def test_single_node_queries():
    """Test queries on a one-node tree."""
    tree = UnbalancedTree([42])
    assert tree.size() == 1
    assert tree.height() == 1
    assert tree.average_depth() == 1.0
    assert tree.checksum() == 42


def test_queries_on_known_shape(five_tree):
    """Test size, height, average depth and checksum on a fixed shape."""
    assert five_tree.size() == 5
    assert len(five_tree) == 5
    assert five_tree.height() == 3
    # depths 1 + 2 + 2 + 3 + 3
    assert five_tree.average_depth() == pytest.approx(11 / 5)
    assert five_tree.checksum() == 15


def test_checksum_of_text_payloads_is_zero():
    """Test that non-numeric payloads have no checksum."""
    tree = UnbalancedTree(["pear", "apple", "fig"])
    assert tree.checksum() == 0
    assert tree.to_list() == ["apple", "fig", "pear"]


def test_float_checksum():
    """Test checksum over float payloads."""
    tree = UnbalancedTree([1.5, 0.25, 2.0])
    assert tree.checksum() == pytest.approx(3.75)


def test_contains_and_iteration(five_tree):
    """Test membership and in-order iteration."""
    assert 4 in five_tree
    assert 6 not in five_tree
    assert five_tree.contains(1)
    assert list(five_tree) == [1, 2, 3, 4, 5]


def test_node_lookup_by_order_id():
    """Test that order ids map to nodes and disappear after delete."""
    tree = UnbalancedTree([20, 10, 30])
    assert tree.node(0).value == 20
    assert tree.node(1).value == 10
    assert tree.node(2).value == 30
    assert tree.next_order_id == 3

    tree.delete(10)
    assert tree.node(1) is None
    assert tree.node(99) is None


def test_export_records():
    """Test the per-node export used by the diagram renderer."""
    tree = IdealTree([1, 2, 3])

    records = tree.export()

    assert records == [
        {"order_id": 0, "label": "2", "left": 1, "right": 2},
        {"order_id": 1, "label": "1", "left": None, "right": None},
        {"order_id": 2, "label": "3", "left": None, "right": None},
    ]


def test_pretty_print_is_sideways():
    """Test right-root-left display with growing indentation."""
    tree = IdealTree([1, 2, 3])

    lines = tree.pretty_print().split("\n")

    assert lines == [
        "3".rjust(20),
        "2".rjust(10),
        "1".rjust(20),
    ]


def test_pretty_print_uses_configured_indent():
    """Test that indent_step comes from the tree configuration."""
    tree = IdealTree([1, 2, 3], config=TreeConfig(indent_step=4))

    assert tree.pretty_print().split("\n") == ["       3", "   2", "       1"]
    assert tree.pretty_print(indent_step=2).split("\n") == ["   3", " 2", "   1"]


def test_print_writes_display(capsys):
    """Test that print() writes the text display to stdout."""
    IdealTree([1, 2, 3]).print()
    assert capsys.readouterr().out.split("\n")[1] == "2".rjust(10)


def test_degenerate_tree_queries_do_not_recurse():
    """Test queries on a chain deeper than the interpreter recursion limit."""
    n = 2000
    tree = UnbalancedTree(range(n))

    assert tree.height() == n
    assert tree.size() == n
    assert tree.to_list() == list(range(n))
    assert tree.average_depth() == pytest.approx((n + 1) / 2)
    assert len(tree.pretty_print().split("\n")) == n
