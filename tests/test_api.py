"""Tests for the high-level functional API."""

import pytest

from treetraversal import (
    TraversalOrder,
    CapabilityMismatchError,
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)
from treetraversal.api import _parse_order

from conftest import SAMPLE_MAPPING


def children(node):
    return SAMPLE_MAPPING.get(node, [])


PARENTS = {child: parent for parent, kids in SAMPLE_MAPPING.items() for child in kids}


def parent(node):
    return PARENTS.get(node)


class TestTraverseTree:

    def test_default_is_pre_order(self):
        assert list(traverse_tree("A", children)) == ["A", "B", "D", "E", "C", "F", "G"]

    @pytest.mark.parametrize("order, expected", [
        ("post", ["D", "E", "B", "F", "G", "C", "A"]),
        ("bfs", ["A", "B", "C", "D", "E", "F", "G"]),
        (TraversalOrder.LEVEL_ORDER, ["A", "B", "C", "D", "E", "F", "G"]),
        ("DFS_PRE", ["A", "B", "D", "E", "C", "F", "G"]),
    ])
    def test_downward_orders_by_name(self, order, expected):
        assert list(traverse_tree("A", children, order=order)) == expected

    @pytest.mark.parametrize("order, start, expected", [
        ("reverse", "G", ["G", "F", "C", "B", "A"]),
        ("post_continuation", "C", ["F", "G", "C", "A"]),
        ("pre_continuation", "B", ["B", "D", "E", "C", "F", "G"]),
    ])
    def test_upward_orders_with_default_index_accessors(self, order, start, expected):
        assert list(traverse_tree(start, children, order=order, parent=parent)) == expected

    def test_explicit_index_accessors_are_used(self):
        calls = []

        def index_of(node, child):
            calls.append((node, child))
            return SAMPLE_MAPPING[node].index(child)

        result = traverse_tree(
            "E", children, order="post_order_continuation", parent=parent,
            child_at=lambda node, index: SAMPLE_MAPPING[node][index], index_of=index_of,
        )

        assert list(result) == ["E", "B", "F", "G", "C", "A"]
        assert calls == [("B", "E"), ("A", "B")]

    def test_upward_order_without_parent_fails(self):
        with pytest.raises(CapabilityMismatchError):
            list(traverse_tree("G", children, order="reverse"))

    def test_unknown_order(self):
        with pytest.raises(ValueError, match="Unknown traversal order: sideways"):
            list(traverse_tree("A", children, order="sideways"))

    def test_bad_arguments_fail_at_call_time(self):
        calls = []

        def recording(node):
            calls.append(node)
            return children(node)

        with pytest.raises(ValueError):
            traverse_tree("A", recording, order="sideways")
        with pytest.raises(CapabilityMismatchError):
            traverse_tree("G", recording, order="post_continuation")
        with pytest.raises(CapabilityMismatchError):
            traverse_tree("A", recording, max_nodes=0)
        assert calls == []

    def test_filters_and_limit(self):
        result = traverse_tree("A", children, order="level",
                               exclude_filter=lambda n: n in ("B", "C"), max_nodes=3)
        assert list(result) == ["A", "D", "E"]

    def test_on_error_sees_accessor_fault(self):
        seen = []

        def broken(node):
            raise RuntimeError("backend unavailable")

        with pytest.raises(RuntimeError, match="backend unavailable"):
            list(traverse_tree("A", broken, on_error=lambda start, error: seen.append(start)))
        assert seen == ["A"]


class TestHelpers:

    def test_count_nodes(self):
        assert count_nodes("A", children) == 7
        assert count_nodes("C", children) == 3
        assert count_nodes("E", children, order="pre_continuation", parent=parent) == 4

    def test_find_nodes(self):
        vowels_or_late = find_nodes("A", children, lambda n: n in "AEG", order="post")
        assert list(vowels_or_late) == ["E", "G", "A"]

    def test_get_leaf_nodes(self):
        assert list(get_leaf_nodes("A", children)) == ["D", "E", "F", "G"]
        assert list(get_leaf_nodes("B", children, order="post")) == ["D", "E"]

    def test_get_tree_stats(self):
        stats = get_tree_stats("A", children)

        assert stats['total_nodes'] == 7
        assert stats['leaf_nodes'] == 4
        assert stats['internal_nodes'] == 3
        assert stats['max_depth'] == 2
        assert stats['depths'] == {0: 1, 1: 2, 2: 4}
        assert stats['average_branching'] == 2.0

    def test_get_tree_stats_single_node(self):
        stats = get_tree_stats("G", children)

        assert stats['total_nodes'] == 1
        assert stats['leaf_nodes'] == 1
        assert stats['max_depth'] == 0
        assert stats['average_branching'] == 0


def test_parse_order_aliases():
    assert _parse_order("pre") is TraversalOrder.PRE_ORDER
    assert _parse_order("Level_Order") is TraversalOrder.LEVEL_ORDER
    assert _parse_order("post_order_continuation") is TraversalOrder.POST_ORDER_CONTINUATION
    assert _parse_order(TraversalOrder.REVERSE_ORDER) is TraversalOrder.REVERSE_ORDER
