"""Tests for the functional API."""

import pytest

from nodetreelib import (
    Node,
    ConfigurationError,
    TraversalConfig,
    DepthConfig,
    FilterConfig,
    TraversalStrategy,
    traverse_tree,
    traverse_with_config,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    sort_nodes,
)


def ids(nodes):
    return "".join(node.id for node in nodes)


def test_traverse_tree_defaults_to_pre_order(uneven_tree):
    assert ids(traverse_tree(uneven_tree.a)) == "abecfg"


def test_traverse_tree_strategy(uneven_tree):
    assert ids(traverse_tree(uneven_tree.a, strategy="bfs")) == "abcefg"
    assert ids(traverse_tree(uneven_tree.a, strategy=TraversalStrategy.DEPTH_FIRST_POST)) == "ebfgca"


def test_exclude_filter_prunes_subtree(uneven_tree):
    result = traverse_tree(uneven_tree.a, exclude_filter=lambda n: n.id == "c")
    assert ids(result) == "abe"


def test_exclude_filter_without_pruning(uneven_tree):
    result = traverse_tree(
        uneven_tree.a,
        exclude_filter=lambda n: n.id == "c",
        prune_on_exclude=False,
    )
    assert ids(result) == "abefg"


def test_include_filter_keeps_searching_below(uneven_tree):
    result = traverse_tree(uneven_tree.a, include_filter=lambda n: n.id in "ag")
    assert ids(result) == "ag"


def test_invalid_depth_window_raises(uneven_tree):
    with pytest.raises(ConfigurationError, match="max_depth cannot be less than min_depth"):
        list(traverse_tree(uneven_tree.a, min_depth=2, max_depth=1))
    with pytest.raises(ConfigurationError):
        list(traverse_tree(uneven_tree.a, min_depth=-1))


def test_unknown_strategy_raises(uneven_tree):
    with pytest.raises(ValueError):
        list(traverse_tree(uneven_tree.a, strategy="zigzag"))


def test_traverse_with_config(uneven_tree):
    config = TraversalConfig(
        strategy=TraversalStrategy.LEVEL_ORDER,
        depth=DepthConfig(min_depth=1),
        filter=FilterConfig(include_filter=lambda n: n.is_leaf()),
    )
    assert ids(traverse_with_config(uneven_tree.a, config)) == "efg"


def test_shallow_scan_config(uneven_tree):
    assert ids(traverse_with_config(uneven_tree.a, TraversalConfig.shallow_scan())) == "abc"


def test_count_nodes(example_tree):
    assert count_nodes(example_tree.node0) == 5
    assert count_nodes(example_tree.node0, max_depth=1) == 3
    assert count_nodes(example_tree.node2) == 3


def test_find_nodes(example_tree):
    found = list(find_nodes(example_tree.node0, lambda n: n.content.startswith("t")))
    assert found == [example_tree.node2, example_tree.node3]


def test_get_leaf_nodes_matches_leaves(example_tree):
    assert list(get_leaf_nodes(example_tree.node0)) == example_tree.node0.leaves()


def test_get_tree_paths(example_tree):
    paths = list(get_tree_paths(example_tree.node0))
    assert paths == [[0], [0, 1], [0, 2], [0, 2, 3], [0, 2, 4]]


def test_get_tree_paths_from_subtree(example_tree):
    assert list(get_tree_paths(example_tree.node2)) == [[2], [2, 3], [2, 4]]


def test_get_tree_stats(example_tree):
    stats = get_tree_stats(example_tree.node0)

    assert stats['total_nodes'] == 5
    assert stats['leaf_nodes'] == 3
    assert stats['internal_nodes'] == 2
    assert stats['max_depth'] == 2
    assert stats['depths'] == {0: 1, 1: 2, 2: 2}
    assert stats['average_branching'] == 2


def test_get_tree_stats_single_node():
    stats = get_tree_stats(Node("solo"))
    assert stats['total_nodes'] == 1
    assert stats['average_branching'] == 0


def test_sort_nodes(example_tree):
    ordered = sort_nodes(example_tree.node0)
    assert [n.content for n in ordered] == ["four", "one", "three", "two", "zero"]


def test_sort_nodes_reverse_with_key(example_tree):
    ordered = sort_nodes(example_tree.node0, map_node=lambda n: n.id, reverse=True)
    assert [n.id for n in ordered] == [4, 3, 2, 1, 0]


def test_get_tree_stats_counts_depth_frontier_as_leaves():
    root = Node("r")
    one = root.add(Node("1"))
    one.push(Node("2"), Node("3"), Node("4"))

    stats = get_tree_stats(root, max_depth=1)

    assert stats['total_nodes'] == 2
    assert stats['leaf_nodes'] == 1
    assert stats['internal_nodes'] == 1
    assert stats['average_branching'] == 1
